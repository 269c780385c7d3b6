#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Setup the package."""

from setuptools import setup, find_packages

setup(
    name='shiftcipher',
    version='0.1.0',
    description='Fixed-shift rotation cipher with command line tools',
    packages=find_packages(),
    # https://packaging.python.org/tutorials/distributing-packages/#python-requires
    python_requires='>=3.7',
    license='MIT',
    install_requires=[
        'click >= 7.0',
    ],
    tests_require=['pytest>=3.0.7'],
    extras_require={
        'test': ['pytest>=3.0.7'],
    },
    entry_points={
        'console_scripts': [
            'shiftcipher = shiftcipher.interactive:main',
            'shiftcipher-filter = shiftcipher.filter:main',
        ]
    },
    data_files=[],
    classifiers=[
        'DO NOT UPLOAD',  # block pypi publication
        'Topic :: Security :: Cryptography',
        'Programming Language :: Python :: 3.7',
    ]
)
