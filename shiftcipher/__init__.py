# -*- coding: utf-8 -*-

"""Fixed-shift rotation cipher and command line tools around it."""

from shiftcipher.cipher import (  # noqa: F401
    ALPHABET,
    SHIFT,
    CipherError,
    EmptyInputError,
    InvalidInputError,
    decode,
    encode,
    normalize,
)
