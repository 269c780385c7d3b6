# -*- coding: utf-8 -*-

"""Shift cipher filter, converting standard input line by line."""

import sys

import click

from shiftcipher import cipher
from shiftcipher.logs import set_debug


def convert_lines(lines, operation, allow_whitespace=True):
    """
    Transform lines, yielding (lineno, result, error) for each one.

    Blank lines come back as empty results.

    :param lines: iterable of strings
    :param operation: cipher.encode or cipher.decode
    :param allow_whitespace: bool
    """
    for lineno, line in enumerate(lines, 1):
        if not line.strip():
            yield lineno, '', None
            continue
        try:
            yield lineno, operation(line, allow_whitespace), None
        except cipher.CipherError as exc:
            yield lineno, None, exc


@click.command()
@click.argument('infile', type=click.File('r', errors='replace'), default='-')
@click.option('-d', '--decode', is_flag=True, default=False, help='Decode instead of encode.')
@click.option('--whitespace/--no-whitespace', default=True, help='Allow spaces between words.')
@click.option('-D', '--debug', is_flag=True, default=False, envvar='SHIFTCIPHER_DEBUG')
def main(infile, decode, whitespace, debug):
    """Encode or decode every line of INFILE (default stdin)."""
    set_debug(debug)
    operation = cipher.decode if decode else cipher.encode
    failed = False
    for lineno, result, error in convert_lines(infile, operation, whitespace):
        if error is not None:
            click.echo('line %i: %s' % (lineno, error), err=True)
            failed = True
        else:
            click.echo(result)
    sys.exit(1 if failed else 0)


if __name__ == '__main__':
    # pylint: disable=no-value-for-parameter
    main()
