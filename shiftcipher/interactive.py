# -*- coding: utf-8 -*-

"""Encode one message and decode another, read interactively.

Example:

$ shiftcipher
Enter message: Hello World

Encoded message:
KHOOR ZRUOG

--------------------

Enter encrypted message: KHOOR ZRUOG

Decoded message:
HELLO WORLD
"""

import sys

import click

from shiftcipher import cipher
from shiftcipher.logs import set_debug


def run(operation, prompt, heading, allow_whitespace):
    """
    Prompt for a line, transform it and print the result or the error.

    :param operation: cipher.encode or cipher.decode
    :param prompt: string shown to the user
    :param heading: string printed above the result
    :param allow_whitespace: bool
    """
    text = click.prompt(prompt, default='', show_default=False)
    try:
        result = operation(text, allow_whitespace)
    except cipher.CipherError as exc:
        click.echo(str(exc))
    else:
        click.echo('\n%s:\n%s' % (heading, result))


@click.command()
@click.option('-D', '--debug', is_flag=True, default=False, envvar='SHIFTCIPHER_DEBUG',
              help='Log every character mapping.')
@click.option('--whitespace/--no-whitespace', default=True, help='Allow spaces between words.')
def main(debug, whitespace):
    """Encode a message, then decode an encrypted message."""
    set_debug(debug)
    run(cipher.encode, 'Enter message', 'Encoded message', whitespace)
    click.echo('\n--------------------\n')
    run(cipher.decode, 'Enter encrypted message', 'Decoded message', whitespace)
    return 0


if __name__ == '__main__':
    # pylint: disable=no-value-for-parameter
    sys.exit(main())
