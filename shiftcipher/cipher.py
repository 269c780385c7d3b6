# -*- coding: utf-8 -*-

"""Encode and decode text with a rotation cipher shifting letters by 3.

Only the letters A-Z (in either case) are accepted, optionally mixed with
plain spaces which are passed through untouched. Input is trimmed and
upper-cased before anything else happens, so decoding an encoded string
yields the normalized original:

>>> encode('Hello World')
'KHOOR ZRUOG'
>>> decode('KHOOR ZRUOG')
'HELLO WORLD'
"""

import logging
import re
import string

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase
SHIFT = 3

_LETTERS = re.compile(r'[A-Z]+')
_LETTERS_AND_SPACES = re.compile(r'[A-Z ]+')

# control characters and the plain space, nothing beyond U+0020
_TRIM = ''.join(chr(code) for code in range(0x21))


class CipherError(ValueError):
    """Input was rejected by encode() or decode()."""

    message = 'Rejected string passed in to %s'

    def __init__(self, operation, text):  # noqa: D107
        super().__init__(self.message % operation)
        self.operation = operation
        self.text = text


class EmptyInputError(CipherError):
    """Input is empty once surrounding whitespace is removed."""

    message = 'Empty string passed in to %s'


class InvalidInputError(CipherError):
    """Input contains a character outside the permitted set."""

    message = 'Invalid string passed in to %s'


def normalize(text):
    """Trim surrounding control characters and spaces, then upper-case."""
    return text.strip(_TRIM).upper()


def validate(text, operation, allow_whitespace=True):
    """
    Return the normalized text or raise if it may not be transformed.

    Only characters up to U+0020 are trimmed, so a leading no-break space
    is invalid while a leading NUL or tab is dropped.

    :param text: string as supplied by the caller
    :param operation: 'encode' or 'decode', used in messages
    :param allow_whitespace: bool, permit plain spaces in the body
    """
    trimmed = text.strip(_TRIM)
    if not trimmed:
        logger.debug('Attempt to use %s() with an empty string', operation)
        raise EmptyInputError(operation, trimmed)

    upper = trimmed.upper()
    pattern = _LETTERS_AND_SPACES if allow_whitespace else _LETTERS
    if pattern.fullmatch(upper) is None:
        logger.debug('Attempt to use %s() with an invalid string - %s', operation, trimmed)
        raise InvalidInputError(operation, trimmed)
    return upper


def _rotate(text, offset, allow_whitespace, trace):
    """Shift every letter of validated text by offset positions."""
    pairs = []
    out = []
    for char in text:
        if allow_whitespace and char == ' ':
            mapped = char
        else:
            mapped = ALPHABET[(ALPHABET.index(char) + offset) % len(ALPHABET)]
        pairs.append((char, mapped))
        out.append(mapped)

    if trace is None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('%s', ' '.join('%s %s' % pair for pair in pairs))
    else:
        for char, mapped in pairs:
            trace(char, mapped)
    return ''.join(out)


def encode(text, allow_whitespace=True, trace=None):
    """
    Encode text, rotating each letter forward by SHIFT positions.

    :param text: letters a-z or A-Z, and spaces if allow_whitespace is set
    :param allow_whitespace: bool, pass plain spaces through unchanged
    :param trace: optional callable receiving (char, mapped) per character
    :raises EmptyInputError: if text is blank
    :raises InvalidInputError: if text contains any other character
    """
    upper = validate(text, 'encode', allow_whitespace)
    return _rotate(upper, SHIFT, allow_whitespace, trace)


def decode(text, allow_whitespace=True, trace=None):
    """
    Decode text produced by encode(), rotating each letter back by SHIFT.

    :param text: letters a-z or A-Z, and spaces if allow_whitespace is set
    :param allow_whitespace: bool, pass plain spaces through unchanged
    :param trace: optional callable receiving (char, mapped) per character
    :raises EmptyInputError: if text is blank
    :raises InvalidInputError: if text contains any other character
    """
    upper = validate(text, 'decode', allow_whitespace)
    return _rotate(upper, -SHIFT, allow_whitespace, trace)
