# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import llog

import logging

from b32error import Error, AlphabetError

log = logging.getLogger(__name__)

ALPHABET_SIZE = 32

CR = 0x0D
LF = 0x0A

class Alphabet(bytes):
    "The 32 symbols of a base32 alphabet; index i encodes the quintet i."

    def __new__(cls, symbols):
        if isinstance(symbols, str):
            symbols = symbols.encode("ascii")

        if not isinstance(symbols, (bytes, bytearray)):
            raise TypeError("An alphabet is bytes or str, not [{}]."\
                .format(type(symbols).__name__))

        if len(symbols) != ALPHABET_SIZE:
            raise ValueError("An alphabet needs exactly [{}] symbols, got [{}]."\
                .format(ALPHABET_SIZE, len(symbols)))

        return bytes.__new__(cls, symbols)

    def __repr__(self):
        return "Alphabet({})".format(bytes(self))

def as_padding(padding):
    """Returns the padding symbol as an int, or None if padding is disabled.
    A single character (bytes or str) is accepted in place of its value.
    Negative values are rejected like any other non-byte value; None is the
    only way to disable padding.
    """

    if padding is None:
        return None

    if isinstance(padding, str):
        try:
            padding = padding.encode("latin-1")
        except UnicodeEncodeError:
            raise AlphabetError(Error.INVALID_PADDING,\
                "Padding symbol [{}] is not a byte value.".format(padding))

    if isinstance(padding, (bytes, bytearray)):
        if len(padding) != 1:
            raise AlphabetError(Error.INVALID_PADDING,\
                "Padding must be a single symbol, got [{}].".format(padding))
        return padding[0]

    if type(padding) is not int or not 0 <= padding <= 0xFF:
        raise AlphabetError(Error.INVALID_PADDING,\
            "Padding symbol [{!r}] is not a byte value.".format(padding))

    return padding

def validate(alphabet, padding):
    """Checks that alphabet and padding form an injective mapping free of
    line breaks. padding must already be normalized by as_padding(..).
    """

    seen = [False] * 256

    for i, char in enumerate(alphabet):
        if seen[char]:
            raise AlphabetError(Error.DUPLICATE_IN_ALPHABET,\
                "Symbol [0x{:02x}] repeats at index [{}].".format(char, i))
        if char in (CR, LF):
            raise AlphabetError(Error.INVALID_CHARACTER_IN_ALPHABET,\
                "Line break symbol at index [{}].".format(i))
        seen[char] = True

    if padding is None:
        return

    if padding in (CR, LF):
        raise AlphabetError(Error.INVALID_PADDING,\
            "Padding symbol can't be a line break.")

    if seen[padding]:
        raise AlphabetError(Error.PADDING_IN_ALPHABET,\
            "Padding symbol [0x{:02x}] is also an alphabet symbol."\
                .format(padding))

def prepare(alphabet, padding):
    "Normalizes and validates; returns (Alphabet, padding)."

    if not isinstance(alphabet, Alphabet):
        alphabet = Alphabet(alphabet)

    padding = as_padding(padding)

    try:
        validate(alphabet, padding)
    except AlphabetError as e:
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Rejected alphabet [{}] with padding [{}]: {}."\
                .format(alphabet, padding, e.error.name))
        raise

    return alphabet, padding
