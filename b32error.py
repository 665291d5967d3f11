# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Error kinds and exceptions raised by the base32 codec."""

from enum import Enum

class Error(Enum):
    # Raised only while constructing an Encoder or Decoder.
    DUPLICATE_IN_ALPHABET = 1
    PADDING_IN_ALPHABET = 2
    INVALID_CHARACTER_IN_ALPHABET = 3
    INVALID_PADDING = 4
    # Raised only by encode(..) and decode(..).
    DESTINATION_TOO_SMALL = 5
    CORRUPT_INPUT = 6

class Base32Error(Exception):
    def __init__(self, error, message):
        super().__init__(message)
        self.error = error

class AlphabetError(Base32Error):
    """Raised when an alphabet and padding do not form a usable mapping.
    The Encoder or Decoder being built is unusable; fix the configuration
    and construct it again.
    """
    pass

class DestinationTooSmallError(Base32Error):
    """Raised before anything is written to the destination buffer."""

    def __init__(self, required, available):
        super().__init__(Error.DESTINATION_TOO_SMALL,\
            "Destination buffer holds [{}] bytes but [{}] are required."\
                .format(available, required))

        self.required = required
        self.available = available

class CorruptInputError(Base32Error):
    """Raised on input that is not valid base32 for the decoder's alphabet
    and padding. Bytes of earlier groups may already have been written to
    the destination buffer; its content is undefined and should be
    discarded.
    """

    def __init__(self, offset, reason):
        super().__init__(Error.CORRUPT_INPUT,\
            "Corrupt input at offset [{}]: {}.".format(offset, reason))

        self.offset = offset
