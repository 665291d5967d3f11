# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""RFC 4648 base32 encoding and decoding.

The Encoder and Decoder classes write into caller supplied buffers sized with
their encode_len(..) and decode_len(..) methods. The encode(..) and
decode(..) functions of this module do that sizing themselves and return new
bytes objects.
"""

import llog

import functools
import logging

from b32alphabet import Alphabet, as_padding
from b32consts import STD_ALPHABET, HEX_ALPHABET, STD_PADDING, NO_PADDING
from b32decoder import Decoder
from b32encoder import Encoder
from b32error import Error, Base32Error, AlphabetError,\
    DestinationTooSmallError, CorruptInputError

log = logging.getLogger(__name__)

__all__ = [\
    "Alphabet", "Encoder", "Decoder", "Error", "Base32Error",
    "AlphabetError", "DestinationTooSmallError", "CorruptInputError",
    "STD_ALPHABET", "HEX_ALPHABET", "STD_PADDING", "NO_PADDING",
    "get_encoder", "get_decoder", "encode", "decode"]

def _cache_key(alphabet, padding):
    # Reduces equivalent configurations (str, bytearray, b"=", ...) to one
    # hashable form.
    if not isinstance(alphabet, Alphabet):
        alphabet = Alphabet(alphabet)

    return alphabet, as_padding(padding)

# Encoder and Decoder instances are immutable, so one instance per
# configuration can serve every caller.
@functools.lru_cache(maxsize=16)
def _cached_encoder(alphabet, padding):
    return Encoder(alphabet, padding)

@functools.lru_cache(maxsize=16)
def _cached_decoder(alphabet, padding):
    return Decoder(alphabet, padding)

def get_encoder(alphabet=STD_ALPHABET, padding=STD_PADDING):
    return _cached_encoder(*_cache_key(alphabet, padding))

def get_decoder(alphabet=STD_ALPHABET, padding=STD_PADDING):
    return _cached_decoder(*_cache_key(alphabet, padding))

def encode(data, alphabet=STD_ALPHABET, padding=STD_PADDING):
    "Encode bytes to base32, returning bytes."

    encoder = get_encoder(alphabet, padding)

    buf = bytearray(encoder.encode_len(len(data)))
    encoder.encode(data, buf)

    return bytes(buf)

def decode(data, alphabet=STD_ALPHABET, padding=STD_PADDING):
    "Decode base32 bytes (or an ASCII str), returning bytes."

    if isinstance(data, str):
        data = data.encode("ascii")

    decoder = get_decoder(alphabet, padding)

    buf = bytearray(decoder.decode_len(len(data)))
    n = decoder.decode(data, buf)

    del buf[n:]

    return bytes(buf)
