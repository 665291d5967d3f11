# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import llog

import logging

import b32alphabet
from b32consts import GROUP_BYTES, GROUP_SYMBOLS, QUINTET_MASK
from b32error import DestinationTooSmallError
from mutil import bit_shift

log = logging.getLogger(__name__)

# Recipe for each of the eight symbols of a group: the OR of at most two
# (byte index, shift) fragments, masked to a quintet. Positive shifts are to
# the left. Bytes past the end of a trailing group read as zero.
#
#   byte:   0        1        2        3        4
#   symbol: 00000111 11222223 33334444 45555566 66677777
SYMBOL_RECIPES = (\
    ((0, -3),),
    ((0, 2), (1, -6)),
    ((1, -1),),
    ((1, 4), (2, -4)),
    ((2, 1), (3, -7)),
    ((3, -2),),
    ((3, 3), (4, -5)),
    ((4, 0),))

# Symbols that carry input bits, by byte count of the trailing group.
TAIL_SYMBOLS = {1: 2, 2: 4, 3: 5, 4: 7}

class Encoder():
    def __init__(self, alphabet, padding):
        self._alphabet, self._padding = b32alphabet.prepare(alphabet, padding)

        if log.isEnabledFor(logging.DEBUG):
            log.debug("Encoder ready; alphabet=[{}], padding=[{}]."\
                .format(self._alphabet, self._padding))

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def padding(self):
        return self._padding

    def encode_len(self, n):
        if self._padding is not None:
            return (n + GROUP_BYTES - 1) // GROUP_BYTES * GROUP_SYMBOLS

        rem = n % GROUP_BYTES
        return n // GROUP_BYTES * GROUP_SYMBOLS\
            + (rem * 8 + GROUP_BYTES - 1) // GROUP_BYTES

    def encode(self, src, dst):
        """Encodes src into dst, returning the count of bytes written, which
        is always encode_len(len(src)).
        """

        src_len = len(src)
        required = self.encode_len(src_len)

        if len(dst) < required:
            raise DestinationTooSmallError(required, len(dst))

        if not src_len:
            return 0

        si = 0
        di = 0

        full_end = src_len - src_len % GROUP_BYTES
        while si < full_end:
            di = self._encode_group(src, si, GROUP_BYTES, dst, di,\
                GROUP_SYMBOLS)
            si += GROUP_BYTES

        tail = src_len - si
        if tail:
            di = self._encode_group(src, si, tail, dst, di, TAIL_SYMBOLS[tail])

            if self._padding is not None:
                while di % GROUP_SYMBOLS:
                    dst[di] = self._padding
                    di += 1

        assert di == required, (di, required)

        return di

    def _encode_group(self, src, start, avail, dst, di, count):
        alphabet = self._alphabet

        for recipe in SYMBOL_RECIPES[:count]:
            val = 0
            for idx, shift in recipe:
                if idx < avail:
                    val |= bit_shift(src[start + idx], shift)

            dst[di] = alphabet[val & QUINTET_MASK]
            di += 1

        return di
