# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import llog

import logging

import b32alphabet
from b32consts import GROUP_BYTES, GROUP_SYMBOLS, BYTE_MASK
from b32error import DestinationTooSmallError, CorruptInputError
from mutil import bit_shift, hex_dump

log = logging.getLogger(__name__)

INVALID = 0xFF

# Recipe for each of the five bytes of a group: the OR of up to three
# (symbol index, shift) fragments, masked to a byte. Positive shifts are to
# the left. This is the inverse of b32encoder.SYMBOL_RECIPES.
BYTE_RECIPES = (\
    ((0, 3), (1, -2)),
    ((1, 6), (2, 1), (3, -4)),
    ((3, 4), (4, -1)),
    ((4, 7), (5, 2), (6, -3)),
    ((6, 5), (7, 0)))

# Decoded byte count by symbol count of a group; other counts can't be
# produced by an encoder.
GROUP_OUTPUT = {2: 1, 4: 2, 5: 3, 7: 4, 8: 5}

def build_reverse_table(alphabet):
    table = [INVALID] * 256

    for i, char in enumerate(alphabet):
        table[char] = i

    return tuple(table)

class Decoder():
    def __init__(self, alphabet, padding):
        self._alphabet, self._padding = b32alphabet.prepare(alphabet, padding)
        self._reverse = build_reverse_table(self._alphabet)

        if log.isEnabledFor(logging.DEBUG):
            log.debug("Decoder ready; alphabet=[{}], padding=[{}]."\
                .format(self._alphabet, self._padding))

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def padding(self):
        return self._padding

    def decode_len(self, n):
        "Upper bound of the decoded size of n symbols."

        if self._padding is not None:
            return n // GROUP_SYMBOLS * GROUP_BYTES

        return n // GROUP_SYMBOLS * GROUP_BYTES\
            + (n % GROUP_SYMBOLS) * GROUP_BYTES // GROUP_SYMBOLS

    def decode(self, src, dst):
        """Decodes src into dst, returning the count of bytes written.

        On CorruptInputError dst may already hold the bytes of the groups
        preceding the bad one.
        """

        src_len = len(src)

        if not src_len:
            return 0

        required = self.decode_len(src_len)

        if len(dst) < required:
            raise DestinationTooSmallError(required, len(dst))

        reverse = self._reverse
        padding = self._padding

        group = [0] * GROUP_SYMBOLS

        si = 0
        di = 0

        while si < src_len:
            count = 0
            padded = False

            while count < GROUP_SYMBOLS and si + count < src_len:
                char = src[si + count]

                if char == padding:
                    padded = True
                    break

                val = reverse[char]
                if val == INVALID:
                    self._corrupt(src, si,\
                        "symbol [0x{:02x}] is not in the alphabet"\
                            .format(char))

                group[count] = val
                count += 1

            if padded:
                end = self._check_padding(src, si, count)
            else:
                if count < GROUP_SYMBOLS and padding is not None:
                    self._corrupt(src, si, "final group is not padded")
                end = si + count

            nbytes = GROUP_OUTPUT.get(count)
            if nbytes is None:
                self._corrupt(src, si,\
                    "a group can't hold [{}] symbols".format(count))

            for recipe in BYTE_RECIPES[:nbytes]:
                val = 0
                for idx, shift in recipe:
                    val |= bit_shift(group[idx], shift)

                dst[di] = val & BYTE_MASK
                di += 1

            si = end

        return di

    def _check_padding(self, src, si, count):
        # The padding must run to the end of its group, and that group must
        # be the last one.
        end = si + GROUP_SYMBOLS
        src_len = len(src)

        if end > src_len:
            self._corrupt(src, si, "padded group is truncated")

        for i in range(si + count, end):
            if src[i] != self._padding:
                self._corrupt(src, si, "symbol after padding")

        if end != src_len:
            self._corrupt(src, si, "data after the padded group")

        return end

    def _corrupt(self, src, si, reason):
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Corrupt group at offset [{}] ({}):\n{}"\
                .format(si, reason, hex_dump(\
                    src, si, min(si + GROUP_SYMBOLS, len(src)))))

        raise CorruptInputError(si, reason)
