# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from b32alphabet import Alphabet

# RFC 4648 section 6.
STD_ALPHABET = Alphabet(b"ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")
# RFC 4648 section 7, "base32hex".
HEX_ALPHABET = Alphabet(b"0123456789ABCDEFGHIJKLMNOPQRSTUV")

STD_PADDING = ord('=')
NO_PADDING = None

GROUP_BYTES = 5
GROUP_SYMBOLS = 8

QUINTET_MASK = 0x1F
BYTE_MASK = 0xFF
