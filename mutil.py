# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from bisect import bisect_left

accept_chars = b" !\"#$%&`()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_'abcdefghijklmnopqrstuvwxyz{|}~"
accept_chars = sorted(accept_chars)

width = 16

def hex_dump(data, offset=0, length=None):
    "Formats data[offset:length] as offset, hex words and printable chars."

    assert type(data) in (bytes, bytearray, memoryview), type(data)

    if length is None:
        length = len(data)

    output = []

    i = offset
    while i < length:
        row = data[i:min(i + width, length)]

        col1 = ""
        col2 = ""
        for j, val in enumerate(row):
            col1 += format(val, "02x")
            if j % 2 == 1:
                col1 += ' '

            si = bisect_left(accept_chars, val)
            if si != len(accept_chars) and accept_chars[si] == val:
                col2 += chr(val)
            else:
                col2 += '.'

        output.append("{}   {:<40} {}"\
            .format(format(i - offset, "#06x"), col1, col2))

        i += width

    return "\n".join(output)

def bit_shift(val, shift):
    "Shifts left for a positive shift, right for a negative one."

    if shift >= 0:
        return val << shift
    return val >> -shift
