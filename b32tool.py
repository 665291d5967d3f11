#!/usr/bin/python3
# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import llog

import argparse
import logging
import sys

import base32
from b32consts import STD_ALPHABET, HEX_ALPHABET, NO_PADDING
from b32error import Base32Error

log = logging.getLogger(__name__)

DEFAULT_WRAP = 76

def build_parser():
    parser = argparse.ArgumentParser(\
        description="Base32 (RFC 4648) encode or decode a file or stdin.")
    parser.add_argument(\
        "-l", dest="logconf",\
        help="Specify alternate logging.ini [IF SPECIFIED, THIS MUST BE THE"\
            " FIRST PARAMETER!].")
    parser.add_argument(\
        "-d", "--decode", action="store_true",\
        help="Decode instead of encode.")
    parser.add_argument(\
        "--hex", action="store_true",\
        help="Use the extended hex alphabet (0-9, A-V).")
    parser.add_argument(\
        "--alphabet",\
        help="Use the given 32 symbols as the alphabet.")
    parser.add_argument(\
        "--padding", default='=',\
        help="Padding symbol (default: =).")
    parser.add_argument(\
        "--nopad", action="store_true",\
        help="Neither emit nor expect padding.")
    parser.add_argument(\
        "-w", "--wrap", type=int, default=DEFAULT_WRAP,\
        help="Wrap encoded lines after COLS symbols, 0 disables"\
            " (default: {}).".format(DEFAULT_WRAP))
    parser.add_argument(\
        "-i",\
        help="Read input from the file instead of stdin.")
    parser.add_argument(\
        "-o",\
        help="Write output to the file instead of stdout.")

    return parser

def select_alphabet(args):
    if args.alphabet:
        return args.alphabet
    if args.hex:
        return HEX_ALPHABET
    return STD_ALPHABET

def select_padding(args):
    if args.nopad:
        return NO_PADDING
    return args.padding

def wrap_lines(data, cols):
    if not cols:
        return data

    out = bytearray()
    for i in range(0, len(data), cols):
        out += data[i:i + cols]
        out += b'\n'

    return bytes(out)

def strip_line_breaks(data):
    return data.replace(b'\r', b'').replace(b'\n', b'')

def process(args, data):
    alphabet = select_alphabet(args)
    padding = select_padding(args)

    if args.decode:
        return base32.decode(strip_line_breaks(data), alphabet, padding)

    return wrap_lines(base32.encode(data, alphabet, padding), args.wrap)

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.wrap < 0:
        parser.error("--wrap must not be negative.")

    log.info("b32tool running ({}).".format(\
        "decode" if args.decode else "encode"))

    if args.i:
        with open(args.i, "rb") as f:
            data = f.read()
    else:
        data = sys.stdin.buffer.read()

    try:
        result = process(args, data)
    except (Base32Error, ValueError) as e:
        log.error("Failed to {} input: {}".format(\
            "decode" if args.decode else "encode", e))
        return 1

    if args.o:
        with open(args.o, "wb") as f:
            f.write(result)
    else:
        sys.stdout.buffer.write(result)
        sys.stdout.buffer.flush()

    log.info("Wrote [{}] bytes.".format(len(result)))

    return 0

if __name__ == "__main__":
    sys.exit(main())
