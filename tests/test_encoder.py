import pytest

from b32consts import STD_ALPHABET, HEX_ALPHABET, STD_PADDING, NO_PADDING
from b32encoder import Encoder
from b32error import Error, DestinationTooSmallError

# RFC 4648 section 10.
VECTORS = [
    (b"", b""),
    (b"f", b"MY======"),
    (b"fo", b"MZXQ===="),
    (b"foo", b"MZXW6==="),
    (b"foob", b"MZXW6YQ="),
    (b"fooba", b"MZXW6YTB"),
    (b"foobar", b"MZXW6YTBOI======"),
]


def encode(encoder, data):
    buf = bytearray(encoder.encode_len(len(data)))
    n = encoder.encode(data, buf)
    assert n == len(buf)
    return bytes(buf)


@pytest.mark.parametrize("data,expected", VECTORS)
def test_rfc_vectors(data, expected):
    assert encode(Encoder(STD_ALPHABET, STD_PADDING), data) == expected


@pytest.mark.parametrize("data,expected", VECTORS)
def test_rfc_vectors_without_padding(data, expected):
    encoder = Encoder(STD_ALPHABET, NO_PADDING)
    assert encode(encoder, data) == expected.rstrip(b"=")


def test_extended_hex_alphabet():
    encoder = Encoder(HEX_ALPHABET, STD_PADDING)
    assert encode(encoder, b"foobar") == b"CPNMUOJ1E8======"


def test_custom_alphabet():
    encoder = Encoder(b"abcdefghijklmnopqrstuvwxyz234567", STD_PADDING)
    assert encode(encoder, b"foobar") == b"mzxw6ytboi======"


def test_extreme_bit_patterns():
    encoder = Encoder(STD_ALPHABET, STD_PADDING)
    assert encode(encoder, b"\x00" * 5) == b"AAAAAAAA"
    assert encode(encoder, b"\xff" * 5) == b"77777777"
    assert encode(encoder, b"\xff") == b"74======"
    assert encode(encoder, b"\xff" * 4) == b"777777Y="


def test_encode_len_with_padding():
    encoder = Encoder(STD_ALPHABET, STD_PADDING)
    assert [encoder.encode_len(n) for n in range(12)] ==\
        [0, 8, 8, 8, 8, 8, 16, 16, 16, 16, 16, 24]


def test_encode_len_without_padding():
    encoder = Encoder(STD_ALPHABET, NO_PADDING)
    assert [encoder.encode_len(n) for n in range(12)] ==\
        [0, 2, 4, 5, 7, 8, 10, 12, 13, 15, 16, 18]


def test_destination_too_small_writes_nothing():
    encoder = Encoder(STD_ALPHABET, STD_PADDING)
    dst = bytearray(b"x" * 7)

    with pytest.raises(DestinationTooSmallError) as e:
        encoder.encode(b"f", dst)

    assert e.value.error is Error.DESTINATION_TOO_SMALL
    assert e.value.required == 8
    assert e.value.available == 7
    assert dst == b"x" * 7


def test_empty_input_needs_no_room():
    encoder = Encoder(STD_ALPHABET, STD_PADDING)
    assert encoder.encode(b"", bytearray()) == 0


def test_writes_stay_within_encode_len():
    encoder = Encoder(STD_ALPHABET, NO_PADDING)
    dst = bytearray(b"." * 12)

    assert encoder.encode(b"foo", dst) == 5
    assert dst == b"MZXW6......."


def test_memoryview_buffers():
    encoder = Encoder(STD_ALPHABET, STD_PADDING)
    src = memoryview(b"__foob__")[2:6]
    backing = bytearray(10)

    assert encoder.encode(src, memoryview(backing)[1:9]) == 8
    assert backing == b"\x00MZXW6YQ=\x00"
