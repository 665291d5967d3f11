import io
import sys

import pytest

import b32tool


def run(tmp_path, data, *args):
    src = tmp_path / "in"
    dst = tmp_path / "out"
    src.write_bytes(data)

    rc = b32tool.main(list(args) + ["-i", str(src), "-o", str(dst)])

    return rc, dst.read_bytes() if dst.exists() else None


def test_encode_file(tmp_path):
    assert run(tmp_path, b"foobar") == (0, b"MZXW6YTBOI======\n")


def test_encode_wraps_lines(tmp_path):
    assert run(tmp_path, b"foobar", "-w", "4") ==\
        (0, b"MZXW\n6YTB\nOI==\n====\n")


def test_encode_without_wrapping(tmp_path):
    assert run(tmp_path, b"foobar", "-w", "0") == (0, b"MZXW6YTBOI======")


def test_encode_empty(tmp_path):
    assert run(tmp_path, b"") == (0, b"")


def test_encode_hex_nopad(tmp_path):
    assert run(tmp_path, b"foobar", "--hex", "--nopad") ==\
        (0, b"CPNMUOJ1E8\n")


def test_custom_alphabet_and_padding(tmp_path):
    rc, out = run(tmp_path, b"f", "--alphabet",\
        "abcdefghijklmnopqrstuvwxyz234567", "--padding", "#")
    assert (rc, out) == (0, b"my######\n")


def test_decode_strips_line_breaks(tmp_path):
    assert run(tmp_path, b"MZXW\r\n6YTB\r\nOI==\n====\n", "-d") ==\
        (0, b"foobar")


def test_decode_nopad(tmp_path):
    assert run(tmp_path, b"MZXW6YTBOI\n", "-d", "--nopad") == (0, b"foobar")


def test_decode_corrupt_input(tmp_path):
    assert run(tmp_path, b"MZXW6YT!\n", "-d") == (1, None)


def test_bad_alphabet(tmp_path):
    assert run(tmp_path, b"f", "--alphabet", "ABC") == (1, None)


def test_negative_wrap(tmp_path):
    with pytest.raises(SystemExit) as e:
        run(tmp_path, b"f", "-w", "-1")
    assert e.value.code == 2


def test_stdin_to_stdout(monkeypatch, capsysbinary):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"fooba")))

    assert b32tool.main([]) == 0
    assert capsysbinary.readouterr().out == b"MZXW6YTB\n"
