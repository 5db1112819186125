"""Tests for the character stream and byte decoding."""

import io

import pytest

from lust.lexing import CharStream, StreamError, decode_utf8


class FailingReader:
    def __init__(self, data):
        self.data = data

    def read(self, n):
        if not self.data:
            raise OSError("device gone")
        chunk, self.data = self.data[:n], self.data[n:]
        return chunk


def test_peek_does_not_consume():
    s = CharStream.from_string("ab")
    assert s.peek() == "a"
    assert s.peek() == "a"
    assert s.next_char() == "a"
    assert s.peek() == "b"


def test_exhausted_stream():
    s = CharStream.from_string("a")
    s.advance()
    assert s.peek() is None
    assert s.next_char() is None
    s.advance()
    assert s.position == 1


def test_error_item_is_raised_once():
    err = ValueError("bad")
    s = CharStream(iter(["a", err, "b"]))
    assert s.next_char() == "a"
    with pytest.raises(StreamError) as exc:
        s.peek()
    assert exc.value.error is err
    assert s.position == 2
    assert s.next_char() == "b"


def test_iterates_remaining_characters():
    s = CharStream.from_string("xyz")
    s.advance()
    assert "".join(s) == "yz"


def test_decode_utf8_multibyte():
    data = "(+ 1 2) λ ü".encode("utf-8")
    assert "".join(decode_utf8(io.BytesIO(data))) == "(+ 1 2) λ ü"


def test_decode_utf8_invalid_byte_resumes():
    items = list(decode_utf8(io.BytesIO(b"a\xffb")))
    assert items[0] == "a"
    assert isinstance(items[1], UnicodeDecodeError)
    assert items[2:] == ["b"]


def test_decode_utf8_truncated_sequence():
    items = list(decode_utf8(io.BytesIO("aλ".encode("utf-8")[:-1])))
    assert items[0] == "a"
    assert isinstance(items[1], UnicodeDecodeError)
    assert len(items) == 2


def test_decode_utf8_read_error_ends_stream():
    items = list(decode_utf8(FailingReader(b"ab")))
    assert items[:2] == ["a", "b"]
    assert isinstance(items[2], OSError)
    assert len(items) == 3


def test_decode_utf8_keeps_byte_after_broken_sequence():
    items = list(decode_utf8(io.BytesIO(b"\xe2(+ 1 2)")))
    assert isinstance(items[0], UnicodeDecodeError)
    assert "".join(items[1:]) == "(+ 1 2)"


def test_decode_utf8_broken_sequence_in_larger_chunk():
    items = list(decode_utf8(io.BytesIO(b"ab\xe2(c"), chunk_size=8))
    assert items[:2] == ["a", "b"]
    assert isinstance(items[2], UnicodeDecodeError)
    assert items[3:] == ["(", "c"]
