import codecs
from typing import BinaryIO, Iterable, Iterator, Optional, Union

# ======================================
# Read Errors
# ======================================

class ReadError(Exception): pass

class StreamError(ReadError):
    def __init__(self, error: Exception):
        super().__init__(f"IO error: {error}")
        self.error = error

class InvalidSyntax(ReadError): pass

class MalformedNumber(ReadError):
    def __init__(self, literal: str, reason: str = "not a number"):
        super().__init__(f"Not a number: '{literal}' ({reason})")
        self.literal = literal

class EndOfInput(ReadError): pass

# ======================================
# Character Stream
# ======================================

# Each item pulled from a source is a decoded character or the error that
# prevented one from being produced. Exhaustion ends the source.
StreamItem = Union[str, Exception]

_NOTHING = object()

class CharStream:
    """Pull cursor over a fallible character source with one item of lookahead.

    `peek` looks at the next character without consuming it. When the next
    item is an error it is consumed and raised as a `StreamError`, so the
    following pull starts after the bad item.
    """

    def __init__(self, source: Iterable[StreamItem]):
        self._source = iter(source)
        self._ahead = _NOTHING
        self.position = 0  # items consumed so far, errors included

    @staticmethod
    def from_string(s: str) -> 'CharStream':
        return CharStream(iter(s))

    def peek(self) -> Optional[str]:
        if self._ahead is _NOTHING:
            self._ahead = next(self._source, None)
        item = self._ahead
        if isinstance(item, Exception):
            self._ahead = _NOTHING
            self.position += 1
            raise StreamError(item) from item
        return item

    def advance(self):
        self.next_char()

    def next_char(self) -> Optional[str]:
        c = self.peek()
        if c is not None:
            self._ahead = _NOTHING
            self.position += 1
        return c

    def __iter__(self) -> Iterator[str]:
        while True:
            c = self.next_char()
            if c is None:
                return
            yield c

# ======================================
# Byte Decoding
# ======================================

def decode_utf8(source: BinaryIO, chunk_size: int = 1) -> Iterator[StreamItem]:
    """Decodes bytes read from source into characters as they arrive.

    An invalid byte sequence produces one UnicodeDecodeError item and decoding
    resumes with the first byte after the bad sequence. A read failure
    produces one OSError item and ends the stream.
    """
    decoder = codecs.getincrementaldecoder("utf-8")()
    while True:
        try:
            chunk = source.read(chunk_size)
        except OSError as e:
            yield e
            return
        final = not chunk
        data = chunk
        while True:
            try:
                text = decoder.decode(data, final)
                break
            except UnicodeDecodeError as e:
                # e.object holds the buffered bytes plus data; retry past the bad sequence
                decoder.reset()
                yield from e.object[:e.start].decode("utf-8")
                yield e
                data = e.object[e.end:]
        yield from text
        if final:
            return
