"""Stream-style text input and buffered output for BigInt and Rational.

Input works on whitespace-delimited tokens, the way ``cin >> value`` reads
numbers: read_bigint() consumes exactly one token from a stream, while
TokenReader buffers whole lines for bulk reading.

Output goes through BufferedWriter, a scoped resource that batches rendered
values and hands them to the underlying stream in large writes:

    with BufferedWriter(sys.stdout) as writer:
        for value in values:
            writer.write_line(value)
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from types import TracebackType
from typing import TextIO

import structlog

from bignum.bigint import BigInt
from bignum.config import DEFAULT_CONFIG, BigNumConfig
from bignum.rational import Rational

logger = structlog.get_logger()

Renderable = BigInt | Rational | int | str


def read_token(stream: TextIO) -> str:
    """Read one whitespace-delimited token, one character at a time.

    Leading whitespace is skipped and the delimiter after the token is
    consumed; the rest of the stream is left unread.

    Raises:
        EOFError: If the stream ends before a token starts
    """
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    if not char:
        raise EOFError("No token left in stream")
    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def read_bigint(stream: TextIO) -> BigInt:
    """Read the next token from stream and parse it as a decimal BigInt.

    Raises:
        EOFError: If the stream holds no further token
        InvalidFormat: If the token is not a decimal integer
    """
    return BigInt.from_str(read_token(stream))


def write_value(stream: TextIO, value: Renderable) -> None:
    """Write the text form of value to stream, unbuffered."""
    stream.write(str(value))


class TokenReader:
    """Line-buffered reader of whitespace-delimited tokens.

    Lines are pulled from the stream only when the pending tokens run out.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def next_token(self) -> str:
        """Return the next token.

        Raises:
            EOFError: If the stream is exhausted
        """
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("No token left in stream")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_bigint(self) -> BigInt:
        return BigInt.from_str(self.next_token())

    def read_rational(self) -> Rational:
        return Rational.from_str(self.next_token())

    def __iter__(self) -> Iterator[str]:
        while True:
            try:
                yield self.next_token()
            except EOFError:
                return


class BufferedWriter:
    """Scoped output buffer over a text stream.

    Rendered text accumulates until config.buffer_size characters are held,
    then goes to the stream in one write. Leaving the ``with`` block (or
    calling close()) flushes what is left and flushes the stream itself.

    Attributes:
        buffered: Number of characters not yet written (read-only)
        closed: True once close() has run (read-only)
    """

    def __init__(self, stream: TextIO, config: BigNumConfig = DEFAULT_CONFIG) -> None:
        self._stream = stream
        self._capacity = config.buffer_size
        self._chunks: list[str] = []
        self._size = 0
        self._closed = False

    @property
    def buffered(self) -> int:
        return self._size

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, value: Renderable) -> None:
        """Buffer the text form of value.

        Raises:
            ValueError: If the writer is closed
        """
        if self._closed:
            raise ValueError("Write to closed BufferedWriter")
        text = value if isinstance(value, str) else str(value)
        if self._size + len(text) > self._capacity:
            self.flush()
        self._chunks.append(text)
        self._size += len(text)
        if self._size >= self._capacity:
            self.flush()

    def write_line(self, value: Renderable = "") -> None:
        """Buffer value followed by a newline."""
        self.write(value)
        self.write("\n")

    def flush(self) -> None:
        """Hand buffered text to the stream."""
        if not self._chunks:
            return
        logger.debug("buffered_writer_flush", characters=self._size)
        self._stream.write("".join(self._chunks))
        self._chunks.clear()
        self._size = 0

    def close(self) -> None:
        if self._closed:
            return
        self.flush()
        self._stream.flush()
        self._closed = True

    def __enter__(self) -> BufferedWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
