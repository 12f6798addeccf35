"""Reading a stream one line at a time in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 1000


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines.

    Each line keeps its trailing newline; the last line may lack one.
    Lines have the same type (str or bytes) as the stream's data.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr = stream.read(0)
        self._newline: AnyStr = "\n" if isinstance(self._pending, str) else b"\n"

    def _fill(self) -> None:
        while self._newline not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            self._pending += chunk

    def next_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted."""
        self._fill()
        if not self._pending:
            return None
        index = self._pending.find(self._newline)
        if index < 0:
            line, self._pending = self._pending, self._pending[:0]
        else:
            line = self._pending[: index + 1]
            self._pending = self._pending[index + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def iter_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each with its trailing newline if any."""
    yield from LineReader(stream, buffer_size)