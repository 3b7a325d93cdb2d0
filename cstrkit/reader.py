"""Reading a source one line at a time through a fixed-size buffer.

A source is a file descriptor (an int) or any object with a
``read(size)`` method returning ``bytes`` or ``str``. Lines keep their
trailing newline; the last line of a source may lack one.
"""

from __future__ import annotations

import os
from typing import IO, AnyStr, Generic, Iterator, Union

__all__ = ["LineReader", "read_lines", "DEFAULT_BUFFER_SIZE"]

DEFAULT_BUFFER_SIZE = 256

Source = Union[int, IO[bytes], IO[str]]


class LineReader(Generic[AnyStr]):
    """Hands out the lines of one source, keeping unread data between calls.

    Each reader holds its own buffer, so any number of sources can be
    read side by side.
    """

    def __init__(self, source: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(source, bool):
            raise TypeError("source must be a file descriptor or a readable object")
        if isinstance(source, int):
            if source < 0:
                raise ValueError("file descriptor must not be negative")
        elif not callable(getattr(source, "read", None)):
            raise TypeError("source must be a file descriptor or a readable object")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._source = source
        self._buffer_size = buffer_size
        self._buffer = None

    def _read_chunk(self):
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size)

    def next_line(self) -> AnyStr | None:
        """The next line, or None once the source has nothing more to give."""
        pieces = []
        while True:
            if not self._buffer:
                chunk = self._read_chunk()
                if not chunk:
                    return pieces[0][:0].join(pieces) if pieces else None
                self._buffer = chunk
            newline = b"\n" if isinstance(self._buffer, (bytes, bytearray)) else "\n"
            index = self._buffer.find(newline)
            if index >= 0:
                pieces.append(self._buffer[: index + 1])
                self._buffer = self._buffer[index + 1 :]
                return pieces[0][:0].join(pieces)
            pieces.append(self._buffer)
            self._buffer = None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(source: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator:
    """Yield every line of ``source`` in order."""
    yield from LineReader(source, buffer_size)