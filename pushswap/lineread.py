"""Reading newline-terminated lines from text streams in small chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

BUFFER_SIZE = 10


def _clip(chunk: str) -> str:
    return chunk.split("\0", 1)[0]


class LineReader:
    """Reads lines from one stream; every line must end with a newline."""

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def read_line(self) -> str | None:
        """Return the next line without its newline, or None at the end.

        Raises ValueError when the stream ends inside a line or a chunk
        starts with a NUL while nothing is pending.
        """
        exhausted = False
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                exhausted = True
                break
            joined = self._pending + _clip(chunk)
            if not joined:
                self._pending = ""
                raise ValueError("unexpected NUL in input")
            self._pending = joined
        if exhausted and not self._pending:
            return None
        line, newline, rest = self._pending.partition("\n")
        if not newline:
            self._pending = ""
            raise ValueError("last line is not terminated by a newline")
        self._pending = rest
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


class MultiLineReader:
    """Reads lines from several streams, keeping what is pending for each."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer size must be positive")
        self._buffer_size = buffer_size
        self._pending: dict[int, str] = {}

    def read_line(self, stream: TextIO) -> str | None:
        """Return the next line of ``stream``, or None at its end.

        A last line without a newline is returned as it is.
        """
        key = id(stream)
        pending = self._pending.get(key, "")
        exhausted = False
        while "\n" not in pending:
            chunk = stream.read(self._buffer_size)
            if not chunk:
                exhausted = True
                break
            pending += _clip(chunk)
        if exhausted and not pending:
            self._pending[key] = ""
            return None
        line, _, rest = pending.partition("\n")
        if exhausted and not rest:
            self._pending.pop(key, None)
        else:
            self._pending[key] = rest
        return line


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the newline-terminated lines of ``stream``."""
    yield from LineReader(stream)