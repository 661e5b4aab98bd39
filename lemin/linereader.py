"""Reading a text stream one line at a time."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO


class LineReader:
    """Yield the lines of a text stream without their newlines.

    A final line that lacks a newline is still returned; an empty stream
    gives no lines at all. Only the newline character is removed.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def read_line(self) -> str | None:
        """Return the next line, or None once the stream is exhausted."""
        line = self._stream.readline()
        if not line:
            return None
        return line[:-1] if line.endswith("\n") else line

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)


def read_lines(stream: TextIO) -> Iterator[str]:
    """Iterate over the lines of stream, newlines removed."""
    yield from LineReader(stream)