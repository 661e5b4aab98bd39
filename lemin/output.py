"""Writing characters, strings and numbers to a text stream.

Every function writes to standard output unless a stream is given.
"""

from __future__ import annotations

import sys
from typing import TextIO

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string up to its first NUL; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s.partition("\0")[0])


def putendl(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s.partition("\0")[0] + "\n")


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write a signed 32-bit integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    _target(stream).write(str(n))