"""String searching and comparison.

Strings follow C string rules: a NUL character ends the string, and the
terminator itself can be searched for, in which case the index just past
the last character is found.
"""

from __future__ import annotations

from itertools import islice

_NUL = "\0"


def _text(s: str) -> str:
    """Return s up to its first NUL character."""
    if s is None:
        raise TypeError("expected a string, got None")
    head, _, _ = s.partition(_NUL)
    return head


def _char(c: int | str) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _codes(s: str) -> list[int]:
    """Character codes of s followed by the terminating zero."""
    return [ord(ch) for ch in _text(s)] + [0]


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first c in s, or None if it does not occur."""
    text, ch = _text(s), _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last c in s, or None if it does not occur."""
    text, ch = _text(s), _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> int | None:
    """Return where needle first starts in haystack, or None.

    An empty needle is found at index 0.
    """
    text, pattern = _text(haystack), _text(needle)
    if not pattern:
        return 0
    index = text.find(pattern)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Like strstr, but the match must lie within the first length characters."""
    text, pattern = _text(haystack), _text(needle)
    if not pattern:
        return 0
    index = text[: max(length, 0)].find(pattern)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the code difference at the first mismatch."""
    for x, y in zip(_codes(s1), _codes(s2)):
        if x != y or x == 0:
            return x - y
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of two strings, as strcmp does."""
    if n <= 0:
        return 0
    for x, y in islice(zip(_codes(s1), _codes(s2)), n):
        if x != y or x == 0:
            return x - y
    return 0


def strequ(s1: str, s2: str) -> bool:
    """Return True when both strings are equal."""
    return _text(s1) == _text(s2)


def strnequ(s1: str, s2: str, n: int) -> bool:
    """Return True when the first n characters of both strings are equal."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _text(s1)[:n] == _text(s2)[:n]


def strnchr(s: str, c: int | str) -> int:
    """Return the index of the first c in s, or -1 if it does not occur."""
    found = strchr(s, c)
    return -1 if found is None else found


def strnchr2(s: str, c1: int | str, c2: int | str) -> int:
    """Return the index of the first character that is c1 or c2, or -1."""
    text = _text(s)
    wanted = {_char(c1), _char(c2)}
    index = next((i for i, ch in enumerate(text) if ch in wanted), None)
    if index is not None:
        return index
    return len(text) if _NUL in wanted else -1