"""Conversions between numbers and text, and string building helpers.

Strings follow C string rules: a NUL character ends the string.
"""

from __future__ import annotations

from collections.abc import Callable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACE = " \n\t\r\v\f"


def _text(s: str) -> str:
    """Return s up to its first NUL character."""
    if s is None:
        raise TypeError("expected a string, got None")
    return s.partition("\0")[0]


def _char(c: int | str) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _wrap32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading white space is skipped and one sign is accepted; parsing stops
    at the first non-digit. Text without digits gives 0. The result wraps
    around as a signed 32-bit integer does.
    """
    text = _text(s).lstrip(_SPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    value = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        value = 10 * value + (ord(ch) - ord("0"))
    return _wrap32(sign * value)


def itoa(n: int) -> str:
    """Format a signed 32-bit integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def strsplit(s: str, c: int | str) -> list[str]:
    """Split s on the delimiter c, dropping empty pieces."""
    return [piece for piece in _text(s).split(_char(c)) if piece]


def strtrim(s: str) -> str:
    """Remove leading and trailing spaces, tabs, newlines and the like."""
    return _text(s).strip(" \t\n\v\f\r")


def strsub(s: str, start: int, length: int) -> str:
    """Return length characters of s beginning at index start."""
    text = _text(s)
    if start < 0 or length < 0 or start + length > len(text):
        raise IndexError(
            f"substring {start}:{start + length} lies outside a string of "
            f"length {len(text)}"
        )
    return text[start : start + length]


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; a missing one counts as empty.

    Returns None only when both are missing.
    """
    if s1 is None and s2 is None:
        return None
    first = "" if s1 is None else _text(s1)
    second = "" if s2 is None else _text(s2)
    return first + second


def strmap(s: str, func: Callable[[str], str]) -> str:
    """Return a new string made by applying func to every character."""
    return "".join(func(ch) for ch in _text(s))


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Like strmap, but func also receives the character's index."""
    return "".join(func(i, ch) for i, ch in enumerate(_text(s)))


def strrcut(s1: str, s2: str) -> str:
    """Remove the last occurrence of s2 from s1.

    If s2 is empty or does not occur, s1 is returned unchanged.
    """
    text, cut = _text(s1), _text(s2)
    if not cut:
        return text
    index = text.rfind(cut)
    if index < 0:
        return text
    return text[:index] + text[index + len(cut) :]