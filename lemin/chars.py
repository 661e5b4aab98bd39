"""Character classification and small integer helpers.

Characters are given as integer codes, as read from a byte string, or as
one-character strings. Case conversion returns the same kind of value
it was given.
"""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Return True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Return True for a printable ASCII character, space to tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code += ord("A") - ord("a")
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def greatest(a: int, b: int) -> int:
    """Return the larger of two values, the first one on a tie."""
    return a if a >= b else b


def power_of(base: int, power: int) -> int:
    """Raise base to a non-negative power.

    A zero base gives 0, and so does a result that does not fit in a
    signed 32-bit integer.
    """
    if power < 0:
        raise ValueError("power must not be negative")
    if base == 0:
        return 0
    result = 1
    for _ in range(power):
        result *= base
        if not INT_MIN <= result <= INT_MAX:
            return 0
    return result