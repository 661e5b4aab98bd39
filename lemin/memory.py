"""Byte-buffer operations over bytearray and other mutable buffers."""

from __future__ import annotations


def _require(buf, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(buf):
        raise ValueError(f"{what} holds {len(buf)} bytes, {n} requested")


def memset(buf, value: int, length: int):
    """Fill the first ``length`` bytes of ``buf`` with ``value`` and return ``buf``."""
    _require(buf, length, "buffer")
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dst, src, n: int):
    """Copy ``n`` bytes from ``src`` into ``dst`` and return ``dst``."""
    _require(src, n, "source")
    _require(dst, n, "destination")
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst, src, c: int, n: int) -> int | None:
    """Copy bytes up to and including the first ``c`` within ``n`` bytes.

    Returns the index in ``dst`` just past the copied ``c``, or None when
    ``c`` was not found and all ``n`` bytes were copied.
    """
    _require(src, n, "source")
    _require(dst, n, "destination")
    data = bytes(src[:n])
    found = data.find(c & 0xFF)
    if found < 0:
        dst[:n] = data
        return None
    dst[: found + 1] = data[: found + 1]
    return found + 1


def memmove(dst, src, n: int):
    """Copy ``n`` bytes from ``src`` to ``dst``, safe for overlapping views."""
    return memcpy(dst, src, n)


def memchr(buf, c: int, n: int) -> int | None:
    """Return the index of the first byte ``c`` within ``n`` bytes, or None."""
    _require(buf, n, "buffer")
    found = bytes(buf[:n]).find(c & 0xFF)
    return None if found < 0 else found


def memcmp(a, b, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair."""
    _require(a, n, "first buffer")
    _require(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memalloc(size: int) -> bytearray:
    """Return a zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError(f"negative size {size}")
    return bytearray(size)