"""Line classification for the ant farm description."""

from __future__ import annotations

import re
from enum import IntEnum

_INTEGER = re.compile(r"[+-]?[0-9]*")
_ROOM = re.compile(r"[^#L ][^ ]* [0-9]+ [0-9]+")


class Marker(IntEnum):
    """The role that a command gives to the room that follows it."""

    NONE = 0
    START = 1
    END = 2


def int_check(s: str | None) -> bool:
    """Return True when s is an optional sign followed only by digits."""
    if s is None:
        return False
    return _INTEGER.fullmatch(s) is not None


def comment_check(line: str | None) -> bool:
    """Return True for a comment: a line starting with one '#' but not '##'.

    A missing line counts as a comment.
    """
    if line is None:
        return True
    return line.startswith("#") and not line.startswith("##")


def room_check(line: str | None) -> bool:
    """Return True for a room line: 'name x y' with unsigned coordinates.

    The name must not start with '#', 'L' or a space, and holds no space.
    """
    if line is None:
        return False
    return _ROOM.fullmatch(line) is not None


def start_end_check(line: str | None) -> Marker:
    """Return the marker a '##start' or '##end' command sets, else NONE."""
    if line == "##start":
        return Marker.START
    if line == "##end":
        return Marker.END
    return Marker.NONE