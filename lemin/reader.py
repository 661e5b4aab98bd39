"""Parsing an ant farm description into rooms."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain

from lemin.checks import Marker, comment_check, int_check, room_check, start_end_check
from lemin.room import MapError, Room, link_check, make_link, put_in_start
from lemin.transform import atoi


def _is_ignored(line: str) -> bool:
    """Comments and commands other than ##start and ##end carry nothing."""
    if comment_check(line):
        return True
    return line.startswith("##") and start_end_check(line) is Marker.NONE


def _parse_room(line: str, marker: Marker) -> Room:
    name, x, y = line.split(" ")
    return Room(
        name,
        atoi(x),
        atoi(y),
        start=marker is Marker.START,
        end=marker is Marker.END,
    )


def read_map(lines: Iterable[str]) -> list[Room]:
    """Read the ant count, the rooms and the links from lines.

    Returns the rooms with the start room first, holding every ant, and the
    end room second, at distance 0. Raises MapError for a malformed
    description.
    """
    lines = iter(lines)
    first = next((line for line in lines if not comment_check(line)), None)
    if first is None or not int_check(first):
        raise MapError("the first line must be the number of ants")
    ants = atoi(first)

    rooms: list[Room] = []
    marker = Marker.NONE
    pending: str | None = None
    for line in lines:
        command = start_end_check(line)
        if command is not Marker.NONE:
            marker = command
            continue
        if _is_ignored(line):
            continue
        if not room_check(line):
            pending = line
            break
        rooms.append(_parse_room(line, marker))
        marker = Marker.NONE

    if pending is not None:
        for line in chain([pending], lines):
            if _is_ignored(line):
                continue
            if not link_check(line):
                raise MapError(f"not a link: {line!r}")
            make_link(rooms, line)

    put_in_start(rooms, ants)
    return rooms