"""Rooms of an ant farm and the tunnels between them."""

from __future__ import annotations

from dataclasses import dataclass, field


class MapError(ValueError):
    """The ant farm description is invalid."""


@dataclass(eq=False)
class Room:
    """A room with its coordinates, role, ant count and tunnels.

    A distance of -1 means the room has not been reached yet.
    """

    name: str
    x: int = 0
    y: int = 0
    start: bool = False
    end: bool = False
    ants: int = 0
    links: list[Room] = field(default_factory=list, repr=False)
    distance: int = -1

    def add_link(self, other: Room) -> bool:
        """Add a tunnel to other; return False if it was already there."""
        if any(link is other for link in self.links):
            return False
        self.links.append(other)
        return True


def _find(rooms: list[Room], name: str) -> Room | None:
    return next((room for room in rooms if room.name == name), None)


def make_link(rooms: list[Room], line: str) -> None:
    """Connect the two rooms named in a line of the form 'a-b', both ways.

    Raises MapError when the line has no dash, a room is unknown, or both
    names refer to the same room.
    """
    first, dash, second = line.partition("-")
    if not dash:
        raise MapError(f"not a link: {line!r}")
    one = _find(rooms, first)
    other = _find(rooms, second)
    if one is None or other is None:
        raise MapError(f"link names an unknown room: {line!r}")
    if one is other:
        raise MapError(f"room linked to itself: {line!r}")
    one.add_link(other)
    other.add_link(one)


def link_check(line: str) -> bool:
    """Return True when the line holds exactly one dash."""
    return line.count("-") == 1


def put_in_start(rooms: list[Room], ants: int) -> None:
    """Place all ants in the start room and order the rooms.

    The start room is moved to index 0 and the end room to index 1; the end
    room gets distance 0. Raises MapError when there are no ants or no start
    or end room.
    """
    start_index = next((i for i, room in enumerate(rooms) if room.start), None)
    if start_index is None:
        raise MapError("no start room")
    if ants <= 0:
        raise MapError("there must be at least one ant")
    rooms[0], rooms[start_index] = rooms[start_index], rooms[0]
    rooms[0].ants = ants
    end_index = next((i for i, room in enumerate(rooms) if room.end), None)
    if end_index is None:
        raise MapError("no end room")
    rooms[end_index].distance = 0
    rooms[1], rooms[end_index] = rooms[end_index], rooms[1]