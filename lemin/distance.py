"""Distances from every room to the end room."""

from __future__ import annotations

from lemin.room import MapError, Room


def assign_distances(rooms: list[Room]) -> None:
    """Give every room its number of tunnels to the end room.

    Rooms that already have distance 0 (the end room) are the origin; the
    distances grow one level at a time, so each is the shortest one. Rooms
    that cannot reach the end keep distance -1. rooms[0] is the start
    room; MapError is raised when it is not connected to the end.
    """
    if not rooms:
        raise MapError("no rooms")
    frontier = [room for room in rooms if room.distance == 0]
    level = 0
    while frontier:
        reached = []
        for room in frontier:
            for link in room.links:
                if link.distance == -1:
                    link.distance = level + 1
                    reached.append(link)
        frontier = reached
        level += 1
    if rooms[0].distance == -1:
        raise MapError("the start room is not connected to the end room")