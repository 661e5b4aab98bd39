"""Finding the fewest turns that bring every ant to the end room."""

from __future__ import annotations

from itertools import count

from lemin.room import MapError, Room

Turn = list[tuple[int, str]]


def _free(room: Room, occupied: list[Room]) -> bool:
    if room.start or room.end:
        return True
    return all(place is not room for place in occupied)


def _candidates(occupied: list[Room], origin: Room, timer: int) -> list[Room]:
    """Where an ant in origin may be this turn, best first.

    Only rooms from which the end can still be reached in the turns left
    after this one are offered. Rooms nearer the end come first, then
    staying put, then rooms as far away, then rooms farther away.
    """
    if origin.end:
        return [origin] if timer > 0 else []
    reachable = [
        link
        for link in origin.links
        if 0 <= link.distance < timer
        and link.distance <= origin.distance + 1
        and _free(link, occupied)
    ]
    closer = sorted(
        (link for link in reachable if link.distance < origin.distance),
        key=lambda link: link.distance,
    )
    stay = [origin] if 0 <= origin.distance < timer else []
    same = [link for link in reachable if link.distance == origin.distance]
    farther = [link for link in reachable if link.distance > origin.distance]
    return closer + stay + same + farther


def next_move(
    occupied: list[Room], origin: Room, previous: Room | None, timer: int
) -> Room | None:
    """Return the next place for an ant in origin after previous.

    occupied holds the room of every ant; timer is the number of turns
    left, this one included. With previous None the best place is given;
    the ant staying put shows as origin itself. None means no options are
    left. Raises ValueError if previous is not one of the options.
    """
    options = _candidates(occupied, origin, timer)
    if previous is None:
        return options[0] if options else None
    index = next((i for i, room in enumerate(options) if room is previous), None)
    if index is None:
        raise ValueError(f"{previous.name!r} is not an option from {origin.name!r}")
    return options[index + 1] if index + 1 < len(options) else None


def _move(occupied: list[Room], ant: int, origin: Room, destination: Room) -> None:
    if destination is origin:
        return
    origin.ants -= 1
    destination.ants += 1
    occupied[ant] = destination


def _search(occupied: list[Room], turns: int) -> list[Turn] | None:
    """Try to bring every ant to the end in exactly the given turns."""
    ants = len(occupied)
    total = turns * ants
    path: list[tuple[Room, Room]] = []
    dead: set[tuple[int, tuple[int, ...]]] = set()
    previous: Room | None = None
    while len(path) < total:
        step = len(path)
        ant = step % ants
        origin = occupied[ant]
        state = (step, tuple(map(id, occupied)))
        destination = None
        if previous is not None or state not in dead:
            destination = next_move(occupied, origin, previous, turns - step // ants)
        if destination is None:
            dead.add(state)
            if not path:
                return None
            before, after = path.pop()
            _move(occupied, len(path) % ants, after, before)
            previous = after
            continue
        _move(occupied, ant, origin, destination)
        path.append((origin, destination))
        previous = None

    result: list[Turn] = [[] for _ in range(turns)]
    for step, (origin, destination) in enumerate(path):
        if destination is not origin:
            result[step // ants].append((step % ants + 1, destination.name))
    return result


def solve(occupied: list[Room]) -> list[Turn]:
    """Move every ant to the end room in as few turns as possible.

    occupied holds the room of every ant and is updated to their final
    rooms. Returns one list per turn of (ant number, room name) moves, ants
    numbered from 1. Raises MapError when an ant cannot reach the end.
    """
    if not occupied:
        return []
    if any(room.distance < 0 for room in occupied):
        raise MapError("an ant cannot reach the end room")
    lower = max(room.distance for room in occupied)
    if lower == 0:
        return []
    for turns in count(lower):
        result = _search(occupied, turns)
        if result is not None:
            return result
    raise AssertionError("unreachable")