import pytest

from lemin.distance import assign_distances
from lemin.room import MapError, Room


def _link(a, b):
    a.add_link(b)
    b.add_link(a)


def test_chain_distances_count_tunnels():
    end = Room("e", end=True, distance=0)
    chain = [end, Room("b"), Room("a"), Room("s", start=True)]
    for near, far in zip(chain, chain[1:]):
        _link(near, far)
    rooms = [chain[-1], end, chain[1], chain[2]]
    assign_distances(rooms)
    assert [room.distance for room in chain] == list(range(len(chain)))


def test_distances_are_consistent_on_a_cycle():
    start = Room("s", start=True)
    end = Room("e", end=True, distance=0)
    ring = [Room(name) for name in "abcdef"]
    for one, other in zip(ring, ring[1:] + ring[:1]):
        _link(one, other)
    _link(start, ring[0])
    _link(end, ring[3])
    rooms = [start, end, *ring]
    assign_distances(rooms)
    for room in rooms:
        for link in room.links:
            assert abs(room.distance - link.distance) <= 1
        if room.distance > 0:
            assert any(link.distance == room.distance - 1 for link in room.links)


def test_disconnected_start_raises():
    start = Room("s", start=True)
    end = Room("e", end=True, distance=0)
    with pytest.raises(MapError):
        assign_distances([start, end])


def test_no_rooms_raises():
    with pytest.raises(MapError):
        assign_distances([])