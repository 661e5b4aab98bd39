import pytest

from lemin.distance import assign_distances
from lemin.reader import read_map
from lemin.room import MapError, Room
from lemin.solver import next_move, solve

LINE = "1\n##start\nstart 0 0\na 1 0\n##end\nend 2 0\nstart-a\na-end\n"
TWO_PATHS = (
    "2\n##start\nstart 0 0\na 1 0\nb 1 1\n##end\nend 2 0\n"
    "start-a\nstart-b\na-end\nb-end\n"
)


def _farm(text):
    rooms = read_map(text.splitlines())
    assign_distances(rooms)
    return rooms, {room.name: room for room in rooms}


def _replay(by_name, start, ants, turns):
    positions = [start] * ants
    for turn in turns:
        moved = set()
        for ant, name in turn:
            assert ant not in moved
            moved.add(ant)
            destination = by_name[name]
            assert any(link is destination for link in positions[ant - 1].links)
            positions[ant - 1] = destination
        inner = [room for room in positions if not room.start and not room.end]
        assert len(inner) == len({id(room) for room in inner})
    return positions


def test_next_move_offers_closer_room_first():
    rooms, by_name = _farm(LINE)
    start = rooms[0]
    occupied = [start]
    assert next_move(occupied, start, None, start.distance) is by_name["a"]
    assert next_move(occupied, start, by_name["a"], start.distance) is None


def test_next_move_offers_waiting_when_time_allows():
    rooms, by_name = _farm(LINE)
    start = rooms[0]
    occupied = [start]
    timer = start.distance + 1
    assert next_move(occupied, start, by_name["a"], timer) is start
    assert next_move(occupied, start, start, timer) is None


def test_next_move_skips_occupied_rooms():
    rooms, by_name = _farm(TWO_PATHS)
    start = rooms[0]
    occupied = [start, by_name["a"]]
    assert next_move(occupied, start, None, start.distance) is by_name["b"]


def test_ant_at_end_only_stays():
    rooms, _ = _farm(LINE)
    end = rooms[1]
    assert next_move([end], end, None, 1) is end
    assert next_move([end], end, end, 1) is None


def test_next_move_rejects_unknown_previous():
    rooms, _ = _farm(LINE)
    start, end = rooms[0], rooms[1]
    with pytest.raises(ValueError):
        next_move([start], start, end, start.distance)


def test_single_ant_takes_shortest_time():
    rooms, by_name = _farm(LINE)
    start = rooms[0]
    distance = start.distance
    occupied = [start] * start.ants
    turns = solve(occupied)
    assert len(turns) == distance
    assert _replay(by_name, start, 1, turns) == [rooms[1]]


def test_two_paths_are_used_in_parallel():
    rooms, by_name = _farm(TWO_PATHS)
    start = rooms[0]
    distance = start.distance
    occupied = [start] * start.ants
    turns = solve(occupied)
    assert len(turns) == distance
    assert _replay(by_name, start, 2, turns) == [rooms[1], rooms[1]]


def test_ants_queue_on_a_single_path():
    text = LINE.replace("1\n", "3\n", 1)
    rooms, by_name = _farm(text)
    start, end = rooms[0], rooms[1]
    occupied = [start] * start.ants
    turns = solve(occupied)
    assert len(turns) > start.distance
    assert _replay(by_name, start, 3, turns) == [end] * 3
    assert occupied == [end] * 3
    assert end.ants == 3
    assert start.ants == 0


def test_direct_tunnel_moves_everyone_at_once():
    rooms, by_name = _farm("4\n##start\ns 0 0\n##end\ne 1 1\ns-e\n")
    start = rooms[0]
    occupied = [start] * start.ants
    turns = solve(occupied)
    assert len(turns) == 1
    assert sorted(turns[0]) == [(ant, "e") for ant in range(1, 5)]


def test_no_ants_means_no_turns():
    assert solve([]) == []


def test_unreachable_end_raises():
    stranded = Room("s", start=True, ants=1)
    with pytest.raises(MapError):
        solve([stranded])