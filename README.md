# lemin

An ant farm puzzle solver. A map gives a number of ants, a set of rooms (one
marked as the start, one as the end) and the tunnels between them. The
program checks the map, works out how many tunnels each room is from the end
room, and searches for the fewest turns in which every ant can walk from the
start room to the end room. Only the start and end rooms may hold more than
one ant at a time.

## Installing

    pip install .

## Running

The map is read from standard input:

    lem-in < map.txt

A map looks like this:

    3
    ##start
    start 0 0
    middle 1 0
    ##end
    goal 2 0
    start-middle
    middle-goal

- The first line that is not a comment gives the number of ants; it must be
  a whole number, optionally signed, and at least 1.
- Room lines are `name x y` with unsigned whole-number coordinates. A name
  may not begin with `L` or `#` and may not hold a space.
- `##start` and `##end` mark the room on the next room line.
- Tunnel lines are `name1-name2`, with exactly one dash, naming two
  different rooms that were declared earlier. The first line that is not a
  room line begins the tunnels.
- Lines starting with a single `#` are comments; other lines starting with
  `##` are ignored.

The output has one line per turn. Each line lists the moves made in that
turn as `L<ant>-<room>`, separated by spaces, ants numbered from 1.

An invalid map, or one where the start room cannot reach the end room,
prints `Error` and the command exits with status 1.

## Using it from Python

    from lemin.cli import run

    with open("map.txt") as f:
        print(run(f.read()), end="")

`run` raises `lemin.room.MapError` for an invalid map. The steps are also
available on their own:

- `lemin.reader.read_map(lines)` parses a map into a list of `Room` objects,
  start room first holding every ant, end room second at distance 0.
- `lemin.distance.assign_distances(rooms)` sets each room's distance to the
  end room and raises `MapError` when the start room cannot reach it.
- `lemin.cli.make_occupied(start)` lists the room of every ant.
- `lemin.solver.solve(occupied)` returns the moves, one list of
  `(ant, room name)` pairs per turn; `lemin.solver.next_move` gives the
  options tried for a single ant.
- `lemin.checks` classifies input lines (`int_check`, `comment_check`,
  `room_check`, `start_end_check`).
- `lemin.linereader.read_lines(stream)` and `LineReader` yield the lines of a
  text stream without their newlines.

The package also carries small helper modules: `lemin.chars` (character
classes and case), `lemin.memory` (byte-buffer operations), `lemin.search`
(C-style string search and comparison), `lemin.transform` (`atoi`, `itoa`,
splitting, trimming and joining strings), `lemin.output` (writing to a
stream) and `lemin.linked_list` (a singly linked list).

## What it does not do

There is no visualiser: the moves are printed as text only.

## Tests

    pip install .[test]
    pytest