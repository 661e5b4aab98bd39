"""The lem-in command: read an ant farm, print the ants' moves."""

from __future__ import annotations

import argparse
import io
import sys

from lemin.distance import assign_distances
from lemin.linereader import read_lines
from lemin.reader import read_map
from lemin.room import MapError, Room
from lemin.solver import solve


def make_occupied(start: Room) -> list[Room]:
    """Return the room of every ant: all of them start in start."""
    return [start] * start.ants


def run(text: str) -> str:
    """Solve the ant farm described by text and return the moves.

    Each turn is one line of 'L<ant>-<room>' moves separated by spaces.
    Raises MapError for an invalid farm.
    """
    rooms = read_map(read_lines(io.StringIO(text)))
    assign_distances(rooms)
    turns = solve(make_occupied(rooms[0]))
    return "".join(
        " ".join(f"L{ant}-{name}" for ant, name in turn) + "\n" for turn in turns
    )


def main(argv: list[str] | None = None) -> int:
    """Read a farm from standard input and print the moves, or 'Error'."""
    parser = argparse.ArgumentParser(
        prog="lem-in",
        description="Move ants through an ant farm read from standard input.",
    )
    parser.parse_args(argv)
    try:
        output = run(sys.stdin.read())
    except MapError:
        sys.stdout.write("Error\n")
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())