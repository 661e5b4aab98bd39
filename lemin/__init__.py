"""Ant farm puzzle solver: parse a map of rooms and tunnels and move every ant from start to end."""

__version__ = "0.1.0"