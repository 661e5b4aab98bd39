[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lemin"
version = "0.1.0"
description = "Ant farm puzzle solver: read a map of rooms and tunnels, then move every ant from the start room to the end room"
requires-python = ">=3.10"
dependencies = []
keywords = ["ants", "pathfinding", "graph", "puzzle", "lem-in"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lem-in = "lemin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lemin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
