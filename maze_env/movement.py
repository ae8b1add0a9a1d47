"""
Movement resolver: directions, positions and the one-cell step.

``next_position`` never looks at the board. Callers compute the candidate
cell first and then ask the grid whether it can be occupied.
"""

from enum import IntEnum
from typing import NamedTuple

from maze_env.board import WIDTH


class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    NONE = 4


UP, DOWN, LEFT, RIGHT, NONE = Direction

# Fixed enumeration order; greedy ties resolve to the earliest entry.
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

_DELTAS = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
    NONE:  (0, 0),
}

_OPPOSITES = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT, NONE: NONE}


class Position(NamedTuple):
    x: int
    y: int


def next_position(pos, direction, width=WIDTH) -> Position:
    """One step in ``direction``; x wraps around (tunnel), y never does."""
    dx, dy = _DELTAS[direction]
    return Position((pos[0] + dx) % width, pos[1] + dy)


def opposite(direction) -> Direction:
    return _OPPOSITES[direction]


def manhattan(a, b) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
