"""
Static maze layout and tile queries.

The board is a tuple of row tuples indexed ``board[y][x]``. Eating a
pellet never edits a board in place: ``clear_tile`` returns a new board
that shares every untouched row with the old one.
"""

from enum import IntEnum


class Tile(IntEnum):
    PATH = 0
    WALL = 1
    PELLET = 2
    POWER_PELLET = 3
    GHOST_HOUSE = 4
    EMPTY = 5


# 0 = caminho, 1 = parede, 2 = pastilha, 3 = energizante, 4 = casa, 5 = vazio
MAZE_LAYOUT = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 2, 3, 1),
    (1, 2, 1, 1, 2, 1, 1, 1, 2, 1, 2, 1, 1, 1, 2, 1, 1, 2, 1),
    (1, 3, 1, 1, 2, 1, 1, 1, 2, 1, 2, 1, 1, 1, 2, 1, 1, 2, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 2, 1, 1, 2, 1, 2, 1, 1, 1, 1, 1, 2, 1, 2, 1, 1, 2, 1),
    (1, 2, 2, 2, 2, 1, 2, 2, 2, 1, 2, 2, 2, 1, 2, 2, 2, 2, 1),
    (1, 1, 1, 1, 2, 1, 1, 1, 5, 1, 5, 1, 1, 1, 2, 1, 1, 1, 1),
    (5, 5, 5, 1, 2, 1, 5, 5, 5, 4, 5, 5, 5, 1, 2, 1, 5, 5, 5),
    (1, 1, 1, 1, 2, 1, 5, 1, 1, 4, 1, 1, 5, 1, 2, 1, 1, 1, 1),
    (2, 2, 2, 2, 2, 5, 5, 1, 4, 4, 4, 1, 5, 5, 2, 2, 2, 2, 2),
    (1, 1, 1, 1, 2, 1, 5, 1, 1, 1, 1, 1, 5, 1, 2, 1, 1, 1, 1),
    (5, 5, 5, 1, 2, 1, 5, 5, 5, 5, 5, 5, 5, 1, 2, 1, 5, 5, 5),
    (1, 1, 1, 1, 2, 1, 5, 1, 1, 1, 1, 1, 5, 1, 2, 1, 1, 1, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 2, 1, 1, 2, 1, 1, 1, 2, 1, 2, 1, 1, 1, 2, 1, 1, 2, 1),
    (1, 3, 2, 1, 2, 2, 2, 2, 2, 5, 2, 2, 2, 2, 2, 1, 2, 3, 1),
    (1, 1, 2, 1, 2, 1, 2, 1, 1, 1, 1, 1, 2, 1, 2, 1, 2, 1, 1),
    (1, 2, 2, 2, 2, 1, 2, 2, 2, 1, 2, 2, 2, 1, 2, 2, 2, 2, 1),
    (1, 2, 1, 1, 1, 1, 1, 1, 2, 1, 2, 1, 1, 1, 1, 1, 1, 2, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)

WIDTH = len(MAZE_LAYOUT[0])
HEIGHT = len(MAZE_LAYOUT)

PELLET_TILES = (Tile.PELLET, Tile.POWER_PELLET)


def make_board(rows):
    """Converts a grid of ints (or Tiles) into an immutable board."""
    return tuple(tuple(Tile(cell) for cell in row) for row in rows)


def new_board():
    return make_board(MAZE_LAYOUT)


def board_width(board) -> int:
    return len(board[0])


def in_bounds(board, pos) -> bool:
    x, y = pos
    return 0 <= x < len(board[0]) and 0 <= y < len(board)


def tile_at(board, pos) -> Tile:
    x, y = pos
    return board[y][x]


def is_wall(board, pos) -> bool:
    """Out-of-bounds counts as wall; this is the 'can I stand here' test."""
    if not in_bounds(board, pos):
        return True
    return tile_at(board, pos) == Tile.WALL


def is_ghost_house(board, pos) -> bool:
    """Membership test: out-of-bounds is simply not part of the house."""
    if not in_bounds(board, pos):
        return False
    return tile_at(board, pos) == Tile.GHOST_HOUSE


def count_pellets(board) -> int:
    return sum(1 for row in board for cell in row if cell in PELLET_TILES)


def clear_tile(board, pos):
    """Returns a copy of ``board`` with the cell at ``pos`` set to EMPTY."""
    x, y = pos
    row = board[y][:x] + (Tile.EMPTY,) + board[y][x + 1:]
    return board[:y] + (row,) + board[y + 1:]
