"""
Ghost Behaviour Engine
======================
Picks one move per ghost per tick.

Strategies
----------
- **random**: uniform choice among the valid moves (Frightened ghosts,
  and half of the time on Easy).
- **greedy**: the valid move whose resulting cell is closest to the
  target by Manhattan distance; ties go to the first direction in
  UP, DOWN, LEFT, RIGHT order (Normal, the other half of Easy, and the
  Hard fallback).
- **shortest path**: first step of a breadth-first search to the
  muncher (Hard), falling back to greedy when there is no path or the
  step is not a valid move right now.

Eaten ghosts skip all of the above and walk greedily back home.
"""

import logging
from dataclasses import replace

from maze_env import config
from maze_env.board import board_width, is_ghost_house, is_wall
from maze_env.movement import DIRECTIONS, NONE, manhattan, next_position, opposite
from maze_env.state import Difficulty, GhostMode
from problems.ghost_problem import shortest_path_move

log = logging.getLogger(__name__)


# ======================================================================
#  VALID MOVES
# ======================================================================
def valid_moves(board, ghost):
    """
    Moves for a Chase or Frightened ghost.

    A ghost may step out of the house but never back into it, and may
    not turn around when it has any other choice.
    """
    width = board_width(board)
    in_house = is_ghost_house(board, ghost.position)
    moves = []
    for d in DIRECTIONS:
        nxt = next_position(ghost.position, d, width)
        if is_wall(board, nxt):
            continue
        if in_house or not is_ghost_house(board, nxt):
            moves.append(d)

    if len(moves) > 1 and ghost.direction != NONE:
        reverse = opposite(ghost.direction)
        moves = [d for d in moves if d != reverse]
    return moves


def eaten_moves(board, ghost):
    """Eaten ghosts ignore the house and may reverse."""
    width = board_width(board)
    return [d for d in DIRECTIONS
            if not is_wall(board, next_position(ghost.position, d, width))]


# ======================================================================
#  STRATEGIES
# ======================================================================
def random_move(moves, rng):
    return rng.choice(moves)


def greedy_move(board, position, target, moves):
    width = board_width(board)
    best, best_dist = moves[0], None
    for d in moves:
        dist = manhattan(next_position(position, d, width), target)
        if best_dist is None or dist < best_dist:
            best, best_dist = d, dist
    return best


def search_move(board, position, target, moves):
    step = shortest_path_move(board, position, target)
    if step is not None and step in moves:
        return step
    return greedy_move(board, position, target, moves)


def chase_move(state, ghost, moves, rng):
    target = state.player.position
    if state.difficulty == Difficulty.EASY:
        if rng.random() < config.EASY_RANDOM_CHANCE:
            return random_move(moves, rng)
        return greedy_move(state.board, ghost.position, target, moves)
    if state.difficulty == Difficulty.HARD:
        return search_move(state.board, ghost.position, target, moves)
    return greedy_move(state.board, ghost.position, target, moves)


# ======================================================================
#  ONE GHOST, ONE TICK
# ======================================================================
def _step(board, ghost, direction):
    return replace(
        ghost,
        direction=direction,
        position=next_position(ghost.position, direction, board_width(board)),
    )


def move_eaten(board, ghost):
    if ghost.position == ghost.home:
        log.debug("%s is home again", ghost.name)
        return replace(ghost, mode=GhostMode.CHASE)
    moves = eaten_moves(board, ghost)
    if not moves:
        return ghost
    return _step(board, ghost, greedy_move(board, ghost.position, ghost.home, moves))


def move_ghost(state, ghost, rng):
    """
    Returns ``ghost`` after its move for this tick.

    ``state`` carries the board, the tick counter, the difficulty and
    the muncher's position for this tick; it is only read.
    """
    if ghost.mode == GhostMode.EATEN:
        return move_eaten(state.board, ghost)

    # Easy: ghosts that are not frightened only move on even ticks
    if (state.difficulty == Difficulty.EASY and state.tick % 2 != 0
            and ghost.mode != GhostMode.FRIGHTENED):
        return ghost

    moves = valid_moves(state.board, ghost)
    if not moves:
        return ghost

    if ghost.mode == GhostMode.FRIGHTENED:
        direction = random_move(moves, rng)
    else:
        direction = chase_move(state, ghost, moves, rng)
    return _step(state.board, ghost, direction)


def move_ghosts(state, rng):
    """Moves every ghost against the same snapshot, in roster order."""
    return tuple(move_ghost(state, ghost, rng) for ghost in state.ghosts)
