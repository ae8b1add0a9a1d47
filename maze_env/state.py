"""
Immutable game-state snapshots.

Every value here is frozen. A tick never edits a snapshot, it builds the
next one with ``dataclasses.replace`` so the renderer can hold on to the
previous state safely.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from maze_env import config
from maze_env.board import count_pellets, new_board
from maze_env.movement import DOWN, LEFT, NONE, RIGHT, UP, Direction, Position


class GhostMode(Enum):
    CHASE = "chase"
    FRIGHTENED = "frightened"
    EATEN = "eaten"


class GameStatus(Enum):
    READY = "ready"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    WON = "won"


class Difficulty(Enum):
    EASY = "Easy"
    NORMAL = "Normal"
    HARD = "Hard"


DEFAULT_DIFFICULTY = Difficulty.NORMAL


@dataclass(frozen=True)
class PlayerAgent:
    position: Position
    direction: Direction = NONE
    queued_direction: Direction = NONE
    animating: bool = False


@dataclass(frozen=True)
class GhostAgent:
    ident: str
    name: str
    position: Position
    home: Position
    direction: Direction
    color: Tuple[int, int, int]
    mode: GhostMode = GhostMode.CHASE


@dataclass(frozen=True)
class GameState:
    board: tuple
    player: PlayerAgent
    ghosts: Tuple[GhostAgent, ...]
    score: int = 0
    lives: int = config.START_LIVES
    status: GameStatus = GameStatus.READY
    remaining_pellets: int = 0
    frightened_ticks_left: int = 0
    tick: int = 0
    difficulty: Difficulty = DEFAULT_DIFFICULTY


# ══════════════════════════════════════════════════════════════════════
#  Spawn data
# ══════════════════════════════════════════════════════════════════════
PLAYER_START = Position(9, 16)


def _ghost(ident, x, y, direction, color):
    return GhostAgent(
        ident=ident,
        name=ident.capitalize(),
        position=Position(x, y),
        home=Position(x, y),
        direction=direction,
        color=color,
    )


INITIAL_GHOSTS = (
    _ghost("blinky", 9, 10, LEFT,  (239, 68, 68)),
    _ghost("pinky",  8, 10, UP,    (236, 72, 153)),
    _ghost("inky",  10, 10, DOWN,  (6, 182, 212)),
    _ghost("clyde",  9,  9, RIGHT, (249, 115, 22)),
)


def initial_player() -> PlayerAgent:
    return PlayerAgent(position=PLAYER_START)


def initial_ghosts() -> Tuple[GhostAgent, ...]:
    return INITIAL_GHOSTS


def initial_state() -> GameState:
    """Builds a brand new game: fresh board, full pellets, READY."""
    board = new_board()
    return GameState(
        board=board,
        player=initial_player(),
        ghosts=initial_ghosts(),
        remaining_pellets=count_pellets(board),
    )


def ghost_is_blinking(ghost, frightened_ticks_left) -> bool:
    """Frightened ghosts flash on even ticks once their time is nearly up."""
    return (
        ghost.mode == GhostMode.FRIGHTENED
        and 0 < frightened_ticks_left < config.BLINK_TICKS
        and frightened_ticks_left % 2 == 0
    )
