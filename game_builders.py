"""Builders for hand-made boards, ghosts and states used by the tests."""

from maze_env.board import count_pellets, make_board
from maze_env.movement import NONE, Position
from maze_env.state import (
    Difficulty,
    GameState,
    GameStatus,
    GhostAgent,
    GhostMode,
    PlayerAgent,
)


class StubRng:
    """Deterministic stand-in for random.Random: fixed roll, last choice."""

    def __init__(self, roll=0.9):
        self.roll = roll
        self.choices = []

    def random(self):
        return self.roll

    def choice(self, seq):
        self.choices.append(list(seq))
        return seq[-1]


def ghost_at(x, y, direction=NONE, mode=GhostMode.CHASE, home=None, ident="blinky"):
    return GhostAgent(
        ident=ident,
        name=ident.capitalize(),
        position=Position(x, y),
        home=Position(*(home or (x, y))),
        direction=direction,
        color=(255, 0, 0),
        mode=mode,
    )


def state_on(rows, player_pos, ghosts=(), direction=NONE, queued=NONE,
             difficulty=Difficulty.NORMAL, **kw):
    """PLAYING state on a hand-built board."""
    board = make_board(rows)
    fields = dict(
        board=board,
        player=PlayerAgent(Position(*player_pos), direction, queued),
        ghosts=tuple(ghosts),
        status=GameStatus.PLAYING,
        remaining_pellets=count_pellets(board),
        difficulty=difficulty,
    )
    fields.update(kw)
    return GameState(**fields)
