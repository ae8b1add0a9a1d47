"""
Muncher simulation core.

The whole game is one reducer:

  - ``dispatch(state, intent)`` -> next state, for the closed set of
    intents below (Start, Restart, Move, SetDifficulty, Tick)
  - ``advance(state, rng)``     -> the tick transition

Neither function mutates its input and neither keeps a clock: the host
decides when to send ``Tick`` (see ``maze_env.scheduler``).

Tick order
----------
1. tick counter + 1
2. frightened countdown; at 0 every Frightened ghost goes back to Chase
3. muncher turns to the queued direction if possible, then steps
4. pellet / power pellet under the muncher
5. every ghost moves (``agents.ghost_agent``)
6. ghost collisions: eat, lose a life (respawn) or game over
7. no pellets left -> WON
"""

import logging
import random
from dataclasses import dataclass, replace

from agents.ghost_agent import move_ghosts
from maze_env import config
from maze_env.board import Tile, board_width, clear_tile, is_wall, tile_at
from maze_env.movement import Direction, next_position
from maze_env.state import (
    Difficulty,
    GameStatus,
    GhostMode,
    initial_ghosts,
    initial_player,
    initial_state,
)

log = logging.getLogger(__name__)

_rng = random.Random()


# ══════════════════════════════════════════════════════════════════════
#  Intents
# ══════════════════════════════════════════════════════════════════════
@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class Move:
    direction: Direction


@dataclass(frozen=True)
class SetDifficulty:
    level: Difficulty


@dataclass(frozen=True)
class Tick:
    pass


def dispatch(state, intent, rng=None):
    """Applies one intent. Intents that do not apply to the current status are no-ops."""
    if isinstance(intent, Tick):
        return advance(state, rng)

    if isinstance(intent, Move):
        if state.status != GameStatus.PLAYING:
            return state
        return replace(state, player=replace(state.player, queued_direction=intent.direction))

    if isinstance(intent, Start):
        if state.status != GameStatus.READY:
            return state
        log.info("game started on %s", state.difficulty.value)
        return replace(state, status=GameStatus.PLAYING)

    if isinstance(intent, Restart):
        log.info("restart")
        return initial_state()

    if isinstance(intent, SetDifficulty):
        if state.status == GameStatus.PLAYING:
            return state
        log.debug("difficulty set to %s", intent.level.value)
        return replace(state, difficulty=intent.level)

    raise TypeError(f"not a game intent: {intent!r}")


# ══════════════════════════════════════════════════════════════════════
#  Tick
# ══════════════════════════════════════════════════════════════════════
def move_player(board, player):
    width = board_width(board)
    direction = player.direction
    if not is_wall(board, next_position(player.position, player.queued_direction, width)):
        direction = player.queued_direction

    nxt = next_position(player.position, direction, width)
    if is_wall(board, nxt):
        return replace(player, direction=direction)
    return replace(player, direction=direction, position=nxt, animating=not player.animating)


def _update_frightened(state):
    if state.frightened_ticks_left <= 0:
        return state
    left = state.frightened_ticks_left - 1
    ghosts = state.ghosts
    if left == 0:
        ghosts = tuple(
            replace(g, mode=GhostMode.CHASE) if g.mode == GhostMode.FRIGHTENED else g
            for g in ghosts
        )
    return replace(state, frightened_ticks_left=left, ghosts=ghosts)


def _eat_pellet(state):
    pos = state.player.position
    tile = tile_at(state.board, pos)
    if tile == Tile.PELLET:
        return replace(
            state,
            board=clear_tile(state.board, pos),
            score=state.score + config.PELLET_SCORE,
            remaining_pellets=state.remaining_pellets - 1,
        )
    if tile == Tile.POWER_PELLET:
        log.debug("power pellet at %s, ghosts frightened", tuple(pos))
        return replace(
            state,
            board=clear_tile(state.board, pos),
            score=state.score + config.POWER_PELLET_SCORE,
            remaining_pellets=state.remaining_pellets - 1,
            frightened_ticks_left=config.FRIGHTENED_DURATION,
            ghosts=tuple(replace(g, mode=GhostMode.FRIGHTENED) for g in state.ghosts),
        )
    return state


def _resolve_collisions(state):
    ghosts = list(state.ghosts)
    score, lives, status = state.score, state.lives, state.status
    player = state.player

    for i, ghost in enumerate(ghosts):
        if ghost.position != player.position:
            continue
        if ghost.mode == GhostMode.FRIGHTENED:
            score += config.GHOST_SCORE
            ghosts[i] = replace(ghost, mode=GhostMode.EATEN)
            log.debug("%s eaten", ghost.name)
        elif ghost.mode == GhostMode.CHASE and status != GameStatus.GAME_OVER:
            # one life per tick at most
            lives -= 1
            if lives > 0:
                log.info("caught by %s, %d lives left", ghost.name, lives)
                player = initial_player()
                ghosts = list(initial_ghosts())
                break
            log.info("caught by %s, game over", ghost.name)
            status = GameStatus.GAME_OVER

    return replace(state, ghosts=tuple(ghosts), player=player,
                   score=score, lives=lives, status=status)


def advance(state, rng=None):
    """One tick of the game. Returns ``state`` itself unless PLAYING."""
    if state.status != GameStatus.PLAYING:
        return state
    if rng is None:
        rng = _rng

    state = replace(state, tick=state.tick + 1)
    state = _update_frightened(state)
    state = replace(state, player=move_player(state.board, state.player))
    state = _eat_pellet(state)
    state = replace(state, ghosts=move_ghosts(state, rng))
    state = _resolve_collisions(state)

    if state.remaining_pellets == 0:
        log.info("board cleared, score %d", state.score)
        state = replace(state, status=GameStatus.WON)
    return state
