from dataclasses import replace

from maze_env.scheduler import TickScheduler
from maze_env.state import GameStatus, initial_state

READY = initial_state()
PLAYING = replace(READY, status=GameStatus.PLAYING)
OVER = replace(READY, status=GameStatus.GAME_OVER)


def test_no_ticks_outside_play():
    scheduler = TickScheduler(180)
    assert scheduler.due(1000, READY) == 0
    assert scheduler.due(1000, OVER) == 0
    assert scheduler.elapsed_ms == 0


def test_ticks_at_fixed_interval():
    scheduler = TickScheduler(180)
    assert scheduler.due(500, PLAYING) == 0   # arming frame
    assert scheduler.due(100, PLAYING) == 0
    assert scheduler.due(100, PLAYING) == 1
    assert scheduler.elapsed_ms == 20
    assert scheduler.due(160, PLAYING) == 1
    assert scheduler.elapsed_ms == 0


def test_stalled_frame_yields_a_single_tick():
    """A long pause (window drag, suspend) must not replay the missed ticks."""
    scheduler = TickScheduler(180)
    scheduler.due(0, PLAYING)
    assert scheduler.due(5000, PLAYING) == 1
    assert scheduler.elapsed_ms == 0
    assert scheduler.due(16, PLAYING) == 0
    assert scheduler.due(170, PLAYING) == 1


def test_leaving_play_disarms_the_timer():
    scheduler = TickScheduler(180)
    scheduler.due(0, PLAYING)
    scheduler.due(170, PLAYING)
    assert scheduler.due(16, OVER) == 0
    assert not scheduler.armed
    # back in play: a full interval again before the first tick
    assert scheduler.due(16, PLAYING) == 0
    assert scheduler.due(170, PLAYING) == 0
    assert scheduler.due(10, PLAYING) == 1
