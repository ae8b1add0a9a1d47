from maze_env import config
from maze_env.state import GameStatus


class TickScheduler:
    """
    Turns frame time into simulation ticks.

    The host loop calls ``due(elapsed_ms, state)`` once per frame and sends
    that many ``Tick`` intents: never more than one, so a stalled frame
    does not fast-forward the game. Outside PLAYING the timer is disarmed
    and any accumulated time is dropped, so a game always resumes with a
    full interval before its first tick.
    """
    def __init__(self, interval_ms=config.TICK_MS):
        self.interval_ms = interval_ms
        self.elapsed_ms = 0
        self.armed = False

    def due(self, elapsed_ms, state) -> int:
        if state.status != GameStatus.PLAYING:
            self.armed = False
            self.elapsed_ms = 0
            return 0
        if not self.armed:
            # tempo do frame em que o jogo começou não conta
            self.armed = True
            return 0

        self.elapsed_ms += elapsed_ms
        if self.elapsed_ms < self.interval_ms:
            return 0
        self.elapsed_ms -= self.interval_ms
        if self.elapsed_ms >= self.interval_ms:
            # frame travado: sem recuperar ticks atrasados
            self.elapsed_ms = 0
        return 1
