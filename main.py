"""
Muncher Maze
============
pygame front end for the simulation core in ``maze_env.gamestate``.

The loop owns everything the core does not: the window, the frame clock,
the tick scheduler and the keyboard. Each frame it

- turns key presses into intents (``agents.keyboard_agent``),
- sends as many ``Tick`` intents as the scheduler says are due,
- draws the current (immutable) state.

Run:
    python main.py --difficulty Hard
"""

import argparse
import logging
import math
import random

import pygame

from agents.keyboard_agent import KeyboardAgent
from maze_env import config
from maze_env.board import HEIGHT, WIDTH, Tile
from maze_env.gamestate import SetDifficulty, Tick, dispatch
from maze_env.movement import DOWN, LEFT, UP
from maze_env.scheduler import TickScheduler
from maze_env.state import (
    Difficulty,
    GameStatus,
    GhostMode,
    ghost_is_blinking,
    initial_state,
)

log = logging.getLogger(__name__)

TS = config.TILE_SIZE
SCREEN_W = WIDTH * TS
SCREEN_H = HEIGHT * TS + config.HUD_HEIGHT

WALL_BLUE = (29, 78, 216)
PELLET_COLOR = (254, 240, 138)
MUNCHER_YELLOW = (250, 204, 21)
FRIGHTENED_BLUE = (37, 99, 235)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
CYAN_TEXT = (103, 232, 249)

_MOUTH_ANGLE = {UP: 90, DOWN: 270, LEFT: 180}


# ======================================================================
#  DESENHO
# ======================================================================
class Renderer:
    def __init__(self, screen):
        self.screen = screen
        self.font = pygame.font.Font(None, 28)
        self.big_font = pygame.font.Font(None, 56)

    def draw(self, state):
        self.screen.fill(BLACK)
        self._draw_board(state.board)
        self._draw_player(state.player)
        for ghost in state.ghosts:
            self._draw_ghost(ghost, state.frightened_ticks_left)
        self._draw_hud(state)
        if state.status != GameStatus.PLAYING:
            self._draw_overlay(state)

    def _cell_center(self, pos):
        return (pos[0] * TS + TS // 2, pos[1] * TS + TS // 2)

    def _draw_board(self, board):
        for y, row in enumerate(board):
            for x, tile in enumerate(row):
                if tile == Tile.WALL:
                    pygame.draw.rect(self.screen, WALL_BLUE, (x * TS, y * TS, TS, TS))
                elif tile == Tile.PELLET:
                    pygame.draw.circle(self.screen, PELLET_COLOR, self._cell_center((x, y)), 3)
                elif tile == Tile.POWER_PELLET:
                    pygame.draw.circle(self.screen, PELLET_COLOR, self._cell_center((x, y)), 6)

    def _draw_player(self, player):
        cx, cy = self._cell_center(player.position)
        radius = TS // 2 - 1
        pygame.draw.circle(self.screen, MUNCHER_YELLOW, (cx, cy), radius)
        if player.animating:
            # boca aberta: triângulo preto apontando para a direção atual
            angle = math.radians(_MOUTH_ANGLE.get(player.direction, 0))
            spread = math.radians(35)
            tip = [(cx, cy)]
            for a in (angle - spread, angle + spread):
                tip.append((cx + radius * math.cos(a), cy - radius * math.sin(a)))
            pygame.draw.polygon(self.screen, BLACK, tip)

    def _draw_ghost(self, ghost, frightened_ticks_left):
        cx, cy = self._cell_center(ghost.position)
        left, top = cx - TS // 2 + 2, cy - TS // 2 + 2
        size = TS - 4
        eyes = [(cx - 4, cy - 2), (cx + 4, cy - 2)]

        if ghost.mode == GhostMode.EATEN:
            for eye in eyes:
                pygame.draw.circle(self.screen, WHITE, eye, 3)
            return

        if ghost.mode == GhostMode.FRIGHTENED:
            color = WHITE if ghost_is_blinking(ghost, frightened_ticks_left) else FRIGHTENED_BLUE
        else:
            color = ghost.color
        pygame.draw.rect(self.screen, color, (left, top, size, size), border_top_left_radius=size // 2,
                         border_top_right_radius=size // 2)
        if ghost.mode == GhostMode.CHASE:
            for ex, ey in eyes:
                pygame.draw.circle(self.screen, WHITE, (ex, ey), 3)
                pygame.draw.circle(self.screen, BLACK, (ex, ey), 1)

    def _draw_hud(self, state):
        base = HEIGHT * TS
        self.screen.blit(self.font.render(f"SCORE: {state.score}", True, WHITE), (8, base + 10))
        for i in range(state.lives):
            pygame.draw.circle(self.screen, MUNCHER_YELLOW, (SCREEN_W - 20 - i * 26, base + 20), 9)

    def _draw_overlay(self, state):
        veil = pygame.Surface((SCREEN_W, HEIGHT * TS), pygame.SRCALPHA)
        veil.fill((0, 0, 0, 180))
        self.screen.blit(veil, (0, 0))

        titles = {
            GameStatus.READY: "READY?",
            GameStatus.GAME_OVER: "GAME OVER",
            GameStatus.WON: "YOU WON!",
        }
        hint = "Press any key to start" if state.status == GameStatus.READY else "Press R to restart"
        self._center_text(self.big_font, titles[state.status], MUNCHER_YELLOW, 180)
        self._center_text(self.font, hint, WHITE, 230)

        if state.status == GameStatus.READY:
            self._center_text(self.font, "DIFFICULTY (1/2/3)", CYAN_TEXT, 290)
            for i, level in enumerate(Difficulty):
                color = MUNCHER_YELLOW if level == state.difficulty else WHITE
                text = self.font.render(f"{i + 1}. {level.value}", True, color)
                self.screen.blit(text, (SCREEN_W // 2 - 150 + i * 110, 320))

    def _center_text(self, font, text, color, y):
        surface = font.render(text, True, color)
        self.screen.blit(surface, surface.get_rect(center=(SCREEN_W // 2, y)))


# ======================================================================
#  LOOP DO JOGO
# ======================================================================
class MuncherGameLoop:
    def __init__(self, difficulty=None, tick_ms=config.TICK_MS, seed=None):
        pygame.init()
        self.screen = pygame.display.set_mode([SCREEN_W, SCREEN_H])
        pygame.display.set_caption("Muncher Maze")
        self.timer = pygame.time.Clock()
        self.renderer = Renderer(self.screen)
        self.agent = KeyboardAgent()
        self.scheduler = TickScheduler(tick_ms)
        self.rng = random.Random(seed)
        self.difficulty = difficulty
        self.state = self._fresh_state()

    def _fresh_state(self):
        state = initial_state()
        if self.difficulty is not None:
            state = dispatch(state, SetDifficulty(self.difficulty))
        return state

    def send(self, intent):
        previous = self.state.status
        self.state = dispatch(self.state, intent, self.rng)
        if self.state.status != previous:
            log.debug("status %s -> %s", previous.value, self.state.status.value)

    def run(self):
        running = True
        while running:
            elapsed = self.timer.tick(config.FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    for intent in self.agent.get_intents(event.key, self.state.status):
                        self.send(intent)

            for _ in range(self.scheduler.due(elapsed, self.state)):
                self.send(Tick())

            self.renderer.draw(self.state)
            pygame.display.flip()

        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Muncher Maze")
    parser.add_argument("--difficulty", choices=[d.value for d in Difficulty], default=None)
    parser.add_argument("--tick-ms", type=int, default=config.TICK_MS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    print("=" * 50)
    print(" Muncher Maze")
    print("=" * 50)
    difficulty = Difficulty(args.difficulty) if args.difficulty else None
    MuncherGameLoop(difficulty, args.tick_ms, args.seed).run()


if __name__ == "__main__":
    main()
