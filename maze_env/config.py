"""Tuning constants shared by the simulation core and the pygame front end."""

TILE_SIZE = 24            # pixels per grid cell
HUD_HEIGHT = 40           # score / lives strip under the maze
FPS = 60
TICK_MS = 180             # one simulation tick every 180 ms

START_LIVES = 3
FRIGHTENED_DURATION = 40  # in ticks
BLINK_TICKS = 15          # frightened ghosts start blinking below this

PELLET_SCORE = 10
POWER_PELLET_SCORE = 50
GHOST_SCORE = 200

EASY_RANDOM_CHANCE = 0.5
