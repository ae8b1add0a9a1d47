import pygame

from maze_env.gamestate import Move, Restart, SetDifficulty, Start
from maze_env.movement import DOWN, LEFT, RIGHT, UP
from maze_env.state import Difficulty, GameStatus

MOVE_KEYS = {
    pygame.K_UP: UP,       pygame.K_w: UP,
    pygame.K_DOWN: DOWN,   pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,   pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}

DIFFICULTY_KEYS = {
    pygame.K_1: Difficulty.EASY,
    pygame.K_2: Difficulty.NORMAL,
    pygame.K_3: Difficulty.HARD,
}


class KeyboardAgent:
    """Maps a key press to the ordered list of intents it stands for."""

    def get_intents(self, key, status):
        if key == pygame.K_r:
            return [Restart()]

        if status == GameStatus.READY and key in DIFFICULTY_KEYS:
            return [SetDifficulty(DIFFICULTY_KEYS[key])]

        intents = []
        # Qualquer tecla começa o jogo; a direção vale já no primeiro tick
        if status == GameStatus.READY:
            intents.append(Start())
        if key in MOVE_KEYS:
            intents.append(Move(MOVE_KEYS[key]))
        return intents
