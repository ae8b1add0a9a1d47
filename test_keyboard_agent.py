import pygame
import pytest

from agents.keyboard_agent import KeyboardAgent
from main import parse_args
from maze_env.gamestate import Move, Restart, SetDifficulty, Start, dispatch
from maze_env.movement import DOWN, LEFT, RIGHT, UP
from maze_env.state import Difficulty, GameStatus, initial_state


@pytest.fixture
def agent():
    return KeyboardAgent()


@pytest.mark.parametrize("status", list(GameStatus))
def test_r_always_restarts(agent, status):
    assert agent.get_intents(pygame.K_r, status) == [Restart()]


@pytest.mark.parametrize("key, direction", [
    (pygame.K_UP, UP), (pygame.K_w, UP),
    (pygame.K_DOWN, DOWN), (pygame.K_s, DOWN),
    (pygame.K_LEFT, LEFT), (pygame.K_a, LEFT),
    (pygame.K_RIGHT, RIGHT), (pygame.K_d, RIGHT),
])
def test_movement_keys(agent, key, direction):
    assert agent.get_intents(key, GameStatus.PLAYING) == [Move(direction)]


def test_any_key_starts_from_ready(agent):
    assert agent.get_intents(pygame.K_SPACE, GameStatus.READY) == [Start()]
    assert agent.get_intents(pygame.K_LEFT, GameStatus.READY) == [Start(), Move(LEFT)]


def test_other_keys_do_nothing_while_playing(agent):
    assert agent.get_intents(pygame.K_SPACE, GameStatus.PLAYING) == []


def test_number_keys_pick_difficulty_before_start(agent):
    assert agent.get_intents(pygame.K_1, GameStatus.READY) == [SetDifficulty(Difficulty.EASY)]
    assert agent.get_intents(pygame.K_3, GameStatus.READY) == [SetDifficulty(Difficulty.HARD)]
    assert agent.get_intents(pygame.K_3, GameStatus.PLAYING) == []


def test_start_key_queues_first_direction(agent):
    """Start is applied before Move, so the direction is accepted."""
    state = initial_state()
    for intent in agent.get_intents(pygame.K_RIGHT, state.status):
        state = dispatch(state, intent)
    assert state.status == GameStatus.PLAYING
    assert state.player.queued_direction == RIGHT


def test_command_line_defaults():
    args = parse_args([])
    assert args.difficulty is None
    assert args.tick_ms == 180
    assert args.seed is None

    args = parse_args(["--difficulty", "Hard", "--seed", "4"])
    assert args.difficulty == "Hard"
    assert args.seed == 4
