import random

import pytest

from game_builders import StubRng
from maze_env.board import make_board


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def stub_rng():
    return StubRng()


@pytest.fixture
def open_room():
    """
    Sala 3x3 aberta cercada por paredes.
    0 = caminho livre, 1 = parede
    """
    return make_board([
        [1, 1, 1, 1, 1],
        [1, 0, 0, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 1, 1],
    ])


@pytest.fixture
def u_maze():
    """Two corridors joined only on the left; the right end of the bottom one is a dead end."""
    return [
        [1, 1, 1, 1, 1, 1, 1],
        [1, 5, 5, 5, 5, 2, 1],
        [1, 5, 1, 1, 1, 1, 1],
        [1, 5, 5, 5, 5, 5, 1],
        [1, 1, 1, 1, 1, 1, 1],
    ]
