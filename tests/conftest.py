import os

# Headless pygame: must be set before pygame opens a display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np  # type: ignore
import pytest

from snake.config import GameConfig
from snake.food import Food
from snake.game import Game
from snake.grid import Position
from snake.snake import Snake


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def cfg():
    return GameConfig()


@pytest.fixture
def make_game(cfg, rng):
    """Build a game with a hand-placed snake and food."""

    def _make(body, direction, food, config=None):
        config = config or cfg
        snake = Snake([Position(*p) for p in body], direction, config.cell_size)
        return Game(config, rng=rng, snake=snake, food=Food(Position(*food), rng))

    return _make


@pytest.fixture
def far_food():
    return (90, 90)
