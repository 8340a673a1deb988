import os
import random

import pytest

# No window needed for any test.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from snake_game.food import FoodSpawner  # noqa: E402
from snake_game.grid import Direction  # noqa: E402
from snake_game.state import GameState  # noqa: E402


@pytest.fixture
def spawner():
    return FoodSpawner(random.Random(1234))


@pytest.fixture
def make_state():
    def _make(snake, food=(0, 0), direction=Direction.UP, **kwargs):
        return GameState(snake=tuple(snake), food=food, direction=direction, **kwargs)
    return _make
