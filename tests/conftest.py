import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from snake_arcade.state import GameState  # noqa: E402


@pytest.fixture
def state():
    """Fresh game with a seeded random source and food parked out of the way."""
    s = GameState(rng=random.Random(1234))
    s.food = (0, 0)
    return s
