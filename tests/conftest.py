from __future__ import annotations

import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from novadefense.config import GameConfig
from novadefense.engine import GameSession


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def session(rng: random.Random) -> GameSession:
    game = GameSession(GameConfig(), rng=rng)
    game.reset()
    return game
