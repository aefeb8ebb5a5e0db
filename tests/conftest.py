import os
import random

# Must be set before pygame is imported anywhere.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from gridsnake.model import GameEngine
from gridsnake.score_store import MemoryScoreStore


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def engine(store):
    eng = GameEngine(score_store=store, rng=random.Random(1234))
    eng.reset()
    return eng
