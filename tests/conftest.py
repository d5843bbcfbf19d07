import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from breakout.game import Game
from breakout.scheduler import FrameScheduler


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def game(scheduler):
    return Game(scheduler=scheduler)
