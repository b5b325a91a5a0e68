import os
import random

# keep pygame from trying to open a real display or audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from snakegame.config import Config
from snakegame.notifier import NullNotifier
from snakegame.scheduler import ManualScheduler
from snakegame.session import GameSession


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def notifier():
    return NullNotifier()


@pytest.fixture
def make_session(scheduler, notifier):
    """Build a started session on a virtual clock."""
    def _make(**overrides):
        cfg = Config(seed=0, **overrides)
        session = GameSession(
            scheduler, notifier, scheduler.clock, cfg,
            rng=random.Random(cfg.seed),
        )
        session.start()
        return session
    return _make
