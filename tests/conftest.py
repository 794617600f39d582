import os
import random
from collections import defaultdict

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def keys():
    """Key state with nothing held; tests flip entries to True."""
    return defaultdict(bool)


@pytest.fixture
def surface():
    pygame.font.init()
    yield pygame.Surface((640, 480))
    pygame.font.quit()
