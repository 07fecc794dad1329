import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random
from concurrent.futures import Future

import pygame
import pytest

from flappy_widget.assets import Asset, AssetLoader


@pytest.fixture(scope="session", autouse=True)
def _init_pygame():
    pygame.init()
    yield
    pygame.quit()


class MidRandom(random.Random):
    """Always draws the middle of the range, so gaps land at a known height."""

    def random(self):
        return 0.5


class ManualLoader(AssetLoader):
    """Built-in sprites right away; the font settles only when a test says so."""

    def __init__(self):
        self.font_future = Future()
        self.closed = 0

    def load_image(self, name, path, fallback):
        return Asset.resolved(name, fallback())

    def load_font(self, path):
        return Asset("font", self.font_future)

    def close(self):
        self.closed += 1


@pytest.fixture()
def mid_rng():
    return MidRandom()


@pytest.fixture()
def manual_loader():
    return ManualLoader()
