"""
assets.py: Asynchronously loaded sprites and fonts.

Files are read on a small per-widget thread pool. Completion is only ever
observed by polling from the frame callback, so game state is never touched
off the tick thread.
"""

import io
import logging
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional

import pygame

from .constants import BIRD_HEIGHT, BIRD_WIDTH, INTENDED_HEIGHT, INTENDED_WIDTH, PIPE_WIDTH

logger = logging.getLogger(__name__)


class Asset:
    """A resource that is either still loading, ready, or failed."""

    def __init__(self, name: str, future: Optional[Future] = None):
        self.name = name
        self.value: Any = None
        self.failed = False
        self._future = future
        self._settled = future is None

    @classmethod
    def resolved(cls, name: str, value: Any) -> "Asset":
        asset = cls(name)
        asset.value = value
        return asset

    def poll(self) -> bool:
        """Collects the load result if it arrived. Returns True once settled."""
        if self._settled:
            return True
        if not self._future.done():
            return False

        future, self._future = self._future, None
        self._settled = True
        try:
            self.value = future.result()
        except (pygame.error, OSError, CancelledError) as e:
            self.failed = True
            logger.warning("Could not load asset %s: %s", self.name, e)
        return True

    @property
    def ready(self) -> bool:
        return self.poll() and not self.failed


def _read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


class AssetLoader:
    """Starts loads on a thread pool owned by one widget instance."""

    def __init__(self, executor: Optional[ThreadPoolExecutor] = None):
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="flappy-assets")

    def load_image(self, name: str, path: Optional[str],
                   fallback: Callable[[], pygame.Surface]) -> Asset:
        if path is None:
            return Asset.resolved(name, fallback())
        return Asset(name, self._executor.submit(pygame.image.load, path))

    def load_font(self, path: Optional[str]) -> Asset:
        """A font file as raw bytes; a None value means pygame's default font."""
        if path is None:
            return Asset.resolved("font", None)
        return Asset("font", self._executor.submit(_read_bytes, path))

    def close(self):
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)


class FontBook:
    """Fonts of the loaded face, created on demand per pixel size."""

    def __init__(self, source: Asset):
        self.source = source
        self._fonts: Dict[int, pygame.font.Font] = {}

    def get(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = self._create(size)
        return font

    def _create(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        data = self.source.value if self.source.ready else None
        if data:
            try:
                font = pygame.font.Font(io.BytesIO(data), size)
                # Bad data can survive construction and only fail on render
                font.render("0", True, (0, 0, 0))
                return font
            except (RuntimeError, OSError) as e:  # pygame.error is a RuntimeError
                logger.warning("Unusable font data, using the default font: %s", e)
        return pygame.font.Font(None, size)


# ----------------- Built-in sprites -----------------

def _lerp_color(c1, c2, t):
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def make_bird_sprite() -> pygame.Surface:
    sprite = pygame.Surface((BIRD_WIDTH, BIRD_HEIGHT), pygame.SRCALPHA)
    pygame.draw.ellipse(sprite, (255, 214, 0), (0, 2, BIRD_WIDTH - 8, BIRD_HEIGHT - 4))
    pygame.draw.ellipse(sprite, (250, 160, 0), (6, BIRD_HEIGHT // 2, 18, 10))
    pygame.draw.circle(sprite, (255, 255, 255), (BIRD_WIDTH - 18, 12), 7)
    pygame.draw.circle(sprite, (20, 20, 20), (BIRD_WIDTH - 15, 12), 3)
    pygame.draw.polygon(sprite, (240, 90, 40), [
        (BIRD_WIDTH - 12, 18), (BIRD_WIDTH, 22), (BIRD_WIDTH - 12, 26)])
    return sprite


def make_pipe_sprite() -> pygame.Surface:
    """One pipe segment with its lip on top; the renderer tiles it."""
    height = 160
    sprite = pygame.Surface((PIPE_WIDTH, height), pygame.SRCALPHA)
    pygame.draw.rect(sprite, (70, 200, 120), (6, 0, PIPE_WIDTH - 12, height))
    pygame.draw.rect(sprite, (40, 120, 70), (6, 0, PIPE_WIDTH - 12, height), 3)
    pygame.draw.rect(sprite, (70, 200, 120), (0, 0, PIPE_WIDTH, 24))
    pygame.draw.rect(sprite, (40, 120, 70), (0, 0, PIPE_WIDTH, 24), 3)
    return sprite


def make_background(dark: bool) -> pygame.Surface:
    top, bottom = ((10, 12, 30), (40, 30, 70)) if dark else ((120, 200, 255), (70, 170, 245))
    background = pygame.Surface((INTENDED_WIDTH, INTENDED_HEIGHT))
    for y in range(INTENDED_HEIGHT):
        t = y / (INTENDED_HEIGHT - 1)
        pygame.draw.line(background, _lerp_color(top, bottom, t), (0, y), (INTENDED_WIDTH, y))
    return background
