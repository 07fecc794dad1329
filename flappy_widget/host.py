"""
host.py: A minimal pygame window that hosts one widget.

SurfaceRegion is the rectangle a dashboard hands to a widget: it carries the
pixel size, the surface the widget attached, and the click/resize listeners.
run_host() plays the dashboard's part for a single widget in its own window.
"""

import logging
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Tuple

import pygame

from .constants import INTENDED_HEIGHT, INTENDED_WIDTH, REFRESH_RATE
from .scheduler import FrameScheduler

logger = logging.getLogger(__name__)

Listener = Callable[..., None]


class SurfaceRegion:
    def __init__(self, width: int, height: int, scheduler: Optional[FrameScheduler] = None):
        self.width = width
        self.height = height
        self.scheduler = scheduler or FrameScheduler()
        self.surface: Optional[pygame.Surface] = None
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def attach(self, surface: pygame.Surface):
        self.surface = surface

    def clear(self):
        self.surface = None

    def add_listener(self, event_type: str, listener: Listener):
        self._listeners[event_type].append(listener)

    def remove_listener(self, event_type: str, listener: Listener) -> bool:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)
            return True
        return False

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def dispatch(self, event_type: str, *args):
        for listener in list(self._listeners.get(event_type, [])):
            listener(*args)

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height
        self.dispatch("resize", width, height)

    def click(self, pos: Tuple[int, int] = (0, 0)):
        self.dispatch("click", pos)


def run_host(render, theme: str = "light", width: int = INTENDED_WIDTH,
             height: int = INTENDED_HEIGHT):
    """The main host loop: one widget, one resizable window, ~60 refreshes a second."""
    pygame.init()
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    pygame.display.set_caption("Flappy Bird")
    clock = pygame.time.Clock()

    region = SurfaceRegion(width, height)
    cleanup = render(region, {"theme": theme})
    logger.info("Widget mounted at %dx%d (%s theme)", width, height, theme)

    running = True
    try:
        while running:
            clock.tick(REFRESH_RATE)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    region.click(event.pos)
                elif event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                    region.resize(event.w, event.h)

            region.scheduler.flush()

            screen.fill((0, 0, 0))
            if region.surface is not None:
                screen.blit(region.surface, (0, 0))
            pygame.display.flip()
    finally:
        cleanup()
        pygame.quit()
        logger.info("Widget unmounted")
