"""
widget.py: The dashboard module contract: metadata and render().

render() mounts one FlappyWidget into a host region and hands back its
cleanup callable. Each mount owns its session, assets, readiness flag and
frame callback; nothing is shared between instances.
"""

import logging
import random
from typing import Callable, Mapping, Optional

import pygame

from .assets import AssetLoader, FontBook, make_background, make_bird_sprite, make_pipe_sprite
from .data_models import IntendedSize, WidgetMetadata, WidgetOptions, layout_scale
from .errors import FlappyWidgetError
from .game_engine import GameEngine
from .host import SurfaceRegion
from .renderer import Renderer
from .scheduler import FrameScheduler

logger = logging.getLogger(__name__)

metadata = WidgetMetadata(
    id="flappy",
    name="Flappy Bird",
    description="Tap to keep the bird flying and score points",
    size="2x2",
    intended_size=IntendedSize(width=240, height=240),
)


class FlappyWidget:
    """
    One mounted game. The frame callback does nothing but poll the font
    until it settles; from then on every frame runs update() then draw().
    """

    def __init__(self, region: SurfaceRegion, options: WidgetOptions,
                 scheduler: FrameScheduler, loader: Optional[AssetLoader] = None,
                 rng: Optional[random.Random] = None, strict: bool = __debug__):
        self.region = region
        self.options = options
        self.scheduler = scheduler
        self.loader = loader or AssetLoader()
        self.engine = GameEngine(region.width, region.height, rng=rng, strict=strict)
        self.scale = layout_scale(region.width, region.height, metadata.intended_size)
        self.surface: Optional[pygame.Surface] = None
        self.fonts: Optional[FontBook] = None
        self.renderer: Optional[Renderer] = None
        self.ready = False

        self._alive = False
        self._frame_handle: Optional[int] = None

    @property
    def alive(self) -> bool:
        return self._alive

    def mount(self) -> Callable[[], None]:
        self._alive = True
        self._sync_surface()
        self.region.add_listener("click", self._on_click)
        self.region.add_listener("resize", self._on_resize)

        options = self.options
        self.fonts = FontBook(self.loader.load_font(options.font))
        self.renderer = Renderer(
            theme=options.theme,
            bird=self.loader.load_image("bird", options.bird_image, make_bird_sprite),
            pipe=self.loader.load_image("pipe", options.pipe_image, make_pipe_sprite),
            background=self.loader.load_image(
                "background", options.background_image,
                lambda: make_background(options.is_dark)),
            fonts=self.fonts,
        )

        self._frame_handle = self.scheduler.request_frame(self._frame)
        logger.debug("Mounted %s at %dx%d", metadata.id, self.region.width, self.region.height)
        return self.cleanup

    def _sync_surface(self):
        """Keeps the surface's pixel size equal to the region's."""
        size = (max(0, int(self.region.width)), max(0, int(self.region.height)))
        self.surface = pygame.Surface(size)
        self.region.attach(self.surface)
        self.engine.resize(*size)
        self.scale = layout_scale(size[0], size[1], metadata.intended_size)

    def _on_resize(self, width: int, height: int):
        if not self._alive:
            return
        self._sync_surface()

    def _on_click(self, pos=None):
        if not self._alive:
            return
        self.engine.press()

    def _frame(self):
        self._frame_handle = None
        if not self._alive:
            return

        if not self.ready:
            if not self.fonts.source.poll():
                self._frame_handle = self.scheduler.request_frame(self._frame)
                return
            self.ready = True
            logger.debug("Font settled, starting the frame cycle")

        try:
            self.tick()
        except FlappyWidgetError:
            # The session can no longer be trusted: stop this instance only
            logger.exception("Stopping %s after a failed frame", metadata.id)
            self.cleanup()
            return
        if self._alive:
            self._frame_handle = self.scheduler.request_frame(self._frame)

    def tick(self):
        """update() then draw(); a zero-sized surface makes it a no-op frame."""
        width, height = self.surface.get_size()
        if width == 0 or height == 0:
            return
        self.engine.update()
        self.renderer.draw(self.surface, self.engine.session, self.engine.phase, self.scale)

    def cleanup(self):
        if not self._alive:
            return
        self._alive = False
        if self._frame_handle is not None:
            self.scheduler.cancel_frame(self._frame_handle)
            self._frame_handle = None
        self.region.remove_listener("click", self._on_click)
        self.region.remove_listener("resize", self._on_resize)
        self.region.clear()
        self.loader.close()
        logger.debug("Cleaned up %s", metadata.id)


def render(region: SurfaceRegion, options: Optional[Mapping] = None, *,
           scheduler: Optional[FrameScheduler] = None,
           loader: Optional[AssetLoader] = None,
           rng: Optional[random.Random] = None) -> Callable[[], None]:
    """Mounts the game into `region` and returns its cleanup callable."""
    widget = FlappyWidget(
        region,
        WidgetOptions.from_mapping(options),
        scheduler or region.scheduler,
        loader=loader,
        rng=rng,
    )
    return widget.mount()
