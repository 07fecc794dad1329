"""
renderer.py: Draws a game session into a pygame surface.

Drawing is a pure read of the session. Assets that are still loading, failed,
or have no pixels are skipped rather than raising.
"""

import logging
import math
from typing import Dict, Optional, Tuple

import pygame

from .assets import Asset, FontBook
from .constants import BACKGROUND_BLEED, PIPE_GAP, PIPE_WIDTH, THEME_FILL
from .data_models import GameSession, Phase
from .overlay import Overlay, OverlayLine, overlay_for, score_label, score_top

logger = logging.getLogger(__name__)


def cover_rect(image_size: Tuple[int, int], surface_size: Tuple[int, int],
               bleed: int = BACKGROUND_BLEED) -> Optional[Tuple[int, int, int, int]]:
    """
    Isotropic "cover" fit: the smallest uniform scale that fills the surface
    plus `bleed` pixels, centred. Returns (x, y, width, height) or None when
    either size is empty.
    """
    image_w, image_h = image_size
    surface_w, surface_h = surface_size
    if image_w <= 0 or image_h <= 0 or surface_w <= 0 or surface_h <= 0:
        return None

    scale = max((surface_w + bleed) / image_w, (surface_h + bleed) / image_h)
    width = math.ceil(image_w * scale)
    height = math.ceil(image_h * scale)
    return (surface_w - width) // 2, (surface_h - height) // 2, width, height


def _has_pixels(image: pygame.Surface) -> bool:
    width, height = image.get_size()
    return width > 0 and height > 0


class Renderer:
    """Composites background, pipes, bird, score and overlay, in that order."""

    def __init__(self, theme: str, bird: Asset, pipe: Asset, background: Asset, fonts: FontBook):
        self.fill = THEME_FILL[theme]
        self.bird = bird
        self.pipe = pipe
        self.background = background
        self.fonts = fonts
        self._scaled: Dict[tuple, pygame.Surface] = {}

    def draw(self, surface: pygame.Surface, session: GameSession, phase: Phase, scale: float):
        surface.fill(self.fill)

        steps = [("background", self._draw_background)]
        if phase is not Phase.IDLE:
            steps += [
                ("pipes", self._draw_pipes),
                ("bird", self._draw_bird),
                ("score", self._draw_score),
            ]

        for name, step in steps:
            try:
                step(surface, session, scale)
            except pygame.error as e:
                logger.warning("Skipped drawing %s: %s", name, e)

        try:
            self.draw_overlay(surface, overlay_for(phase, scale))
        except pygame.error as e:
            logger.warning("Skipped drawing overlay: %s", e)

    # --- Scaled copies are cached per source image and target size ---

    def _scaled_copy(self, image: pygame.Surface, size: Tuple[int, int]) -> pygame.Surface:
        key = (id(image), size)
        scaled = self._scaled.get(key)
        if scaled is None:
            if len(self._scaled) > 16:
                self._scaled.clear()
            scaled = self._scaled[key] = pygame.transform.scale(image, size)
        return scaled

    def _draw_background(self, surface: pygame.Surface, session: GameSession, scale: float):
        if not self.background.ready or not _has_pixels(self.background.value):
            return
        rect = cover_rect(self.background.value.get_size(), surface.get_size())
        if rect is None:
            return
        x, y, width, height = rect
        surface.blit(self._scaled_copy(self.background.value, (width, height)), (x, y))

    def _draw_pipes(self, surface: pygame.Surface, session: GameSession, scale: float):
        if not self.pipe.ready or not _has_pixels(self.pipe.value):
            return
        image = self.pipe.value
        pipe_h = round(image.get_height() * PIPE_WIDTH / image.get_width())
        if pipe_h <= 0:
            return

        tile = self._scaled_copy(image, (PIPE_WIDTH, pipe_h))
        flipped_key = ("flipped", id(image), pipe_h)
        flipped = self._scaled.get(flipped_key)
        if flipped is None:
            flipped = self._scaled[flipped_key] = pygame.transform.flip(tile, False, True)

        height = surface.get_height()
        for pipe in session.pipes:
            gap_top = pipe.gap_y
            gap_bottom = gap_top + PIPE_GAP

            # Top pipe: flipped tiles stacked upward from the gap
            y = gap_top
            while y > -pipe_h:
                surface.blit(flipped, (round(pipe.x), round(y - pipe_h)))
                y -= pipe_h

            # Bottom pipe: tiles stacked downward from the gap
            y = gap_bottom
            while y < height:
                surface.blit(tile, (round(pipe.x), round(y)))
                y += pipe_h

    def _draw_bird(self, surface: pygame.Surface, session: GameSession, scale: float):
        if not self.bird.ready or not _has_pixels(self.bird.value):
            return
        bird = session.bird
        sprite = self._scaled_copy(self.bird.value, (bird.width, bird.height))
        # pygame rotates counter-clockwise, positive rotation is nose down
        rotated = pygame.transform.rotate(sprite, -math.degrees(bird.rotation))
        cx, cy = bird.center
        surface.blit(rotated, rotated.get_rect(center=(round(cx), round(cy))))

    def _draw_score(self, surface: pygame.Surface, session: GameSession, scale: float):
        label = score_label(session.score, scale)
        text = self.fonts.get(label.font_size).render(label.text, True, label.color)
        surface.blit(text, text.get_rect(midtop=(surface.get_width() // 2, score_top(scale))))

    def _render_line(self, line: OverlayLine) -> pygame.Surface:
        text = self.fonts.get(line.font_size).render(line.text, True, line.color)
        if line.background is None:
            return text
        pad_x, pad_y = line.padding
        box = pygame.Surface((text.get_width() + 2 * pad_x, text.get_height() + 2 * pad_y))
        box.fill(line.background)
        box.blit(text, (pad_x, pad_y))
        return box

    def draw_overlay(self, surface: pygame.Surface, overlay: Overlay):
        if not overlay.visible:
            return
        rendered = [(self._render_line(line), line.margin_bottom) for line in overlay.lines]
        total = sum(image.get_height() + margin for image, margin in rendered)
        total -= rendered[-1][1]

        center_x = surface.get_width() // 2
        y = (surface.get_height() - total) // 2
        for image, margin in rendered:
            surface.blit(image, image.get_rect(midtop=(center_x, y)))
            y += image.get_height() + margin
