from concurrent.futures import Future

import pygame
import pytest

from flappy_widget.assets import Asset, FontBook
from flappy_widget.constants import PROMPT_BACKGROUND, THEME_FILL
from flappy_widget.data_models import GameSession, Phase, Pipe
from flappy_widget.renderer import Renderer, cover_rect

RED = (255, 0, 0)


def _solid(size, color) -> pygame.Surface:
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def _rgb(surface: pygame.Surface, pos) -> tuple:
    return tuple(surface.get_at(pos))[:3]


def _renderer(theme="light", bird=None, pipe=None, background=None) -> Renderer:
    return Renderer(
        theme=theme,
        bird=bird or Asset("bird", Future()),
        pipe=pipe or Asset("pipe", Future()),
        background=background or Asset("background", Future()),
        fonts=FontBook(Asset.resolved("font", None)),
    )


@pytest.mark.parametrize("image_size", [(100, 50), (50, 100), (240, 240), (1920, 1080)])
def test_cover_rect_fills_the_surface_without_stretching(image_size) -> None:
    x, y, width, height = cover_rect(image_size, (240, 240))

    assert x <= 0 and y <= 0
    assert x + width >= 240 and y + height >= 240
    assert abs(width / height - image_size[0] / image_size[1]) < 0.02
    assert abs((x + width / 2) - 120) <= 1
    assert abs((y + height / 2) - 120) <= 1


def test_cover_rect_rejects_empty_sizes() -> None:
    assert cover_rect((0, 10), (240, 240)) is None
    assert cover_rect((10, 10), (0, 240)) is None


def test_unready_assets_are_skipped() -> None:
    surface = pygame.Surface((240, 240))
    session = GameSession(width=240, height=240, pipes=[Pipe(x=40, gap_y=60)])

    _renderer().draw(surface, session, Phase.PLAYING, 1.0)

    assert _rgb(surface, (0, 0)) == THEME_FILL["light"]
    assert _rgb(surface, (74, 138)) == THEME_FILL["light"]


def test_zero_sized_images_are_skipped() -> None:
    surface = pygame.Surface((240, 240))
    empty = Asset.resolved("pipe", pygame.Surface((0, 0)))
    session = GameSession(width=240, height=240, pipes=[Pipe(x=40, gap_y=60)])

    _renderer(theme="dark", pipe=empty, background=empty).draw(surface, session, Phase.PLAYING, 1.0)

    assert _rgb(surface, (45, 10)) == THEME_FILL["dark"]


def test_background_covers_the_surface() -> None:
    surface = pygame.Surface((300, 200))
    background = Asset.resolved("background", _solid((50, 50), (0, 0, 255)))
    session = GameSession(width=300, height=200)

    _renderer(background=background).draw(surface, session, Phase.IDLE, 1.0)

    for corner in [(0, 0), (299, 0), (0, 199), (299, 199)]:
        assert _rgb(surface, corner) == (0, 0, 255)


def test_bird_and_pipes_are_drawn_while_playing() -> None:
    surface = pygame.Surface((240, 240))
    bird = Asset.resolved("bird", _solid((48, 36), RED))
    pipe = Asset.resolved("pipe", _solid((40, 80), (0, 255, 0)))
    session = GameSession(width=240, height=240, pipes=[Pipe(x=140, gap_y=60)])

    _renderer(bird=bird, pipe=pipe).draw(surface, session, Phase.PLAYING, 1.0)

    assert _rgb(surface, (74, 138)) == RED
    # above and below the gap, nothing inside it
    assert _rgb(surface, (180, 30)) == (0, 255, 0)
    assert _rgb(surface, (180, 220)) == (0, 255, 0)
    assert _rgb(surface, (180, 120)) == THEME_FILL["light"]


def test_idle_draws_no_game_elements() -> None:
    surface = pygame.Surface((240, 240))
    bird = Asset.resolved("bird", _solid((48, 36), RED))
    session = GameSession(width=240, height=240)
    session.bird.y = 10

    _renderer(bird=bird).draw(surface, session, Phase.IDLE, 1.0)

    assert _rgb(surface, (74, 28)) == THEME_FILL["light"]


def test_game_over_overlay_is_drawn() -> None:
    surface = pygame.Surface((240, 240))
    session = GameSession(width=240, height=240)

    _renderer(theme="dark").draw(surface, session, Phase.GAME_OVER, 1.0)

    colors = {_rgb(surface, (x, y)) for x in range(0, 240, 2) for y in range(0, 240, 2)}
    assert PROMPT_BACKGROUND in colors
