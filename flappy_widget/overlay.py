"""
overlay.py: What the prompt layer shows for each phase.

Pure functions of (phase, scale); no pygame involved, so the prompts can be
checked without a rendering backend.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import (
    GAME_OVER_FONT_MIN, GAME_OVER_FONT_SIZE, GAME_OVER_MARGIN, PLAY_FONT_MIN,
    PLAY_FONT_SIZE, PLAY_PADDING, PROMPT_BACKGROUND, PROMPT_COLOR,
    REPLAY_FONT_MIN, REPLAY_FONT_SIZE, REPLAY_PADDING, SCORE_FONT_MIN,
    SCORE_FONT_SIZE, SCORE_TOP, TEXT_COLOR
)
from .data_models import Phase

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class OverlayLine:
    text: str
    font_size: int
    color: Color
    background: Optional[Color] = None
    padding: Tuple[int, int] = (0, 0)       # (horizontal, vertical)
    margin_bottom: int = 0


@dataclass(frozen=True)
class Overlay:
    """A centred stack of lines drawn above every game element."""
    lines: Tuple[OverlayLine, ...]
    accepts_input: bool

    @property
    def visible(self) -> bool:
        return bool(self.lines)


HIDDEN = Overlay(lines=(), accepts_input=False)


def scaled(value: float, scale: float, minimum: int = 0) -> int:
    return max(minimum, round(value * scale))


def overlay_for(phase: Phase, scale: float) -> Overlay:
    if phase is Phase.IDLE:
        return Overlay(
            lines=(
                OverlayLine(
                    text="CLICK TO PLAY",
                    font_size=scaled(PLAY_FONT_SIZE, scale, PLAY_FONT_MIN),
                    color=PROMPT_COLOR,
                    background=PROMPT_BACKGROUND,
                    padding=(scaled(PLAY_PADDING[0], scale), scaled(PLAY_PADDING[1], scale)),
                ),
            ),
            accepts_input=True,
        )

    if phase is Phase.GAME_OVER:
        return Overlay(
            lines=(
                OverlayLine(
                    text="GAME OVER",
                    font_size=scaled(GAME_OVER_FONT_SIZE, scale, GAME_OVER_FONT_MIN),
                    color=TEXT_COLOR,
                    margin_bottom=scaled(GAME_OVER_MARGIN, scale),
                ),
                OverlayLine(
                    text="CLICK TO REPLAY",
                    font_size=scaled(REPLAY_FONT_SIZE, scale, REPLAY_FONT_MIN),
                    color=PROMPT_COLOR,
                    background=PROMPT_BACKGROUND,
                    padding=(scaled(REPLAY_PADDING[0], scale), scaled(REPLAY_PADDING[1], scale)),
                ),
            ),
            accepts_input=True,
        )

    return HIDDEN


def score_label(score: int, scale: float) -> OverlayLine:
    """The score shown at the top centre while a game is on screen."""
    return OverlayLine(
        text="SCORE %d" % score,
        font_size=scaled(SCORE_FONT_SIZE, scale, SCORE_FONT_MIN),
        color=TEXT_COLOR,
    )


def score_top(scale: float) -> int:
    return scaled(SCORE_TOP, scale)
