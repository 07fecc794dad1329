"""
data_models.py: Data structures for the game state and the widget contract.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Mapping, Optional, Tuple

from .constants import (
    BIRD_HEIGHT, BIRD_WIDTH, BIRD_X, DEFAULT_THEME, INTENDED_HEIGHT,
    INTENDED_WIDTH, THEMES
)

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    """Lifecycle phase of a game session."""
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class Bird:
    """The player-controlled actor. y is the top edge of its hitbox."""
    y: float
    x: float = BIRD_X
    width: int = BIRD_WIDTH
    height: int = BIRD_HEIGHT
    dy: float = 0.0
    rotation: float = 0.0       # radians, positive is nose down

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass
class Pipe:
    """A top/bottom pipe pair. gap_y is the top of the passable gap."""
    x: float
    gap_y: float


@dataclass
class GameSession:
    """Everything update() mutates for one mounted widget."""
    width: int
    height: int
    bird: Optional[Bird] = None
    pipes: List[Pipe] = field(default_factory=list)
    frame: int = 0
    score: int = 0

    def __post_init__(self):
        if self.bird is None:
            self.bird = Bird(y=self.height / 2)

    def reset(self):
        """Puts the bird back at mid-height and clears the course."""
        self.bird.y = self.height / 2
        self.bird.dy = 0.0
        self.bird.rotation = 0.0
        self.pipes = []
        self.frame = 0
        self.score = 0


# ----------------- Widget contract -----------------

@dataclass(frozen=True)
class IntendedSize:
    width: int
    height: int


@dataclass(frozen=True)
class Link:
    label: str
    url: str


@dataclass(frozen=True)
class WidgetMetadata:
    """Static descriptor a host uses to list the widget."""
    id: str
    name: str
    description: str
    size: str
    intended_size: Optional[IntendedSize] = None
    links: Tuple[Link, ...] = ()


@dataclass
class WidgetOptions:
    """Per-mount configuration handed over by the host."""
    theme: str = DEFAULT_THEME
    bird_image: Optional[str] = None
    pipe_image: Optional[str] = None
    background_image: Optional[str] = None
    font: Optional[str] = None

    @property
    def is_dark(self) -> bool:
        return self.theme == "dark"

    @classmethod
    def from_mapping(cls, options: Optional[Mapping]) -> "WidgetOptions":
        options = dict(options or {})
        theme = options.get("theme", DEFAULT_THEME)
        if theme not in THEMES:
            logger.warning("Unknown theme %r, falling back to %r", theme, DEFAULT_THEME)
            theme = DEFAULT_THEME
        return cls(
            theme=theme,
            bird_image=options.get("bird_image"),
            pipe_image=options.get("pipe_image"),
            background_image=options.get("background_image"),
            font=options.get("font"),
        )


def layout_scale(width: int, height: int, intended: Optional[IntendedSize] = None) -> float:
    """Responsive factor for fonts and paddings; world units never use it."""
    intended_width = intended.width if intended else INTENDED_WIDTH
    intended_height = intended.height if intended else INTENDED_HEIGHT
    return min(width / intended_width, height / intended_height)
