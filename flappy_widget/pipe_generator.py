"""
pipe_generator.py: Procedural pipe spawning, scrolling and recycling.
"""

import random
from typing import List, Optional

from .constants import (
    PIPE_GAP, PIPE_MARGIN, PIPE_SPAWN_INTERVAL, PIPE_SPEED, PIPE_WIDTH
)
from .data_models import Pipe


class PipeGenerator:
    """
    Owns the spawn cadence and scroll policy of the pipe sequence.
    The sequence itself lives on the GameSession; the generator only
    mutates the list it is handed.
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 interval: int = PIPE_SPAWN_INTERVAL, speed: float = PIPE_SPEED,
                 width: int = PIPE_WIDTH, gap: int = PIPE_GAP, margin: int = PIPE_MARGIN):
        self.rng = rng or random.Random()
        self.interval = interval
        self.speed = speed
        self.width = width
        self.gap = gap
        self.margin = margin

    def gap_top(self, surface_height: float) -> float:
        """Picks the top of a new gap so it stays `margin` away from both edges."""
        span = surface_height - self.gap - 2 * self.margin
        if span < 0:
            # Too short for the margins: centre the gap, never above the top edge
            return max(0.0, (surface_height - self.gap) / 2)
        return self.margin + self.rng.random() * span

    def should_spawn(self, frame: int) -> bool:
        return frame % self.interval == 0

    def spawn(self, pipes: List[Pipe], surface_width: float, surface_height: float) -> Pipe:
        """
        Generates a new pipe at the right edge of the surface, or behind the
        newest pipe if the surface shrank since it spawned.
        """
        x = float(surface_width)
        if pipes:
            x = max(x, pipes[-1].x)
        pipe = Pipe(x=x, gap_y=self.gap_top(surface_height))
        pipes.append(pipe)
        return pipe

    def scroll(self, pipes: List[Pipe]):
        for pipe in pipes:
            pipe.x -= self.speed

    def retire(self, pipes: List[Pipe]) -> int:
        """
        Drops the oldest pipe once its trailing edge has left the surface.
        Returns the number of pipes removed (0 or 1), which is the score gained.
        """
        if pipes and pipes[0].x + self.width < 0:
            pipes.pop(0)
            return 1
        return 0

    def step(self, pipes: List[Pipe], frame: int, surface_width: float,
             surface_height: float) -> int:
        """Spawn, scroll and retire for one tick. Returns the score gained."""
        if self.should_spawn(frame):
            self.spawn(pipes, surface_width, surface_height)
        self.scroll(pipes)
        return self.retire(pipes)
