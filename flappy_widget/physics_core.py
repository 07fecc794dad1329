"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Iterable

from .constants import (
    FLAP_ROTATION, GRAVITY, LIFT, MAX_ROTATION, PIPE_GAP, PIPE_WIDTH,
    ROTATION_SPEED
)
from .data_models import Bird, Pipe


class PhysicsCore:
    """
    Fixed-step physics shared by the game engine and the tests.
    All quantities are per tick; there is no variable timestep.
    """

    def __init__(self, gravity: float = GRAVITY, lift: float = LIFT,
                 pipe_width: int = PIPE_WIDTH, pipe_gap: int = PIPE_GAP):
        self.gravity = gravity
        self.lift = lift
        self.pipe_width = pipe_width
        self.pipe_gap = pipe_gap

    def advance(self, bird: Bird):
        """
        Semi-implicit Euler step: velocity first, then position.
        The bird also tips forward until it points straight down.
        """
        bird.dy += self.gravity
        bird.y += bird.dy

        bird.rotation += ROTATION_SPEED
        if bird.rotation > MAX_ROTATION:
            bird.rotation = MAX_ROTATION

    def flap(self, bird: Bird):
        """Overrides the velocity with the lift constant and points the nose up."""
        bird.dy = self.lift
        bird.rotation = FLAP_ROTATION

    def hits_pipe(self, bird: Bird, pipe: Pipe) -> bool:
        overlaps_x = bird.x + bird.width > pipe.x and bird.x < pipe.x + self.pipe_width
        if not overlaps_x:
            return False
        return bird.y < pipe.gap_y or bird.bottom > pipe.gap_y + self.pipe_gap

    def out_of_bounds(self, bird: Bird, surface_height: float) -> bool:
        return bird.y < 0 or bird.bottom > surface_height

    def check_collision(self, bird: Bird, pipes: Iterable[Pipe], surface_height: float) -> bool:
        """Checks for collisions with the top/bottom edges or any pipe."""

        # 1. Boundary collision
        if self.out_of_bounds(bird, surface_height):
            return True

        # 2. Pipe collision
        for pipe in pipes:
            if self.hits_pipe(bird, pipe):
                return True

        return False
