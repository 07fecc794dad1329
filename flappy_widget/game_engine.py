"""
game_engine.py: The per-widget world simulation.
"""

import logging
import math
import random
from typing import Optional

from .data_models import GameSession, Phase
from .errors import InvariantViolation
from .game_fsm import GameFSM
from .physics_core import PhysicsCore
from .pipe_generator import PipeGenerator

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Owns one game session and routes the primary input through the FSM.

    `strict` decides what happens when an invariant breaks: raise
    InvariantViolation (the default under a normal interpreter) or clamp to
    the nearest valid state and keep going (under `python -O`).
    """

    def __init__(self, width: int, height: int,
                 physics: Optional[PhysicsCore] = None,
                 generator: Optional[PipeGenerator] = None,
                 rng: Optional[random.Random] = None,
                 strict: bool = __debug__):
        self.session = GameSession(width=width, height=height)
        self.physics = physics or PhysicsCore()
        self.generator = generator or PipeGenerator(rng=rng)
        self.fsm = GameFSM(self.session, self.physics)
        self.strict = strict

    @property
    def phase(self) -> Phase:
        return self.fsm.phase

    def resize(self, width: int, height: int):
        """
        Follows the drawing surface. A game in progress keeps its coordinates;
        an idle bird is re-centred on the new height.
        """
        self.session.width = width
        self.session.height = height
        if self.phase is Phase.IDLE:
            self.session.reset()

    def press(self) -> Phase:
        """
        Applies one primary input. Each call makes exactly one transition.
        Returns the phase after the input.
        """
        phase = self.phase
        if phase is Phase.IDLE:
            self.fsm.begin()
        elif phase is Phase.PLAYING:
            self.fsm.flap()
        else:
            self.fsm.replay()
            logger.debug("Replay started")
        return self.phase

    def update(self):
        """One simulation tick. Does nothing unless the game is being played."""
        if self.phase is not Phase.PLAYING:
            return

        session = self.session

        # 1. Bird physics
        self.physics.advance(session.bird)

        # 2. Spawn, scroll and retire pipes
        session.score += self.generator.step(
            session.pipes, session.frame, session.width, session.height)

        # 3. Collisions
        if self.physics.check_collision(session.bird, session.pipes, session.height):
            self.fsm.crash()
            logger.debug("Game over at frame %d with score %d", session.frame, session.score)

        session.frame += 1
        self._check_invariants()

    def _check_invariants(self):
        session = self.session
        bird = session.bird

        if session.score < 0:
            self._violation("negative score %d" % session.score)
            session.score = 0

        xs = [pipe.x for pipe in session.pipes]
        if xs != sorted(xs):
            self._violation("pipes out of order: %r" % xs)
            session.pipes.sort(key=lambda pipe: pipe.x)

        if not (math.isfinite(bird.y) and math.isfinite(bird.dy)):
            self._violation("non-finite bird state y=%r dy=%r" % (bird.y, bird.dy))
            bird.y = session.height / 2
            bird.dy = 0.0

    def _violation(self, message: str):
        if self.strict:
            raise InvariantViolation(message)
        logger.warning("Invariant violation, clamping: %s", message)
