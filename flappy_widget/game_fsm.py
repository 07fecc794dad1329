"""
game_fsm.py: The Idle -> Playing -> GameOver lifecycle.
"""

from statemachine import State, StateMachine

from .data_models import GameSession, Phase
from .physics_core import PhysicsCore


class GameFSM(StateMachine):
    """FSM wrapper around a GameSession.

    - `begin`: Idle -> Playing, the bird stays at rest until the next tick.
    - `flap`: Playing -> Playing, velocity/rotation override.
    - `crash`: Playing -> GameOver, only ever sent by the engine's update.
    - `replay`: GameOver -> Playing, full session reset first.

    Anything else raises `TransitionNotAllowed`.
    """

    idle = State("Idle", value=Phase.IDLE.value, initial=True)
    playing = State("Playing", value=Phase.PLAYING.value)
    game_over = State("GameOver", value=Phase.GAME_OVER.value)

    begin = idle.to(playing)
    flap = playing.to(playing)
    crash = playing.to(game_over)
    replay = game_over.to(playing)

    def __init__(self, session: GameSession, physics: PhysicsCore):
        self.session = session
        self.physics = physics
        super().__init__()

    @property
    def phase(self) -> Phase:
        return Phase(str(self.current_state.value))

    def on_flap(self) -> None:
        self.physics.flap(self.session.bird)

    def on_replay(self) -> None:
        self.session.reset()
