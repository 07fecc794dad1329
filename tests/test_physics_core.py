import math

from flappy_widget.constants import FLAP_ROTATION, LIFT, MAX_ROTATION
from flappy_widget.data_models import Bird, Pipe
from flappy_widget.physics_core import PhysicsCore


def test_ten_ticks_of_free_fall_match_closed_form() -> None:
    core = PhysicsCore()
    bird = Bird(y=120)

    for _ in range(10):
        core.advance(bird)

    # 120 + sum(0.25 * i for i in 1..10)
    assert bird.y == 133.75
    assert bird.dy == 2.5


def test_flap_overrides_velocity_instead_of_adding() -> None:
    core = PhysicsCore()
    bird = Bird(y=120, dy=7.3, rotation=1.0)

    core.flap(bird)

    assert bird.dy == LIFT == -4.0
    assert bird.rotation == FLAP_ROTATION


def test_rotation_is_clamped_nose_down() -> None:
    core = PhysicsCore(gravity=0.0)
    bird = Bird(y=120)

    for _ in range(100):
        core.advance(bird)

    assert bird.rotation == MAX_ROTATION
    assert math.isclose(bird.rotation, math.pi / 2)


def test_boundary_collision_top_and_bottom() -> None:
    core = PhysicsCore()

    assert core.check_collision(Bird(y=-1), [], 240)
    assert core.check_collision(Bird(y=240 + 1 - 36), [], 240)
    assert not core.check_collision(Bird(y=0), [], 240)
    assert not core.check_collision(Bird(y=240 - 36), [], 240)


def test_pipe_collision_needs_horizontal_overlap() -> None:
    core = PhysicsCore()
    bird = Bird(y=100)  # x 50..98, y 100..136

    # Gap 60..180 contains the bird
    assert not core.check_collision(bird, [Pipe(x=40, gap_y=60)], 240)
    # Gap starts below the bird's top
    assert core.check_collision(bird, [Pipe(x=40, gap_y=110)], 240)
    # Gap ends above the bird's bottom
    assert core.check_collision(bird, [Pipe(x=40, gap_y=0)], 240)
    # Same bad gap, but the pipe only touches the bird's right edge
    assert not core.check_collision(bird, [Pipe(x=98, gap_y=110)], 240)
    # ...or has already passed its left edge
    assert not core.check_collision(bird, [Pipe(x=50 - 80, gap_y=110)], 240)
