import pytest

from flappy_widget.constants import PROMPT_BACKGROUND
from flappy_widget.data_models import Phase
from flappy_widget.overlay import overlay_for, score_label, score_top


def test_idle_shows_the_play_prompt() -> None:
    overlay = overlay_for(Phase.IDLE, 1.0)

    assert overlay.visible
    assert overlay.accepts_input
    assert [line.text for line in overlay.lines] == ["CLICK TO PLAY"]
    assert overlay.lines[0].background == PROMPT_BACKGROUND


def test_playing_has_no_overlay() -> None:
    overlay = overlay_for(Phase.PLAYING, 1.0)

    assert not overlay.visible
    assert not overlay.accepts_input


def test_game_over_shows_message_and_replay_prompt() -> None:
    overlay = overlay_for(Phase.GAME_OVER, 1.0)

    assert [line.text for line in overlay.lines] == ["GAME OVER", "CLICK TO REPLAY"]
    assert overlay.lines[0].background is None
    assert overlay.lines[0].margin_bottom == 16
    assert overlay.lines[1].background == PROMPT_BACKGROUND
    assert overlay.accepts_input


@pytest.mark.parametrize(
    "scale, sizes",
    [
        (1.0, (36, 48, 30)),
        (2.0, (72, 96, 60)),
        (0.5, (28, 36, 22)),  # floors keep small widgets legible
    ],
)
def test_font_sizes_follow_the_layout_scale(scale: float, sizes: tuple) -> None:
    play = overlay_for(Phase.IDLE, scale).lines[0].font_size
    game_over, replay = (line.font_size for line in overlay_for(Phase.GAME_OVER, scale).lines)

    assert (play, game_over, replay) == sizes


def test_paddings_scale_too() -> None:
    assert overlay_for(Phase.IDLE, 1.0).lines[0].padding == (16, 8)
    assert overlay_for(Phase.IDLE, 2.0).lines[0].padding == (32, 16)


def test_score_label() -> None:
    label = score_label(7, 1.0)

    assert label.text == "SCORE 7"
    assert label.font_size == 22
    assert score_label(7, 0.25).font_size == 20
    assert score_top(2.0) == 16
