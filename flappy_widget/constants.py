"""
constants.py: Centralized configuration for the game world and widget layout.
"""

import math

# -------- Widget Layout Config --------
INTENDED_WIDTH = 240            # Design-intent size the layout was authored for
INTENDED_HEIGHT = 240
BACKGROUND_BLEED = 2            # Extra pixels so the background never shows a seam

THEMES = ("dark", "light")
DEFAULT_THEME = "light"
THEME_FILL = {
    "dark": (17, 17, 17),       # #111
    "light": (135, 206, 235),   # #87CEEB
}

# -------- Text & Overlay Config (scaled by the responsive factor) --------
TEXT_COLOR = (255, 255, 255)
PROMPT_COLOR = (34, 34, 34)         # #222
PROMPT_BACKGROUND = (255, 235, 59)  # #ffeb3b

SCORE_FONT_SIZE = 22
SCORE_FONT_MIN = 20
SCORE_TOP = 8

PLAY_FONT_SIZE = 36
PLAY_FONT_MIN = 28
PLAY_PADDING = (16, 8)

GAME_OVER_FONT_SIZE = 48
GAME_OVER_FONT_MIN = 36
GAME_OVER_MARGIN = 16

REPLAY_FONT_SIZE = 30
REPLAY_FONT_MIN = 22
REPLAY_PADDING = (14, 6)

# -------- Scheduler Config --------
REFRESH_RATE = 60               # Host display refreshes per second (best effort)

# -------- Bird Config (world units, never scaled) --------
BIRD_X = 50                     # Fixed bird X position
BIRD_WIDTH = 48
BIRD_HEIGHT = 36

# -------- Pipe Config --------
PIPE_WIDTH = 80
PIPE_GAP = 120
PIPE_SPEED = 2                  # Horizontal speed (pixels/tick)
PIPE_SPAWN_INTERVAL = 100       # Spawn every 100 ticks, starting at tick 0
PIPE_MARGIN = 20                # Minimum distance between the gap and the edges

# -------- Physics Config (Pixels / Tick / Tick) --------
GRAVITY = 0.25                  # Added to the vertical velocity every tick
LIFT = -4.0                     # Velocity after a flap (overrides, not additive)
MAX_ROTATION = math.pi / 2      # +90 degrees, nose down
FLAP_ROTATION = -math.pi / 6    # -30 degrees, nose up
ROTATION_SPEED = 0.04           # How fast the bird tips forward (radians/tick)
