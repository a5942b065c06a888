from __future__ import annotations

"""Game configuration constants for Space Dodger."""

# Playfield
FIELD_WIDTH = 800
FIELD_HEIGHT = 600
FPS = 60

# Display (window is the playfield scaled by this factor)
DISPLAY_SCALE = 1.0

# Player
PLAYER_SIZE = 40
PLAYER_SPEED = 5.0  # px/frame
PLAYER_BOTTOM_INSET = 20  # px between the ship and the bottom edge at start
POINTER_EASING = 0.1  # fraction of the remaining distance covered per frame

# Meteors
METEOR_SIZE = 30
METEOR_SIZE_JITTER = 20  # px added per axis, uniform in [0, jitter)
INITIAL_METEOR_SPEED = 2.0  # px/frame
METEOR_SPEED_STEP = 0.5  # px/frame added per difficulty tier
METEOR_SPEED_JITTER = 1.0  # px/frame, drawn fresh per spawn
METEOR_SPAWN_RATE = 0.02  # spawn probability per frame at tier 1
SPAWN_RATE_STEP = 0.005  # spawn probability added per difficulty tier

# Scoring
SCORE_PER_CLEAR = 10
SCORE_PER_TIER = 500

# Background stars
STAR_COUNT = 100
STAR_MIN_SIZE = 1.0
STAR_SIZE_RANGE = 2.0
STAR_MIN_SPEED = 0.5
STAR_SPEED_RANGE = 2.0
STAR_MIN_OPACITY = 0.2
STAR_OPACITY_RANGE = 0.8

# Palette
COL_BG_TOP = (0, 0, 17)
COL_BG_BOTTOM = (0, 0, 51)
STAR_COLOR = (255, 255, 255)
SHIP_COLOR = (0, 255, 136)
SHIP_DETAIL = (255, 255, 255)
METEOR_COLOR = (255, 68, 68)
METEOR_GLOW = (255, 68, 68, 70)
GLOW_RADIUS = 10
OVERLAY_COLOR = (0, 0, 0, 204)
TEXT_COLOR = (255, 255, 255)
TEXT_DIM = (209, 213, 219)
ACCENT_SCORE = (34, 211, 238)
ACCENT_RECORD = (250, 204, 21)
ACCENT_LEVEL = (192, 132, 252)
ACCENT_GAME_OVER = (248, 113, 113)
