"""
Game configuration.

Rule constants are fixed. Presentation and storage settings can be
overridden from the environment or a local ``.env`` file.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ----------------------------- Rules -------------------------------------- #
GRID_SIZE = 20                                # 20x20 cells
INITIAL_SNAKE = ((10, 10), (10, 11), (10, 12))  # head first
SCORE_PER_FOOD = 10

BASE_SPEED_MS = 150                           # tick period at score 0
MIN_SPEED_MS = 70                             # fastest allowed period
SPEED_STEP_MS = 10                            # faster by this much...
SPEEDUP_EVERY = 50                            # ...every N points

# ----------------------------- Storage ------------------------------------ #
HIGHSCORE_KEY = "snake-highscore"
HIGHSCORE_PATH = Path(
    os.getenv("SNAKE_HIGHSCORE_PATH", "~/.snake_pro/highscore.json")
).expanduser()

# ----------------------------- Display ------------------------------------ #
TILE_SIZE = int(os.getenv("SNAKE_TILE_SIZE", "20"))
HUD_H = 56
FOOTER_H = 28
BOARD_PX = GRID_SIZE * TILE_SIZE
WINDOW_W, WINDOW_H = BOARD_PX, HUD_H + BOARD_PX + FOOTER_H
RENDER_FPS = 60

# Colors (R, G, B)
BG       = (15, 23, 42)
BOARD    = (30, 41, 59)
GRID     = (51, 65, 85)
SNAKE    = (5, 150, 105)
HEAD     = (52, 211, 153)
FOOD     = (244, 63, 94)
TEXT     = (240, 240, 240)
TEXT_DIM = (148, 163, 184)
TITLE    = (52, 211, 153)
BEST     = (251, 191, 36)
CRASH    = (244, 63, 94)
UI_DIM   = (15, 23, 42, 200)               # translucent overlay

LOG_LEVEL = os.getenv("SNAKE_LOG_LEVEL", "WARNING").upper()
