"""
config.py — Shared constants for the entire application.
No game logic, no imports from internal modules.
"""

import os

# ── Window & Grid ─────────────────────────────────────────────────
TILE            = 20
CANVAS          = 400
GRID_TILES      = CANVAS // TILE
PANEL_H         = 60
CONTROLS_H      = 110
OFFSET_X        = 10
OFFSET_Y        = PANEL_H + 10
CONTROLS_Y      = OFFSET_Y + CANVAS + 10
WIDTH           = CANVAS + 2 * OFFSET_X
HEIGHT          = CONTROLS_Y + CONTROLS_H
FPS             = 60

# ── Colors ────────────────────────────────────────────────────────
BG          = (26,  32,  44)
GRID_COL    = (45,  55,  72)
SNAKE_COL   = (72,  187, 120)
SNAKE_DIM   = (36,  94,  60)
SNAKE_EDGE  = (47,  133, 90)
FOOD_COL    = (245, 101, 101)
FOOD_GLOW   = (252, 129, 129)
UI_COL      = (160, 174, 192)
ACCENT_COL  = (237, 200, 80)
BLACK       = (0,   0,   0)
PANEL_BG    = (20,  24,  34)
BORDER_COL  = (74,  85,  104)

# ── Gameplay ──────────────────────────────────────────────────────
FOOD_REWARD       = 10
MAX_FOOD_ATTEMPTS = 4 * GRID_TILES * GRID_TILES   # draws before scanning

# ── Speed ─────────────────────────────────────────────────────────
SPEED_MIN            = 1
SPEED_MAX            = 10
DEFAULT_SPEED_LEVEL  = 5
FALLBACK_INTERVAL_MS = 130
SPEED_INTERVALS_MS = {
    1: 250,
    2: 220,
    3: 190,
    4: 160,
    5: 130,
    6: 110,
    7: 90,
    8: 70,
    9: 50,
    10: 30,
}

# ── Game States ───────────────────────────────────────────────────
STATE_MENU    = "menu"
STATE_PLAYING = "playing"
STATE_OVER    = "over"

# ── Step results ──────────────────────────────────────────────────
STEP_IDLE           = "idle"
STEP_MOVED          = "moved"
STEP_ATE_FOOD       = "ate-food"
STEP_COLLISION_WALL = "collision-wall"
STEP_COLLISION_SELF = "collision-self"
COLLISIONS = (STEP_COLLISION_WALL, STEP_COLLISION_SELF)

# ── Environment ───────────────────────────────────────────────────
HIGH_SCORE_PATH = os.environ.get(
    "GRIDSNAKE_HIGHSCORE",
    os.path.join(os.path.expanduser("~"), ".gridsnake_highscore.json"),
)
LOG_LEVEL = os.environ.get("GRIDSNAKE_LOG_LEVEL", "INFO")
