"""
intents.py — Input normalisation.

Keyboard keys and on-screen buttons both collapse to the same small set of
intent strings before anything reaches the engine.
"""

from typing import Optional

import pygame

from .config import SPEED_MIN, SPEED_MAX

# ── Intents ───────────────────────────────────────────────────────
UP      = "up"
DOWN    = "down"
LEFT    = "left"
RIGHT   = "right"
START   = "start"
RESTART = "restart"

DIRECTION_INTENTS = (UP, DOWN, LEFT, RIGHT)
LIFECYCLE_INTENTS = (START, RESTART)

# ── Keyboard ──────────────────────────────────────────────────────
KEY_INTENTS = {
    pygame.K_UP:    UP,
    pygame.K_DOWN:  DOWN,
    pygame.K_LEFT:  LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w:     UP,
    pygame.K_s:     DOWN,
    pygame.K_a:     LEFT,
    pygame.K_d:     RIGHT,
    pygame.K_RETURN:   START,
    pygame.K_KP_ENTER: START,
    pygame.K_SPACE:    START,
    pygame.K_r:        RESTART,
}

SPEED_KEYS = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
    pygame.K_5: 5,
    pygame.K_6: 6,
    pygame.K_7: 7,
    pygame.K_8: 8,
    pygame.K_9: 9,
    pygame.K_0: 10,
}

SPEED_NUDGE_KEYS = {
    pygame.K_PLUS:      1,
    pygame.K_EQUALS:    1,
    pygame.K_KP_PLUS:   1,
    pygame.K_MINUS:    -1,
    pygame.K_KP_MINUS: -1,
}


def intent_for_key(key: int) -> Optional[str]:
    return KEY_INTENTS.get(key)


def speed_for_key(key: int, current: int) -> Optional[int]:
    """Speed level selected by a number key or +/- nudge, else None."""
    if key in SPEED_KEYS:
        return SPEED_KEYS[key]
    if key in SPEED_NUDGE_KEYS:
        return max(SPEED_MIN, min(SPEED_MAX, current + SPEED_NUDGE_KEYS[key]))
    return None


def intent_for_button(name: str) -> Optional[str]:
    """Map an on-screen button name to an intent ("Up" -> "up")."""
    name = name.strip().lower()
    if name in DIRECTION_INTENTS or name in LIFECYCLE_INTENTS:
        return name
    return None
