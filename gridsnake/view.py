"""
view.py — View layer.

Draws one frame from a model Snapshot. Never mutates game state.

  - Pre-rendered grid surface (drawn once, blitted every frame)
  - Snake with a bright head and a fading body
  - Food dot with a pulsing glow
  - HUD panel: score, best, current speed
  - Control strip: direction pad, speed slider, ten speed presets
  - Start and game-over overlays with a clickable button

Public API:
    GameView(screen)          — bind to a pygame surface
    view.render(snapshot)     — draw the current frame (caller flips)
    view.hit_test(pos, state) — which on-screen control is under the mouse
    view.slider_level(x)      — speed level for a slider x position
"""

import math
from typing import Optional

import pygame

from .config import (
    WIDTH, PANEL_H, CONTROLS_Y, CONTROLS_H,
    OFFSET_X, OFFSET_Y, CANVAS,
    BG, GRID_COL, SNAKE_COL, SNAKE_DIM, SNAKE_EDGE,
    FOOD_COL, FOOD_GLOW, UI_COL, ACCENT_COL, PANEL_BG, BORDER_COL,
    SPEED_MIN, SPEED_MAX,
    STATE_MENU, STATE_OVER,
)
from .intents import UP, DOWN, LEFT, RIGHT
from .model import Snapshot

DPAD_CELL   = 32
DPAD_GAP    = 2
PRESET_W    = 24
PRESET_GAP  = 3
SLIDER_X    = 130
SLIDER_W    = WIDTH - SLIDER_X - 20

DPAD_BUTTONS    = {UP: "Up", DOWN: "Down", LEFT: "Left", RIGHT: "Right"}
OVERLAY_BUTTONS = {STATE_MENU: "Start", STATE_OVER: "Restart"}


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a Snapshot."""

    # ── Construction ─────────────────────────────────────────────
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._build_layout()
        self._grid_surf: Optional[pygame.Surface] = None
        self._grid_key: Optional[tuple[int, int]] = None
        self._anim_tick: int = 0

    # ── Main entry ───────────────────────────────────────────────
    def render(self, snap: Snapshot) -> None:
        self._anim_tick += 1

        self.screen.fill(BG)
        self.screen.blit(self._grid_surface(snap), (OFFSET_X, OFFSET_Y))

        if snap.state != STATE_MENU:
            self._draw_snake(snap)
        self._draw_food(snap)

        self._draw_border(snap)
        self._draw_panel(snap)
        self._draw_controls(snap)

        if snap.state == STATE_MENU:
            self._draw_menu_overlay(snap)
        elif snap.state == STATE_OVER:
            self._draw_game_over_overlay(snap)

    # ── Hit testing ──────────────────────────────────────────────
    def hit_test(self, pos: tuple[int, int], state: str) -> Optional[tuple[str, object]]:
        """
        Return the control at ``pos`` as ("button", name), ("speed", level)
        or ("slider", level). Button names are the labels the InputAdapter
        normalises: "Up", "Down", "Left", "Right", "Start", "Restart".
        """
        if state in OVERLAY_BUTTONS and self.overlay_button.collidepoint(pos):
            return ("button", OVERLAY_BUTTONS[state])

        for intent, rect in self.dpad.items():
            if rect.collidepoint(pos):
                return ("button", DPAD_BUTTONS[intent])
        for level, rect in self.presets.items():
            if rect.collidepoint(pos):
                return ("speed", level)
        if self.slider_hitbox.collidepoint(pos):
            return ("slider", self.slider_level(pos[0]))
        return None

    def slider_level(self, x: int) -> int:
        t = (x - self.slider_track.x) / max(1, self.slider_track.w)
        t = max(0.0, min(1.0, t))
        return SPEED_MIN + int(round(t * (SPEED_MAX - SPEED_MIN)))

    # ── Layout ───────────────────────────────────────────────────
    def _build_layout(self) -> None:
        ox, oy = OFFSET_X + 4, CONTROLS_Y + 4
        step = DPAD_CELL + DPAD_GAP
        self.dpad = {
            UP:    pygame.Rect(ox + step,     oy,            DPAD_CELL, DPAD_CELL),
            LEFT:  pygame.Rect(ox,            oy + step,     DPAD_CELL, DPAD_CELL),
            RIGHT: pygame.Rect(ox + 2 * step, oy + step,     DPAD_CELL, DPAD_CELL),
            DOWN:  pygame.Rect(ox + step,     oy + 2 * step, DPAD_CELL, DPAD_CELL),
        }

        self.slider_track = pygame.Rect(SLIDER_X, CONTROLS_Y + 34, SLIDER_W, 6)
        self.slider_hitbox = self.slider_track.inflate(16, 20)

        self.presets = {}
        for i, level in enumerate(range(SPEED_MIN, SPEED_MAX + 1)):
            x = SLIDER_X + i * (PRESET_W + PRESET_GAP)
            self.presets[level] = pygame.Rect(x, CONTROLS_Y + 62, PRESET_W, 26)

        self.overlay_button = pygame.Rect(0, 0, 220, 38)
        self.overlay_button.center = (WIDTH // 2, OFFSET_Y + CANVAS // 2 + 70)

    def _grid_surface(self, snap: Snapshot) -> pygame.Surface:
        # Rebuilt only when the grid geometry changes
        key = (snap.grid_width, snap.tile_size)
        if self._grid_surf is None or self._grid_key != key:
            size = snap.grid_width * snap.tile_size
            surf = pygame.Surface((size, size), pygame.SRCALPHA)
            for i in range(snap.grid_width + 1):
                pos = i * snap.tile_size
                pygame.draw.line(surf, (*GRID_COL, 200), (pos, 0), (pos, size))
                pygame.draw.line(surf, (*GRID_COL, 200), (0, pos), (size, pos))
            self._grid_surf, self._grid_key = surf, key
        return self._grid_surf

    # ── Food ─────────────────────────────────────────────────────
    def _draw_food(self, snap: Snapshot) -> None:
        tile = snap.tile_size
        pulse = 0.80 + 0.20 * math.sin(self._anim_tick * 0.10)
        r = max(2, tile // 2 - 3)
        x = OFFSET_X + snap.food[0] * tile + tile // 2
        y = OFFSET_Y + snap.food[1] * tile + tile // 2

        glow_r = r + 6
        glow = pygame.Surface((glow_r * 2, glow_r * 2), pygame.SRCALPHA)
        for gr in range(glow_r, r, -1):
            a = int(80 * (1 - (gr - r) / (glow_r - r)) * pulse)
            pygame.draw.circle(glow, _with_alpha(FOOD_GLOW, a), (glow_r, glow_r), gr)
        self.screen.blit(glow, (x - glow_r, y - glow_r))

        pygame.draw.circle(self.screen, FOOD_COL, (x, y), r)
        pygame.draw.circle(self.screen, FOOD_GLOW, (x, y), r, 2)

    # ── Snake ────────────────────────────────────────────────────
    def _draw_snake(self, snap: Snapshot) -> None:
        tile = snap.tile_size
        length = len(snap.snake)

        for i, (sx, sy) in enumerate(snap.snake):
            # Colour fades from bright head to dim tail
            t = 1.0 - (i / max(length, 1)) * 0.5
            color = SNAKE_COL if i == 0 else _lerp_color(SNAKE_DIM, SNAKE_COL, t)
            rect = pygame.Rect(
                OFFSET_X + sx * tile + 2,
                OFFSET_Y + sy * tile + 2,
                tile - 4,
                tile - 4,
            )
            radius = max(1, rect.width // 3) if i == 0 else 2
            pygame.draw.rect(self.screen, color, rect, border_radius=radius)
            pygame.draw.rect(self.screen, SNAKE_EDGE, rect, 1, border_radius=radius)

        if snap.snake and snap.direction:
            self._draw_eyes(snap)

    def _draw_eyes(self, snap: Snapshot) -> None:
        tile = snap.tile_size
        hx, hy = snap.head
        cx = OFFSET_X + hx * tile + tile // 2
        cy = OFFSET_Y + hy * tile + tile // 2
        dx, dy = snap.direction.x, snap.direction.y
        px, py = -dy, dx  # perpendicular

        for sign in (+1, -1):
            ex = int(cx + dx * 4 + sign * px * 4)
            ey = int(cy + dy * 4 + sign * py * 4)
            pygame.draw.circle(self.screen, (230, 240, 230), (ex, ey), 2)

    # ── Border ───────────────────────────────────────────────────
    def _draw_border(self, snap: Snapshot) -> None:
        size = snap.grid_width * snap.tile_size
        pygame.draw.rect(self.screen, BORDER_COL,
                         (OFFSET_X - 1, OFFSET_Y - 1, size + 2, size + 2), 1)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, snap: Snapshot) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL,
                         (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)

        self.screen.blit(self.font_small.render("SCORE", True, UI_COL), (16, 6))
        self.screen.blit(self.font_big.render(str(snap.score), True, SNAKE_COL), (16, 24))

        best = self.font_big.render(str(snap.high_score), True, ACCENT_COL)
        label = self.font_small.render("BEST", True, UI_COL)
        self.screen.blit(label, label.get_rect(topright=(WIDTH - 16, 6)))
        self.screen.blit(best, best.get_rect(topright=(WIDTH - 16, 24)))

        speed = self.font_small.render(f"SPEED {snap.speed_level}", True, UI_COL)
        self.screen.blit(speed, speed.get_rect(center=(WIDTH // 2, 16)))
        ms = self.font_tiny.render(f"{snap.tick_interval_ms} ms / tick", True,
                                   _lerp_color(UI_COL, BG, 0.3))
        self.screen.blit(ms, ms.get_rect(center=(WIDTH // 2, 38)))

    # ── Control strip ────────────────────────────────────────────
    def _draw_controls(self, snap: Snapshot) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, CONTROLS_Y - 4, WIDTH, CONTROLS_H + 4))

        arrows = {UP: "^", DOWN: "v", LEFT: "<", RIGHT: ">"}
        for intent, rect in self.dpad.items():
            pygame.draw.rect(self.screen, (40, 48, 64), rect, border_radius=4)
            pygame.draw.rect(self.screen, BORDER_COL, rect, 1, border_radius=4)
            txt = self.font_med.render(arrows[intent], True, UI_COL)
            self.screen.blit(txt, txt.get_rect(center=rect.center))

        label = self.font_small.render(f"SPEED  {snap.speed_level}", True, UI_COL)
        self.screen.blit(label, (SLIDER_X, CONTROLS_Y + 8))

        # Slider track, filled part and knob
        track = self.slider_track
        pygame.draw.rect(self.screen, (40, 48, 64), track, border_radius=3)
        t = (snap.speed_level - SPEED_MIN) / (SPEED_MAX - SPEED_MIN)
        fill = pygame.Rect(track.x, track.y, int(track.w * t), track.h)
        pygame.draw.rect(self.screen, SNAKE_COL, fill, border_radius=3)
        pygame.draw.circle(self.screen, _brighten(SNAKE_COL, 1.3),
                           (track.x + int(track.w * t), track.centery), 8)

        for level, rect in self.presets.items():
            active = level == snap.speed_level
            bg = SNAKE_COL if active else (40, 48, 64)
            pygame.draw.rect(self.screen, bg, rect, border_radius=3)
            pygame.draw.rect(self.screen, BORDER_COL, rect, 1, border_radius=3)
            txt = self.font_tiny.render(str(level), True, PANEL_BG if active else UI_COL)
            self.screen.blit(txt, txt.get_rect(center=rect.center))

    # ── Overlays ─────────────────────────────────────────────────
    def _draw_overlay_base(self, snap: Snapshot) -> None:
        size = snap.grid_width * snap.tile_size
        surf = pygame.Surface((size, size), pygame.SRCALPHA)
        surf.fill((10, 12, 20, 200))
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))

    def _draw_title(self, title: str, color: tuple, cy: int) -> int:
        pulse = 0.85 + 0.15 * math.sin(self._anim_tick * 0.05)
        surf = self.font_title.render(title, True, _brighten(color, pulse))
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 8

    def _draw_text_line(self, text: str, color: tuple, cy: int,
                        font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 8

    def _draw_button(self, label: str, color: tuple) -> None:
        rect = self.overlay_button
        bg = pygame.Surface(rect.size, pygame.SRCALPHA)
        bg.fill(_with_alpha(color, 30))
        self.screen.blit(bg, rect.topleft)
        pygame.draw.rect(self.screen, color, rect, 2, border_radius=4)
        txt = self.font_small.render(label, True, color)
        self.screen.blit(txt, txt.get_rect(center=rect.center))

    def _draw_menu_overlay(self, snap: Snapshot) -> None:
        self._draw_overlay_base(snap)
        cy = OFFSET_Y + CANVAS // 2 - 80
        cy = self._draw_title("SNAKE", SNAKE_COL, cy)
        cy = self._draw_text_line("ARROWS / WASD TO STEER", UI_COL, cy + 10, self.font_tiny)
        self._draw_text_line("1-0 OR SLIDER TO SET SPEED", UI_COL, cy, self.font_tiny)
        self._draw_button("ENTER - START GAME", SNAKE_COL)

    def _draw_game_over_overlay(self, snap: Snapshot) -> None:
        self._draw_overlay_base(snap)
        cy = OFFSET_Y + CANVAS // 2 - 90
        cy = self._draw_title("GAME OVER", FOOD_COL, cy)
        cy = self._draw_text_line(f"FINAL SCORE  {snap.score}", UI_COL, cy + 6, self.font_med)
        if snap.score > 0 and snap.score >= snap.high_score:
            self._draw_text_line("NEW HIGH SCORE", ACCENT_COL, cy, self.font_small)
        else:
            self._draw_text_line(f"BEST: {snap.high_score}", UI_COL, cy, self.font_tiny)
        self._draw_button("R / ENTER - PLAY AGAIN", FOOD_COL)

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        specs = [
            ("font_title", "courier", 40, True),
            ("font_big",   "courier", 24, True),
            ("font_med",   "courier", 17, False),
            ("font_small", "courier", 13, True),
            ("font_tiny",  "courier", 11, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except Exception:
                setattr(self, attr, pygame.font.SysFont(None, size))
