"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard and mouse events into intents and speed levels.
  - Drive the tick scheduler: one engine step per tick interval.
  - Stop the scheduler on game over and restart it on a new run, so only
    one tick stream is ever live.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that reads pygame events.
"""

import logging
import sys
from typing import Optional

import pygame

from .config import (
    WIDTH, HEIGHT, FPS, HIGH_SCORE_PATH,
    STATE_MENU, STATE_PLAYING, STATE_OVER, COLLISIONS,
)
from .intents import (
    DIRECTION_INTENTS, START, RESTART,
    intent_for_button, intent_for_key, speed_for_key,
)
from .model import GameEngine
from .scheduler import Ticker
from .score_store import JsonScoreStore
from .view import GameView

logger = logging.getLogger(__name__)


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, engine: Optional[GameEngine] = None, score_store=None):
        """
        Pass either a ready engine or a score store for a new one, not both:
        an existing engine already loaded its high score from its own store.
        """
        if engine is not None and score_store is not None:
            raise ValueError("pass either engine or score_store, not both")

        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("SNAKE")
        self.clock = pygame.time.Clock()

        if engine is None:
            store = score_store if score_store is not None else JsonScoreStore(HIGH_SCORE_PATH)
            engine = GameEngine(score_store=store)
        self.engine = engine
        self.engine.add_high_score_listener(self._on_high_score)

        self.view = GameView(self.screen)
        self.ticker = Ticker(self._on_tick, lambda: self.engine.tick_interval_ms)
        self._dragging_slider = False

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        logger.info("Starting game; high score %d", self.engine.high_score)
        while True:
            dt = self.clock.tick(FPS)
            self._handle_events()
            self.ticker.advance(dt)
            self.view.render(self.engine.snapshot())
            pygame.display.flip()

    # ── Engine callbacks ──────────────────────────────────────────
    def _on_tick(self) -> str:
        status = self.engine.step()
        if status in COLLISIONS:
            self.ticker.stop()
        return status

    @staticmethod
    def _on_high_score(value: int) -> None:
        logger.info("New high score: %d", value)

    # ── Lifecycle ─────────────────────────────────────────────────
    def _start_run(self) -> None:
        self.engine.reset()
        self.ticker.start()

    def _apply_intent(self, intent: str) -> None:
        state = self.engine.state
        if intent in DIRECTION_INTENTS:
            self.engine.set_direction(intent)
        elif intent == START and state in (STATE_MENU, STATE_OVER):
            self._start_run()
        elif intent == RESTART and state in (STATE_PLAYING, STATE_OVER):
            self._start_run()

    def _set_speed(self, level) -> None:
        applied = self.engine.set_speed_level(level)
        logger.debug("Speed level %d (%d ms/tick)", applied, self.engine.tick_interval_ms)

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event.pos)
            elif event.type == pygame.MOUSEMOTION and self._dragging_slider:
                self._set_speed(self.view.slider_level(event.pos[0]))
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._dragging_slider = False

    def _handle_keydown(self, key: int) -> None:
        if key in (pygame.K_q, pygame.K_ESCAPE):
            self._quit()

        intent = intent_for_key(key)
        if intent is not None:
            self._apply_intent(intent)
            return

        level = speed_for_key(key, self.engine.speed_level)
        if level is not None:
            self._set_speed(level)

    def _handle_click(self, pos: tuple[int, int]) -> None:
        hit = self.view.hit_test(pos, self.engine.state)
        if hit is None:
            return
        kind, value = hit
        if kind == "button":
            intent = intent_for_button(value)
            if intent is not None:
                self._apply_intent(intent)
        elif kind == "speed":
            self._set_speed(value)
        elif kind == "slider":
            self._dragging_slider = True
            self._set_speed(value)

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        pygame.quit()
        sys.exit()
