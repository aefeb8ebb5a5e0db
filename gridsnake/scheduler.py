"""
scheduler.py — Tick scheduling.

The engine does not own a clock. The controller feeds frame time into a
Ticker, which calls back once each time a full tick interval has elapsed.
"""

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Ticker:
    """
    Frame-time accumulator that fires a callback at a variable interval.

    At most one tick fires per advance() so ticks never overlap or burst
    after a slow frame. The interval is re-read before every tick, so a
    speed change applies from the next tick on.
    """

    def __init__(self, callback: Callable[[], Any], interval_fn: Callable[[], float]):
        self._callback = callback
        self._interval_fn = interval_fn
        self._elapsed: float = 0.0
        self.running: bool = False

    def start(self) -> None:
        """
        Begin a new tick stream. Time accumulated by a previous stream is
        dropped, so a restart never inherits a half-elapsed tick.
        """
        self._elapsed = 0.0
        self.running = True
        logger.debug("Ticker started")

    def stop(self) -> None:
        """Cancel all pending ticks until the next start()."""
        if self.running:
            logger.debug("Ticker stopped")
        self.running = False
        self._elapsed = 0.0

    def advance(self, dt_ms: float) -> Optional[Any]:
        """Add dt_ms of frame time; fire the callback if a tick is due."""
        if not self.running:
            return None

        self._elapsed += dt_ms
        interval = self._interval_fn()
        if self._elapsed < interval:
            return None

        self._elapsed -= interval
        # A slow frame must not queue up a burst of catch-up ticks.
        if self._elapsed >= interval:
            self._elapsed = 0.0
        return self._callback()
