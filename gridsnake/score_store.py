"""
score_store.py — High-score persistence.

A store only has to answer load() -> int and accept save(int). The engine
calls load() once when it is built and save() whenever the high score rises.
"""

import json
import logging
import os

logger = logging.getLogger(__name__)


class MemoryScoreStore:
    """Keeps the high score in memory; for tests and throwaway sessions."""

    def __init__(self, initial: int = 0):
        self.value = initial
        self.saves: list[int] = []

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
        self.saves.append(value)


class JsonScoreStore:
    """Stores ``{"high_score": n}`` in a small JSON file."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> int:
        if not os.path.isfile(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            value = int(data.get("high_score", 0))
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("Could not read high score from '%s': %s", self.path, exc)
            return 0
        return max(0, value)

    def save(self, value: int) -> None:
        directory = os.path.dirname(self.path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({"high_score": int(value)}, f)
        except OSError as exc:
            logger.warning("Could not save high score to '%s': %s", self.path, exc)
