"""
main.py — Entry point.

Run with:
    python main.py

Requires:
    pip install pygame

Environment:
    GRIDSNAKE_HIGHSCORE   path of the high-score JSON file
    GRIDSNAKE_LOG_LEVEL   logging level name (default INFO)
"""

import logging

from gridsnake.config import LOG_LEVEL
from gridsnake.controller import GameController


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    GameController().run()


if __name__ == "__main__":
    main()
