"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller (or a test harness) to drive.

Classes:
    Direction          — immutable (dx, dy) value object
    Snapshot           — read-only view of the engine handed to renderers
    GameEngine         — snake, heading, food, score, speed; advanced by step()
    FoodPlacementError — raised when there is no free cell left for food
"""

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Callable, Optional

from .config import (
    GRID_TILES, TILE, FOOD_REWARD, MAX_FOOD_ATTEMPTS,
    DEFAULT_SPEED_LEVEL,
    SPEED_INTERVALS_MS, FALLBACK_INTERVAL_MS,
    STATE_MENU, STATE_PLAYING, STATE_OVER,
    STEP_IDLE, STEP_MOVED, STEP_ATE_FOOD,
    STEP_COLLISION_WALL, STEP_COLLISION_SELF,
)

logger = logging.getLogger(__name__)

Cell = tuple[int, int]


class FoodPlacementError(RuntimeError):
    """The grid has no free cell left to put food on."""


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    UP    = None  # filled below after class definition
    DOWN  = None
    LEFT  = None
    RIGHT = None
    NONE  = None

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def __bool__(self) -> bool:
        return self.x != 0 or self.y != 0

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)
Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.NONE  = Direction( 0,  0)

INTENT_DIRECTIONS = {
    "up":    Direction.UP,
    "down":  Direction.DOWN,
    "left":  Direction.LEFT,
    "right": Direction.RIGHT,
}


def interval_for_level(level) -> int:
    """Tick interval in milliseconds for a speed level (130 ms if unknown)."""
    return SPEED_INTERVALS_MS.get(level, FALLBACK_INTERVAL_MS)


# ─────────────────────────── Snapshot ────────────────────────────
@dataclass(frozen=True)
class Snapshot:
    snake: tuple[Cell, ...]
    food: Cell
    grid_width: int
    tile_size: int
    score: int
    high_score: int
    speed_level: int
    tick_interval_ms: int
    state: str
    direction: Direction

    @property
    def head(self) -> Cell:
        return self.snake[0]


# ─────────────────────────── GameEngine ──────────────────────────
class GameEngine:
    """
    Single-snake simulation advanced once per tick by an external scheduler.

    The engine never looks at the clock: whoever hosts it calls step() at
    ``tick_interval_ms`` and reads snapshot() to draw. Collisions are
    reported through the returned status and ``state``, not exceptions.
    """

    def __init__(
        self,
        grid_width: int = GRID_TILES,
        tile_size: int = TILE,
        score_store=None,
        rng: Optional[random.Random] = None,
        speed_level: int = DEFAULT_SPEED_LEVEL,
    ):
        if grid_width < 1:
            raise ValueError(f"grid_width must be positive, got {grid_width}")
        self.grid_width = grid_width
        self.tile_size = tile_size
        self.rng = rng if rng is not None else random.Random()
        self.score_store = score_store
        self._high_score_listeners: list[Callable[[int], None]] = []

        self.high_score: int = score_store.load() if score_store is not None else 0
        self.speed_level: int = DEFAULT_SPEED_LEVEL
        self.tick_interval_ms: int = interval_for_level(DEFAULT_SPEED_LEVEL)
        self.set_speed_level(speed_level)

        self.snake: deque[Cell] = deque()
        self.direction: Direction = Direction.NONE
        self._next_dir: Optional[Direction] = None
        self.food: Cell = (0, 0)
        self.score: int = 0
        self._init_entities()
        self.state: str = STATE_MENU

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def start_cell(self) -> Cell:
        return (self.grid_width // 2, self.grid_width // 2)

    @property
    def running(self) -> bool:
        return self.state == STATE_PLAYING

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            grid_width=self.grid_width,
            tile_size=self.tile_size,
            score=self.score,
            high_score=self.high_score,
            speed_level=self.speed_level,
            tick_interval_ms=self.tick_interval_ms,
            state=self.state,
            direction=self.direction,
        )

    def add_high_score_listener(self, callback: Callable[[int], None]) -> None:
        """Call ``callback(new_high_score)`` every time the high score rises."""
        self._high_score_listeners.append(callback)

    # ── Commands ─────────────────────────────────────────────────
    def reset(self) -> None:
        """Start a fresh run: one-cell snake, no heading, zero score."""
        self._init_entities()
        self.state = STATE_PLAYING
        logger.debug("Run reset; food at %s", self.food)

    def set_direction(self, intent) -> bool:
        """
        Queue a heading for the next step().

        Only one change is kept per tick; a later call overwrites an
        earlier one. Reversing onto the body is ignored.
        """
        if self.state != STATE_PLAYING:
            return False

        if isinstance(intent, Direction):
            new_dir = intent
        else:
            new_dir = INTENT_DIRECTIONS.get(str(intent).lower())
        if not new_dir:
            logger.debug("Ignoring unknown direction intent %r", intent)
            return False

        if len(self.snake) > 1 and new_dir.is_opposite(self.direction):
            return False

        self._next_dir = new_dir
        return True

    def step(self) -> str:
        """Advance the simulation by one tick and report what happened."""
        if self.state != STATE_PLAYING:
            return STEP_IDLE

        if self._next_dir is not None:
            self.direction = self._next_dir
            self._next_dir = None
        if not self.direction:
            return STEP_IDLE

        hx, hy = self.head
        nx, ny = hx + self.direction.x, hy + self.direction.y

        if not (0 <= nx < self.grid_width and 0 <= ny < self.grid_width):
            return self._game_over(STEP_COLLISION_WALL)

        if (nx, ny) in self.snake:
            return self._game_over(STEP_COLLISION_SELF)

        self.snake.appendleft((nx, ny))

        if (nx, ny) == self.food:
            self._eat()
            return STEP_ATE_FOOD

        self.snake.pop()
        return STEP_MOVED

    def place_food(self) -> Cell:
        """
        Put food on a uniformly random free cell.

        Rejection-samples up to MAX_FOOD_ATTEMPTS times, then falls back to
        choosing among the free cells found by scanning the grid.
        """
        occupied = set(self.snake)
        size = self.grid_width
        for _ in range(MAX_FOOD_ATTEMPTS):
            pos = (self.rng.randrange(size), self.rng.randrange(size))
            if pos not in occupied:
                self.food = pos
                return pos

        free = [
            (x, y)
            for y in range(size)
            for x in range(size)
            if (x, y) not in occupied
        ]
        if not free:
            raise FoodPlacementError(
                f"no free cell for food: snake covers all {size * size} cells"
            )
        logger.debug("Rejection sampling gave up; scanning %d free cells", len(free))
        self.food = self.rng.choice(free)
        return self.food

    def set_speed_level(self, level) -> int:
        """
        Set the speed from a slider value or preset button.

        Accepts ints and numeric strings. Anything non-numeric or outside
        [1, 10] falls back to the default level (130 ms per tick).
        """
        try:
            value = int(level)
        except (TypeError, ValueError):
            value = None
        if value is None or value not in SPEED_INTERVALS_MS:
            logger.debug("Invalid speed level %r; using default %d",
                         level, DEFAULT_SPEED_LEVEL)
            value = DEFAULT_SPEED_LEVEL
        self.speed_level = value
        self.tick_interval_ms = interval_for_level(value)
        return value

    # ── Private helpers ──────────────────────────────────────────
    def _init_entities(self) -> None:
        self.snake = deque([self.start_cell])
        self.direction = Direction.NONE
        self._next_dir = None
        self.score = 0
        self.place_food()

    def _eat(self) -> None:
        self.score += FOOD_REWARD
        if self.score > self.high_score:
            self._raise_high_score(self.score)
        self.place_food()

    def _raise_high_score(self, value: int) -> None:
        self.high_score = value
        if self.score_store is not None:
            self.score_store.save(value)
        for callback in self._high_score_listeners:
            callback(value)

    def _game_over(self, status: str) -> str:
        self.state = STATE_OVER
        self._next_dir = None
        logger.info("Game over (%s) with score %d", status, self.score)
        return status
