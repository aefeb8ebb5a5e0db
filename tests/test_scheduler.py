import random

from gridsnake.config import STEP_COLLISION_WALL, STATE_OVER
from gridsnake.model import GameEngine
from gridsnake.scheduler import Ticker


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.calls


def test_fires_once_per_interval():
    counter = Counter()
    ticker = Ticker(counter, lambda: 100)
    ticker.start()

    assert ticker.advance(40) is None
    assert ticker.advance(40) is None
    assert ticker.advance(40) == 1
    assert ticker.advance(60) is None
    assert ticker.advance(20) == 2
    assert counter.calls == 2


def test_idle_until_started():
    counter = Counter()
    ticker = Ticker(counter, lambda: 10)
    assert ticker.advance(1000) is None
    assert counter.calls == 0
    assert ticker.running is False


def test_stop_cancels_pending_time():
    counter = Counter()
    ticker = Ticker(counter, lambda: 100)
    ticker.start()
    ticker.advance(90)
    ticker.stop()

    assert ticker.advance(50) is None
    ticker.start()
    assert ticker.advance(50) is None
    assert counter.calls == 0


def test_restart_supersedes_previous_stream():
    counter = Counter()
    ticker = Ticker(counter, lambda: 100)
    ticker.start()
    ticker.advance(90)
    ticker.start()

    assert ticker.advance(20) is None
    assert counter.calls == 0
    assert ticker.advance(80) == 1


def test_slow_frame_does_not_burst():
    counter = Counter()
    ticker = Ticker(counter, lambda: 100)
    ticker.start()

    assert ticker.advance(1000) == 1
    assert ticker.advance(10) is None
    assert counter.calls == 1


def test_interval_is_reread_each_tick():
    interval = [250]
    counter = Counter()
    ticker = Ticker(counter, lambda: interval[0])
    ticker.start()

    assert ticker.advance(100) is None
    interval[0] = 30
    assert ticker.advance(0) == 1


def test_drives_engine_until_wall():
    engine = GameEngine(rng=random.Random(3))
    engine.reset()
    engine.food = (0, 0)
    ticker = Ticker(engine.step, lambda: engine.tick_interval_ms)
    ticker.start()
    engine.set_direction("right")

    statuses = []
    for _ in range(200):
        status = ticker.advance(engine.tick_interval_ms)
        if status is not None:
            statuses.append(status)
        if engine.state == STATE_OVER:
            ticker.stop()
            break

    assert statuses[-1] == STEP_COLLISION_WALL
    assert len(statuses) == 10
    assert ticker.advance(10_000) is None
