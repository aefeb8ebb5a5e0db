import json
import random

from gridsnake.model import GameEngine
from gridsnake.score_store import JsonScoreStore, MemoryScoreStore


def test_missing_file_loads_zero(tmp_path):
    assert JsonScoreStore(str(tmp_path / "nope.json")).load() == 0


def test_save_then_load(tmp_path):
    path = tmp_path / "best.json"
    JsonScoreStore(str(path)).save(120)

    assert json.loads(path.read_text(encoding="utf-8")) == {"high_score": 120}
    assert JsonScoreStore(str(path)).load() == 120


def test_save_creates_parent_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "best.json"
    JsonScoreStore(str(path)).save(40)
    assert JsonScoreStore(str(path)).load() == 40


def test_corrupt_file_loads_zero(tmp_path, caplog):
    path = tmp_path / "best.json"
    path.write_text("{not json", encoding="utf-8")
    assert JsonScoreStore(str(path)).load() == 0
    assert "Could not read high score" in caplog.text


def test_wrong_shape_loads_zero(tmp_path):
    path = tmp_path / "best.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert JsonScoreStore(str(path)).load() == 0

    path.write_text('{"high_score": "lots"}', encoding="utf-8")
    assert JsonScoreStore(str(path)).load() == 0


def test_negative_value_is_floored(tmp_path):
    path = tmp_path / "best.json"
    path.write_text('{"high_score": -30}', encoding="utf-8")
    assert JsonScoreStore(str(path)).load() == 0


def test_unwritable_path_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    store = JsonScoreStore(str(blocker / "best.json"))
    store.save(10)
    assert "Could not save high score" in caplog.text


def test_engine_persists_new_high_score(tmp_path):
    path = str(tmp_path / "best.json")
    engine = GameEngine(score_store=JsonScoreStore(path), rng=random.Random(1))
    engine.reset()
    engine.set_direction("right")
    engine.food = (11, 10)
    engine.step()

    assert JsonScoreStore(path).load() == 10
    assert GameEngine(score_store=JsonScoreStore(path)).high_score == 10


def test_memory_store_records_saves():
    store = MemoryScoreStore(5)
    assert store.load() == 5
    store.save(10)
    store.save(20)
    assert store.load() == 20
    assert store.saves == [10, 20]
