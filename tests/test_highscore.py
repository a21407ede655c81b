"""Tests for high score persistence."""

import json

from arcade_snake.engine import GameEngine
from arcade_snake.highscore import (
    HIGH_SCORE_KEY,
    InMemoryHighScoreStore,
    JsonHighScoreStore,
)


class TestInMemoryStore:
    def test_default(self):
        assert InMemoryHighScoreStore().get_high_score() == 0

    def test_set(self):
        store = InMemoryHighScoreStore(5)
        store.set_high_score(40)
        assert store.get_high_score() == 40


class TestJsonStore:
    def test_missing_file_reads_zero(self, tmp_path):
        store = JsonHighScoreStore(tmp_path / "scores.json")
        assert store.get_high_score() == 0

    def test_roundtrip_creates_parent(self, tmp_path):
        path = tmp_path / "nested" / "scores.json"
        JsonHighScoreStore(path).set_high_score(85)
        assert JsonHighScoreStore(path).get_high_score() == 85
        assert json.loads(path.read_text()) == {HIGH_SCORE_KEY: 85}

    def test_preserves_other_keys(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps({"other-game": 7}))
        JsonHighScoreStore(path).set_high_score(12)
        assert json.loads(path.read_text()) == {"other-game": 7, HIGH_SCORE_KEY: 12}

    def test_custom_key(self, tmp_path):
        path = tmp_path / "scores.json"
        JsonHighScoreStore(path, key="a").set_high_score(1)
        JsonHighScoreStore(path, key="b").set_high_score(2)
        assert JsonHighScoreStore(path, key="a").get_high_score() == 1
        assert JsonHighScoreStore(path, key="b").get_high_score() == 2

    def test_corrupt_file_reads_zero(self, tmp_path, caplog):
        path = tmp_path / "scores.json"
        path.write_text("{not json")
        assert JsonHighScoreStore(path).get_high_score() == 0
        assert "unreadable" in caplog.text

    def test_non_object_file_reads_zero(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text("[1, 2]")
        assert JsonHighScoreStore(path).get_high_score() == 0

    def test_non_integer_value_reads_zero(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps({HIGH_SCORE_KEY: "lots"}))
        assert JsonHighScoreStore(path).get_high_score() == 0


class TestEngineWithJsonStore:
    def test_game_over_persists_new_record(self, tmp_path):
        path = tmp_path / "scores.json"
        engine = GameEngine(high_scores=JsonHighScoreStore(path), seed=0)
        engine.start()
        # Run straight into the right wall after a scripted meal.
        from dataclasses import replace

        from arcade_snake.food import Food, FoodKind

        engine.restore(
            replace(
                engine.state,
                snake=((18, 10),),
                food=Food(position=(19, 10), kind=FoodKind.BONUS, points=25),
            )
        )
        engine.tick()
        engine.tick()
        assert JsonHighScoreStore(path).get_high_score() == 25
