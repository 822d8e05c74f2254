import json

import pytest

from capture_go.config import GameConfig


def test_defaults():
    config = GameConfig()
    assert config.board_size == 19
    assert config.capture_limit == 10
    assert config.mode == "human"
    assert config.difficulty == "easy"
    assert config.validate() is config


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "config.json"
    GameConfig(board_size=9, mode="computer", difficulty="medium", seed=42).save(path)

    assert json.loads(path.read_text())["difficulty"] == "medium"
    loaded = GameConfig.load(path)
    assert loaded == GameConfig(board_size=9, mode="computer", difficulty="medium", seed=42)


@pytest.mark.parametrize("kwargs", [
    {"board_size": 1},
    {"board_size": 30},
    {"capture_limit": 0},
    {"mode": "online"},
    {"difficulty": "expert"},
    {"opponent_delay": -1.0},
])
def test_validate_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs).validate()


def test_load_rejects_bad_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"mode": "online"}))
    with pytest.raises(ValueError):
        GameConfig.load(path)
