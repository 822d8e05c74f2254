import json

from click.testing import CliRunner

from capture_go.cli import main


def test_simulate_reports_results():
    runner = CliRunner()
    result = runner.invoke(main, [
        "simulate", "--games", "2", "--board-size", "5", "--capture-limit", "2",
        "--black", "hard", "--white", "medium", "--seed", "11",
    ])
    assert result.exit_code == 0, result.output
    assert "Game 1/2" in result.output
    assert "Game 2/2" in result.output
    assert "Results over 2 games" in result.output


def test_simulate_show_board():
    runner = CliRunner()
    result = runner.invoke(main, [
        "simulate", "-g", "1", "-b", "3", "--max-moves", "4", "--seed", "2", "--show-board",
    ])
    assert result.exit_code == 0, result.output
    assert "A B C" in result.output


def test_simulate_rejects_bad_board_size():
    runner = CliRunner()
    result = runner.invoke(main, ["simulate", "--board-size", "1"])
    assert result.exit_code != 0
    assert "Board size" in result.output


def test_config_writes_defaults():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["config", "--output", "settings.json"])
        assert result.exit_code == 0, result.output
        with open("settings.json") as f:
            data = json.load(f)
    assert data["board_size"] == 19
    assert data["capture_limit"] == 10


def test_play_rejects_invalid_config(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"difficulty": "expert"}))
    runner = CliRunner()
    result = runner.invoke(main, ["play", "--config", str(path)])
    assert result.exit_code != 0
    assert "difficulty" in result.output
