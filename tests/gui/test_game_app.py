"""
Tests for the command line application
"""

import pytest

from twin_pong.core.clock import FixedIntervalClock
from twin_pong.gui import game_app
from twin_pong.utils.config import GameConfig, game_config


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(
        game_app,
        "FixedIntervalClock",
        lambda period: FixedIntervalClock(period, sleep_fn=lambda seconds: None),
    )


def test_headless_run(capsys):
    """Test a headless session plays and reports the score"""
    assert game_app.main(["--headless", "--max-ticks", "200", "--layout", "qwerty"]) == 0

    out = capsys.readouterr().out
    assert "TWIN PONG" in out
    assert "Final score:" in out


def test_run_headless_returns_score():
    """Test an unattended game returns both counters"""
    left, right = game_app.run_headless(GameConfig(), max_ticks=400)
    assert left >= 0 and right >= 0


def test_load_config_overrides(tmp_path):
    """Test command line values override the file"""
    path = tmp_path / "config.json"
    GameConfig(TICK_MS=30, KEYBOARD_LAYOUT="qwertz").save_to_file(str(path))
    args = game_app.build_parser().parse_args(["--config", str(path), "--tick-ms", "10"])

    config = game_app.load_config(args)

    assert config.TICK_MS == 10
    assert config.KEYBOARD_LAYOUT == "qwertz"


def test_load_config_does_not_touch_global(monkeypatch):
    """Test overrides apply to a copy of the global configuration"""
    monkeypatch.setattr(game_app, "auto_configure_layout", lambda config: None)
    args = game_app.build_parser().parse_args(["--tick-ms", "40"])

    config = game_app.load_config(args)

    assert config.TICK_MS == 40
    assert game_config.TICK_MS == 20


def test_invalid_config_file(tmp_path, capsys):
    """Test a bad configuration exits with an error instead of a traceback"""
    path = tmp_path / "config.json"
    path.write_text('{"PADDLE_SPEED": -1}')

    assert game_app.main(["--headless", "--config", str(path)]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_missing_config_file(tmp_path):
    """Test a missing configuration file is reported"""
    assert game_app.main(["--headless", "--config", str(tmp_path / "nope.json")]) == 2
