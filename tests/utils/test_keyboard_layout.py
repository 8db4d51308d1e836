"""
Unit tests for keyboard layout detection
"""

import pytest

from twin_pong.utils import keyboard_layout
from twin_pong.utils.config import GameConfig


@pytest.mark.parametrize(
    "locale_name,expected",
    [
        ("fr_FR", "azerty"),
        ("de_DE", "qwertz"),
        ("en_US", "qwerty"),
        ("ja_JP", "qwerty"),
        ("fr_BE", "azerty"),
        ("de_CH", "qwertz"),
        ("be_BY", "qwerty"),
    ],
)
def test_detect_from_locale(monkeypatch, locale_name, expected):
    """Test locale language maps to a layout"""
    monkeypatch.setattr(keyboard_layout.locale, "getlocale", lambda: (locale_name, "UTF-8"))
    assert keyboard_layout.detect_system_layout() == expected


def test_detect_falls_back_to_lang(monkeypatch):
    """Test LANG is used when the locale is not set"""
    monkeypatch.setattr(keyboard_layout.locale, "getlocale", lambda: (None, None))
    monkeypatch.setenv("LANG", "fr_BE.UTF-8")
    assert keyboard_layout.detect_system_layout() == "azerty"


def test_detect_default(monkeypatch):
    """Test qwerty when nothing is known"""
    monkeypatch.setattr(keyboard_layout.locale, "getlocale", lambda: (None, None))
    monkeypatch.delenv("LANG", raising=False)
    assert keyboard_layout.detect_system_layout() == "qwerty"


def test_auto_configure_layout(monkeypatch):
    """Test the detected layout is written to the given config"""
    monkeypatch.setattr(keyboard_layout, "detect_system_layout", lambda: "azerty")
    config = GameConfig()

    assert keyboard_layout.auto_configure_layout(config) == "azerty"
    assert config.KEYBOARD_LAYOUT == "azerty"


def test_show_layout_help():
    """Test the help text names the left player keys"""
    text = keyboard_layout.show_layout_help(GameConfig(KEYBOARD_LAYOUT="azerty"))
    assert "AZERTY" in text
    assert "Z (up) / S (down)" in text
