"""
Keyboard layout detection for Twin Pong
"""

import locale
import os

from twin_pong.utils.config import KEYBOARD_LAYOUTS
from twin_pong.utils.config import GameConfig
from twin_pong.utils.config import game_config


def _layout_for_language(language: str) -> str:
    language = language.lower()
    if language.startswith("fr"):
        return "azerty"
    if language.startswith("de"):
        return "qwertz"
    return "qwerty"


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    system_locale = locale.getlocale()[0]
    if system_locale and system_locale != "C":
        return _layout_for_language(system_locale)

    # Fallback to environment variables
    lang = os.environ.get("LANG", "")
    if lang:
        return _layout_for_language(lang)

    return "qwerty"


def auto_configure_layout(config: GameConfig | None = None) -> str:
    """
    Apply the detected keyboard layout to a configuration

    Returns:
        The selected layout name
    """
    config = config if config is not None else game_config
    detected = detect_system_layout()
    if detected in KEYBOARD_LAYOUTS:
        config.KEYBOARD_LAYOUT = detected
    return config.KEYBOARD_LAYOUT


def show_layout_help(config: GameConfig | None = None) -> str:
    """Help text listing the keys of both players"""
    config = config if config is not None else game_config
    layout = config.get_keyboard_layout()
    return (
        f"Keyboard layout: {layout.name}\n"
        f"  Left player:  {layout.display_names['up']} (up) / {layout.display_names['down']} (down)\n"
        "  Right player: Up / Down arrows\n"
        "  P or SPACE: Pause\n"
        "  ESC: Quit\n"
    )
