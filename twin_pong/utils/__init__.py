"""
Utility modules of Twin Pong
"""

from twin_pong.utils.config import GameConfig
from twin_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
