"""
Core module of Twin Pong game
"""

from twin_pong.core.collision import CollisionDetector
from twin_pong.core.collision import collides
from twin_pong.core.entities import Arena
from twin_pong.core.entities import Ball
from twin_pong.core.entities import FrameSnapshot
from twin_pong.core.entities import Paddle
from twin_pong.core.entities import ScoreBoard
from twin_pong.core.entities import Side
from twin_pong.core.game_loop import GameLoop
from twin_pong.core.game_loop import TickResult
from twin_pong.core.game_loop import create_game

__all__ = [
    "Arena",
    "Ball",
    "CollisionDetector",
    "FrameSnapshot",
    "GameLoop",
    "Paddle",
    "ScoreBoard",
    "Side",
    "TickResult",
    "collides",
    "create_game",
]
