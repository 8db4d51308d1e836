"""
Collision detection system for Twin Pong
"""

from twin_pong.core.entities import Ball
from twin_pong.core.entities import Paddle
from twin_pong.core.entities import Side


def collides(ball: Ball, paddle: Paddle) -> bool:
    """
    Tests the ball against a paddle.

    The ball is approximated by its bounding box horizontally and by its
    center vertically, so a ball grazing a paddle corner is not a hit.
    """
    between_x = ball.x + ball.radius > paddle.x and ball.x - ball.radius < paddle.x + paddle.width
    between_y = paddle.y < ball.y < paddle.y + paddle.height
    return between_x and between_y


class CollisionDetector:
    """Stateless collision checks for a tick"""

    def paddles_hit(self, ball: Ball, *paddles: Paddle) -> tuple[Side, ...]:
        """Returns the sides of every paddle the ball currently overlaps"""
        return tuple(paddle.side for paddle in paddles if collides(ball, paddle))
