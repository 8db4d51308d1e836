"""
Unit tests for collision detection

The detector uses the ball's bounding box horizontally and its center
vertically, so the checks below probe both axes separately.
"""

import pytest

from twin_pong.core.collision import CollisionDetector, collides
from twin_pong.core.entities import Arena, Ball, Paddle, Side


@pytest.fixture
def left_paddle(arena: Arena) -> Paddle:
    # x in [50, 70], y in [150, 250]
    return Paddle(arena, Side.LEFT)


@pytest.fixture
def right_paddle(arena: Arena) -> Paddle:
    # x in [730, 750], y in [150, 250]
    return Paddle(arena, Side.RIGHT)


def place(ball: Ball, x: float, y: float) -> Ball:
    ball.x = x
    ball.y = y
    return ball


class TestCollides:
    """Test the ball-vs-paddle overlap test"""

    def test_centered_ball_does_not_collide(self, arena: Arena, left_paddle: Paddle) -> None:
        """Test the starting position is not a hit"""
        assert not collides(Ball(arena), left_paddle)

    def test_ball_overlapping_front_face(self, arena: Arena, left_paddle: Paddle) -> None:
        """Test a ball touching the paddle face"""
        ball = place(Ball(arena), 75, 200)
        assert collides(ball, left_paddle)

    @pytest.mark.parametrize("x", [40.5, 60, 79.5])
    def test_horizontal_overlap(self, arena: Arena, left_paddle: Paddle, x: float) -> None:
        """Test bounding box overlap along x"""
        assert collides(place(Ball(arena), x, 200), left_paddle)

    @pytest.mark.parametrize("x", [39.9, 40.0, 80.0, 90.0])
    def test_horizontal_edges_are_strict(
        self, arena: Arena, left_paddle: Paddle, x: float
    ) -> None:
        """Test touching exactly at the box edge is not a hit"""
        # 40 and 80 are exactly one radius away from the paddle sides
        assert not collides(place(Ball(arena), x, 200), left_paddle)

    @pytest.mark.parametrize("y,expected", [(150, False), (150.1, True), (249.9, True), (250, False)])
    def test_vertical_uses_center_only(
        self, arena: Arena, left_paddle: Paddle, y: float, expected: bool
    ) -> None:
        """Test the ball radius is ignored vertically"""
        assert collides(place(Ball(arena), 60, y), left_paddle) is expected

    def test_ball_just_above_paddle_misses(self, arena: Arena, left_paddle: Paddle) -> None:
        """Test a ball whose edge overlaps the top corner is not a hit"""
        assert not collides(place(Ball(arena), 60, 145), left_paddle)

    def test_right_paddle(self, arena: Arena, right_paddle: Paddle) -> None:
        """Test the right paddle position is honored"""
        assert collides(place(Ball(arena), 725, 160), right_paddle)
        assert not collides(place(Ball(arena), 715, 160), right_paddle)

    def test_pure(self, arena: Arena, left_paddle: Paddle) -> None:
        """Test repeated calls with unchanged inputs agree and mutate nothing"""
        ball = place(Ball(arena), 75, 200)
        before = (ball.x, ball.y, ball.dx, ball.dy, left_paddle.y)

        first = collides(ball, left_paddle)
        second = collides(ball, left_paddle)

        assert first == second
        assert (ball.x, ball.y, ball.dx, ball.dy, left_paddle.y) == before


class TestCollisionDetector:
    """Test the per-tick detector"""

    def test_reports_hit_sides(
        self, arena: Arena, left_paddle: Paddle, right_paddle: Paddle
    ) -> None:
        """Test sides of overlapping paddles are returned in order"""
        detector = CollisionDetector()

        assert detector.paddles_hit(Ball(arena), left_paddle, right_paddle) == ()
        ball = place(Ball(arena), 72, 180)
        assert detector.paddles_hit(ball, left_paddle, right_paddle) == (Side.LEFT,)

    def test_reports_both_when_both_overlap(self, arena: Arena) -> None:
        """Test two overlapping paddles are both reported"""
        left = Paddle(arena, Side.LEFT)
        right = Paddle(arena, Side.RIGHT)
        right.x = left.x
        ball = place(Ball(arena), 60, 200)

        assert CollisionDetector().paddles_hit(ball, left, right) == (Side.LEFT, Side.RIGHT)
