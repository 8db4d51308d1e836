"""
Twin Pong game entities: arena, paddles, ball and score board
"""

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """Side of the arena a paddle defends"""

    LEFT = "left"
    RIGHT = "right"


def _require_positive(**values: float) -> None:
    for name, value in values.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class Arena:
    """Playfield bounds, fixed for the whole session"""

    width: float
    height: float

    def __post_init__(self) -> None:
        _require_positive(width=self.width, height=self.height)

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)


@dataclass(frozen=True)
class PaddleSnapshot:
    """Immutable view of a paddle for rendering"""

    side: Side
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class BallSnapshot:
    """Immutable view of the ball for rendering"""

    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the renderer needs to paint one tick"""

    ball: BallSnapshot
    left_paddle: PaddleSnapshot
    right_paddle: PaddleSnapshot
    score: tuple[int, int]


class Paddle:
    """Player paddle, moves vertically according to its movement flags"""

    def __init__(
        self,
        arena: Arena,
        side: Side,
        width: float = 20.0,
        height: float = 100.0,
        speed: float = 10.0,
        margin: float = 50.0,
    ):
        _require_positive(width=width, height=height, speed=speed)
        if height > arena.height:
            raise ValueError(f"Paddle height {height} exceeds arena height {arena.height}")
        if margin < 0 or margin + width > arena.width:
            raise ValueError(f"Paddle margin {margin} does not fit in arena width {arena.width}")

        self.arena = arena
        self.side = side
        self.width = width
        self.height = height
        self.speed = speed
        self.x = margin if side is Side.LEFT else arena.width - margin - width
        self.y = arena.height / 2 - height / 2

        # Written by the input collaborator, only read here
        self.moving_up = False
        self.moving_down = False

    @property
    def max_y(self) -> float:
        return self.arena.height - self.height

    def move(self) -> None:
        """Advances the paddle by one tick according to its movement flags"""
        direction = 0
        if self.moving_up and self.y > 0:
            direction = -1
        # Checked second, so it wins when both flags are set
        if self.moving_down and self.y < self.max_y:
            direction = 1

        self.y = max(0.0, min(self.max_y, self.y + direction * self.speed))

    def snapshot(self) -> PaddleSnapshot:
        return PaddleSnapshot(self.side, self.x, self.y, self.width, self.height)


class Ball:
    """Game ball. Its speed is constant, only the direction flips."""

    def __init__(self, arena: Arena, dx: float = 7.0, dy: float = 7.0, radius: float = 10.0):
        _require_positive(radius=radius)
        if dx == 0 or dy == 0:
            raise ValueError(f"Ball velocity components must be non-zero, got ({dx}, {dy})")
        if 2 * radius >= min(arena.width, arena.height):
            raise ValueError(f"Ball radius {radius} does not fit in the arena")

        self.arena = arena
        self.radius = radius
        self.x, self.y = arena.center
        self.dx = dx
        self.dy = dy

    def reset_to_center(self) -> None:
        """Re-centers the ball and sends it back the way it came"""
        self.x, self.y = self.arena.center
        self.dx = -self.dx

    def bounce_horizontal(self) -> None:
        """Horizontal bounce (paddles)"""
        self.dx = -self.dx

    def move(self) -> Side | None:
        """
        Advances the ball by one tick.

        Returns:
            The side credited with a point when the ball left the arena
            horizontally this tick, None otherwise
        """
        scored: Side | None = None
        if self.x < self.radius:
            scored = Side.RIGHT
        elif self.x > self.arena.width - self.radius:
            scored = Side.LEFT
        if scored is not None:
            self.reset_to_center()

        # Flips on every tick spent in the boundary band, not only on entry
        inside_y = self.radius < self.y < self.arena.height - self.radius
        if not inside_y:
            self.dy = -self.dy

        self.x += self.dx
        self.y += self.dy
        return scored

    def snapshot(self) -> BallSnapshot:
        return BallSnapshot(self.x, self.y, self.radius)


class ScoreBoard:
    """Cumulative score for the session, only ever incremented"""

    def __init__(self) -> None:
        self._left = 0
        self._right = 0

    @property
    def left(self) -> int:
        return self._left

    @property
    def right(self) -> int:
        return self._right

    def increment_left(self) -> None:
        self._left += 1

    def increment_right(self) -> None:
        self._right += 1

    def credit(self, side: Side) -> None:
        """Adds one point to the given side"""
        if side is Side.LEFT:
            self.increment_left()
        else:
            self.increment_right()

    def as_tuple(self) -> tuple[int, int]:
        return (self._left, self._right)

    def __str__(self) -> str:
        return f"{self._left} - {self._right}"
