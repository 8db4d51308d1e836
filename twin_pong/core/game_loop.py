"""
Twin Pong main game loop
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from twin_pong.core.clock import FixedIntervalClock
from twin_pong.core.collision import CollisionDetector
from twin_pong.core.entities import Arena
from twin_pong.core.entities import Ball
from twin_pong.core.entities import FrameSnapshot
from twin_pong.core.entities import Paddle
from twin_pong.core.entities import ScoreBoard
from twin_pong.core.entities import Side
from twin_pong.core.interfaces import ClockProtocol
from twin_pong.core.interfaces import InputSourceProtocol
from twin_pong.core.interfaces import RendererProtocol
from twin_pong.utils.config import GameConfig
from twin_pong.utils.config import game_config

logger = logging.getLogger(__name__)

ScoreListener = Callable[[Side, ScoreBoard], None]


@dataclass(frozen=True)
class TickResult:
    """What happened during one tick"""

    tick: int
    hits: tuple[Side, ...]
    scored: Side | None


class GameLoop:
    """Orchestrates collisions, movement, scoring and rendering, one tick at a time"""

    def __init__(
        self,
        arena: Arena,
        left_paddle: Paddle,
        right_paddle: Paddle,
        ball: Ball,
        scoreboard: ScoreBoard | None = None,
        renderer: RendererProtocol | None = None,
        tick_period: float = 0.02,
    ):
        self.arena = arena
        self.left_paddle = left_paddle
        self.right_paddle = right_paddle
        self.ball = ball
        self.scoreboard = scoreboard if scoreboard is not None else ScoreBoard()
        self.renderer = renderer
        self.tick_period = tick_period
        self.collision_detector = CollisionDetector()

        self.tick_count = 0
        self._running = False
        self._paused = False
        self._score_listeners: list[ScoreListener] = []

    @property
    def running(self) -> bool:
        return self._running

    @property
    def paused(self) -> bool:
        return self._paused

    def add_score_listener(self, listener: ScoreListener) -> None:
        """Registers a callback invoked with the scoring side after each point"""
        self._score_listeners.append(listener)

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot(
            ball=self.ball.snapshot(),
            left_paddle=self.left_paddle.snapshot(),
            right_paddle=self.right_paddle.snapshot(),
            score=self.scoreboard.as_tuple(),
        )

    def tick(self) -> TickResult:
        """Advances the game by exactly one tick"""
        # Both paddles are always checked, two hits in one tick flip twice
        hits = self.collision_detector.paddles_hit(self.ball, self.left_paddle, self.right_paddle)
        for side in hits:
            self.ball.bounce_horizontal()
            logger.debug("Ball hit %s paddle at (%.1f, %.1f)", side.value, self.ball.x, self.ball.y)

        self.left_paddle.move()
        self.right_paddle.move()
        scored = self.ball.move()

        if scored is not None:
            self.scoreboard.credit(scored)
            logger.info("%s player scores, score is now %s", scored.value, self.scoreboard)
            for listener in self._score_listeners:
                listener(scored, self.scoreboard)

        if self.renderer is not None:
            self.renderer.render_frame(self.snapshot())

        self.tick_count += 1
        return TickResult(tick=self.tick_count, hits=hits, scored=scored)

    def run(
        self,
        clock: ClockProtocol | None = None,
        input_source: InputSourceProtocol | None = None,
        max_ticks: int | None = None,
    ) -> int:
        """
        Runs ticks at a fixed period until stopped

        Args:
            clock: Paces the ticks. Defaults to a monotonic clock on tick_period
            input_source: Polled between ticks, ends the session when it reports closed
            max_ticks: Stop after this many ticks have been played

        Returns:
            Number of ticks played
        """
        if self._running:
            raise RuntimeError("Game loop is already running")
        if clock is None:
            clock = FixedIntervalClock(self.tick_period)

        self._running = True
        played = 0
        logger.info("Game loop started, tick period %.3fs", self.tick_period)
        try:
            clock.reset()
            while self._running and (max_ticks is None or played < max_ticks):
                if input_source is not None:
                    if not input_source.poll():
                        break
                    if input_source.pause_requested():
                        self.toggle_pause()

                if not self._paused:
                    self.tick()
                    played += 1

                if self._running and (max_ticks is None or played < max_ticks):
                    clock.wait_next_tick()
        finally:
            self._running = False
            logger.info("Game loop stopped after %d ticks, final score %s", played, self.scoreboard)
        return played

    def stop(self) -> None:
        """Stops the loop after the current tick, safe to call when not running"""
        self._running = False

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def toggle_pause(self) -> None:
        self._paused = not self._paused
        logger.info("Game %s", "paused" if self._paused else "resumed")


def create_game(
    config: GameConfig | None = None, renderer: RendererProtocol | None = None
) -> GameLoop:
    """Builds arena, paddles, ball and score board from a configuration"""
    config = config if config is not None else game_config
    arena = Arena(config.ARENA_WIDTH, config.ARENA_HEIGHT)

    def make_paddle(side: Side) -> Paddle:
        return Paddle(
            arena,
            side,
            width=config.PADDLE_WIDTH,
            height=config.PADDLE_HEIGHT,
            speed=config.PADDLE_SPEED,
            margin=config.PADDLE_MARGIN,
        )

    ball = Ball(arena, dx=config.BALL_DX, dy=config.BALL_DY, radius=config.BALL_RADIUS)
    return GameLoop(
        arena,
        make_paddle(Side.LEFT),
        make_paddle(Side.RIGHT),
        ball,
        renderer=renderer,
        tick_period=config.tick_seconds,
    )
