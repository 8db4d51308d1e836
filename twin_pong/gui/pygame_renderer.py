"""
PyGame renderer for Twin Pong game
"""

from collections import deque

import pygame

from twin_pong.core.entities import BallSnapshot
from twin_pong.core.entities import FrameSnapshot
from twin_pong.core.entities import PaddleSnapshot
from twin_pong.utils.config import GameConfig
from twin_pong.utils.config import game_config

CORNERS = ("tl", "tr", "br", "bl")

DEFAULT_MAX_FRAMES = 120

Radius = float | dict[str, float]


def corner_radii(radius: Radius) -> dict[str, int]:
    """Expands a radius into one value per corner, missing corners are square"""
    if isinstance(radius, dict):
        unknown = set(radius) - set(CORNERS)
        if unknown:
            raise ValueError(f"Unknown corners: {sorted(unknown)}")
        return {corner: int(radius.get(corner, 0)) for corner in CORNERS}
    return {corner: int(radius) for corner in CORNERS}


class PygameRenderer:
    """PyGame-based renderer for Twin Pong"""

    def __init__(self, config: GameConfig | None = None, screen: pygame.Surface | None = None):
        """
        Initialize the PyGame renderer

        Args:
            config: Sizes and colors, the global game_config by default
            screen: Surface to draw on. When omitted a window is opened
        """
        self.config = config if config is not None else game_config
        self.owns_display = screen is None

        if self.owns_display:
            pygame.init()
            screen = pygame.display.set_mode((self.config.ARENA_WIDTH, self.config.ARENA_HEIGHT))
            pygame.display.set_caption("Twin Pong")
        else:
            pygame.font.init()

        self.screen = screen
        self.width, self.height = self.screen.get_size()
        self.font = pygame.font.Font(None, self.config.SCORE_FONT_SIZE)

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.config.BACKGROUND_COLOR)

    def draw_round_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: tuple[int, int, int],
        radius: Radius = 5,
        fill: bool = False,
        stroke: bool = True,
    ) -> None:
        """Draws a rectangle with rounded corners, filled and/or outlined"""
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        radii = corner_radii(radius)
        corner_kwargs = {
            "border_top_left_radius": radii["tl"],
            "border_top_right_radius": radii["tr"],
            "border_bottom_right_radius": radii["br"],
            "border_bottom_left_radius": radii["bl"],
        }
        if fill:
            pygame.draw.rect(self.screen, color, rect, 0, **corner_kwargs)
        if stroke:
            pygame.draw.rect(self.screen, color, rect, 1, **corner_kwargs)

    def draw_paddle(self, paddle: PaddleSnapshot) -> None:
        """Draw a player paddle"""
        self.draw_round_rect(
            paddle.x,
            paddle.y,
            paddle.width,
            paddle.height,
            self.config.PADDLE_COLOR,
            radius=self.config.PADDLE_CORNER_RADIUS,
            fill=True,
            stroke=True,
        )

    def draw_ball(self, ball: BallSnapshot) -> None:
        """Draw the game ball"""
        pos = (int(ball.x), int(ball.y))
        pygame.draw.circle(self.screen, self.config.BALL_COLOR, pos, int(ball.radius))

    def draw_score(self, score: tuple[int, int]) -> None:
        """Draw the current score centered at the top"""
        text_surface = self.font.render(f"{score[0]} - {score[1]}", True, self.config.TEXT_COLOR)
        text_rect = text_surface.get_rect()
        text_rect.centerx = self.width // 2
        text_rect.bottom = self.config.SCORE_Y
        self.screen.blit(text_surface, text_rect)

    def render_frame(self, frame: FrameSnapshot) -> None:
        self.clear_screen()
        self.draw_paddle(frame.left_paddle)
        self.draw_paddle(frame.right_paddle)
        self.draw_ball(frame.ball)
        self.draw_score(frame.score)
        if self.owns_display:
            pygame.display.flip()

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        if self.owns_display:
            pygame.quit()


class HeadlessRenderer:
    """Keeps the most recent frames instead of drawing them"""

    def __init__(self, max_frames: int = DEFAULT_MAX_FRAMES):
        self.frames: deque[FrameSnapshot] = deque(maxlen=max_frames)
        self.frame_count = 0

    @property
    def last_frame(self) -> FrameSnapshot | None:
        return self.frames[-1] if self.frames else None

    def render_frame(self, frame: FrameSnapshot) -> None:
        self.frames.append(frame)
        self.frame_count += 1

    def cleanup(self) -> None:
        self.frames.clear()
