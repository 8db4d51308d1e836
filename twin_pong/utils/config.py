"""
Twin Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Up/down key pairs for both paddles"""

    name: str
    left_keys: dict[str, int]
    right_keys: dict[str, int]
    display_names: dict[str, str]


_ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left_keys={"up": pygame.K_w, "down": pygame.K_s},
        right_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        right_keys=_ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        left_keys={"up": pygame.K_w, "down": pygame.K_s},
        right_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Arena
    ARENA_WIDTH: int = Field(default=800, gt=0, description="Arena width in pixels")
    ARENA_HEIGHT: int = Field(default=400, gt=0, description="Arena height in pixels")

    # Paddles
    PADDLE_WIDTH: float = Field(default=20.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: float = Field(default=10.0, gt=0, description="Paddle pixels per tick")
    PADDLE_MARGIN: float = Field(default=50.0, ge=0, description="Paddle margin from edge")
    PADDLE_CORNER_RADIUS: float = Field(default=10.0, ge=0, description="Paddle corner radius")

    # Ball
    BALL_RADIUS: float = Field(default=10.0, gt=0, description="Ball radius in pixels")
    BALL_DX: float = Field(default=7.0, description="Initial horizontal ball speed per tick")
    BALL_DY: float = Field(default=7.0, description="Initial vertical ball speed per tick")

    # Timing
    TICK_MS: int = Field(default=20, gt=0, description="Tick period in milliseconds")

    # Display
    SCORE_FONT_SIZE: int = Field(default=50, gt=0, description="Score font size")
    SCORE_Y: int = Field(default=60, ge=0, description="Score text baseline")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")

    # Controls
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    @field_validator("BALL_DX", "BALL_DY")
    @classmethod
    def validate_ball_velocity(cls, v: float) -> float:
        """The ball never changes speed, so a zero component would freeze that axis"""
        if v == 0:
            raise ValueError("Ball velocity components must be non-zero")
        return v

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_arena_dimensions(self) -> "GameConfig":
        """Validate arena is large enough for game elements"""
        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH) + 2 * self.BALL_RADIUS
        if self.ARENA_WIDTH <= min_width:
            raise ValueError(f"ARENA_WIDTH must be greater than {min_width} pixels")

        min_height = max(self.PADDLE_HEIGHT, 2 * self.BALL_RADIUS)
        if self.ARENA_HEIGHT <= min_height:
            raise ValueError(f"ARENA_HEIGHT must be greater than {min_height} pixels")

        return self

    @property
    def tick_seconds(self) -> float:
        """Tick period in seconds"""
        return self.TICK_MS / 1000.0

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS[self.KEYBOARD_LAYOUT]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "twin_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "twin_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)


# Global configuration instance
game_config = GameConfig()


def load_config_from_file(filepath: str = "twin_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.info("No configuration file at %s, using defaults", filepath)
        return False

    # loaded_config is already validated as a whole
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    logger.info("Loaded configuration from %s", filepath)
    return True


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values temporarily, recording replaced values"""
    # Validate the combined result first so fields that depend on each other
    # can be changed together
    validated = type(obj)(**{**obj.model_dump(), **kwargs})
    for name in kwargs:
        old_values[name] = getattr(obj, name)
        object.__setattr__(obj, name, getattr(validated, name))


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        _change_values(game_config, {}, **old_values)
