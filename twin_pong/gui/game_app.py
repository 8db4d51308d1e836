"""
Twin Pong application: wires the game loop to pygame or to a headless run
"""

import argparse
import logging
import sys

import pygame

from twin_pong.core.clock import FixedIntervalClock
from twin_pong.core.game_loop import create_game
from twin_pong.gui.keyboard_input import KeyboardInput
from twin_pong.gui.pygame_renderer import HeadlessRenderer
from twin_pong.gui.pygame_renderer import PygameRenderer
from twin_pong.utils.config import KEYBOARD_LAYOUTS
from twin_pong.utils.config import GameConfig
from twin_pong.utils.config import game_config
from twin_pong.utils.keyboard_layout import auto_configure_layout
from twin_pong.utils.keyboard_layout import show_layout_help

logger = logging.getLogger(__name__)

DEFAULT_HEADLESS_TICKS = 3000


class PygameClock:
    """Tick pacing backed by pygame.time.Clock"""

    def __init__(self, tick_ms: int):
        self.fps = 1000.0 / tick_ms
        self.clock = pygame.time.Clock()

    def reset(self) -> None:
        self.clock.tick()

    def wait_next_tick(self) -> None:
        self.clock.tick(self.fps)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player Pong")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument(
        "--layout", choices=sorted(KEYBOARD_LAYOUTS), help="Keyboard layout (default: detect)"
    )
    parser.add_argument("--tick-ms", type=int, help="Tick period in milliseconds")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument(
        "--max-ticks",
        type=int,
        help=f"Stop after this many ticks (headless default: {DEFAULT_HEADLESS_TICKS})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def load_config(args: argparse.Namespace) -> GameConfig:
    """Configuration from file (or defaults) with command line overrides applied"""
    if args.config:
        config = GameConfig.load_from_file(args.config)
    else:
        config = game_config.model_copy()

    if args.layout:
        config.KEYBOARD_LAYOUT = args.layout
    elif not args.config:
        auto_configure_layout(config)
    if args.tick_ms is not None:
        config.TICK_MS = args.tick_ms
    return config


def run_headless(config: GameConfig, max_ticks: int) -> tuple[int, int]:
    """Plays max_ticks ticks with no input and returns the final score"""
    renderer = HeadlessRenderer(max_frames=1)
    game = create_game(config, renderer=renderer)
    try:
        game.run(clock=FixedIntervalClock(config.tick_seconds), max_ticks=max_ticks)
    finally:
        renderer.cleanup()
    return game.scoreboard.as_tuple()


def run_window(config: GameConfig, max_ticks: int | None = None) -> tuple[int, int]:
    """Plays in a pygame window until it is closed"""
    renderer = PygameRenderer(config)
    game = create_game(config, renderer=renderer)
    keyboard = KeyboardInput(game.left_paddle, game.right_paddle, config.get_keyboard_layout())
    try:
        renderer.render_frame(game.snapshot())
        game.run(clock=PygameClock(config.TICK_MS), input_source=keyboard, max_ticks=max_ticks)
    finally:
        renderer.cleanup()
    return game.scoreboard.as_tuple()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError) as e:
        # pydantic.ValidationError is a ValueError
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    print("=== TWIN PONG ===")
    print(show_layout_help(config))

    if args.headless:
        score = run_headless(config, args.max_ticks or DEFAULT_HEADLESS_TICKS)
    else:
        score = run_window(config, args.max_ticks)

    print(f"Final score: {score[0]} - {score[1]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
