"""
Shared test setup: pygame runs without a display or sound card
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from twin_pong.core.entities import Arena  # noqa: E402


@pytest.fixture
def arena() -> Arena:
    return Arena(800, 400)
