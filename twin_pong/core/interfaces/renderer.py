"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from twin_pong.core.entities import FrameSnapshot


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Enables multiple rendering backends: Pygame, headless, etc.
    """

    def render_frame(self, frame: FrameSnapshot) -> None:
        """
        Clear the surface and paint a single frame of the game.

        Args:
            frame: Immutable snapshot of ball, paddles and score after a tick
        """
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
