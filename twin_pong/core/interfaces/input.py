"""
Input source protocol - writes paddle movement flags between ticks
"""

from typing import Protocol


class InputSourceProtocol(Protocol):
    """
    Protocol for input collaborators.

    Implementations set ``moving_up`` / ``moving_down`` on the paddles they
    control. The game loop only reads those flags during ``Paddle.move()``.
    """

    def poll(self) -> bool:
        """
        Process pending input events.

        Returns:
            False once the session was closed (window closed, quit key), True otherwise
        """
        ...

    def pause_requested(self) -> bool:
        """Returns True once per pause/resume request since the last poll"""
        ...
