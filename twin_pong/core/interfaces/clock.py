"""
Clock protocol - paces the game loop at a fixed tick period
"""

from typing import Protocol


class ClockProtocol(Protocol):
    """Blocks until the next tick is due"""

    def wait_next_tick(self) -> None:
        ...

    def reset(self) -> None:
        """Restart the schedule from now"""
        ...
