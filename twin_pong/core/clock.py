"""
Fixed-interval pacing for the game loop
"""

import time
from collections.abc import Callable


class FixedIntervalClock:
    """
    Paces ticks on a fixed period using a monotonic clock.

    Deadlines are absolute so sleep jitter does not accumulate. When a tick
    overruns by more than a whole period the schedule restarts from now
    instead of firing a burst of late ticks.
    """

    def __init__(
        self,
        period: float,
        time_fn: Callable[[], float] = time.monotonic,
        sleep_fn: Callable[[float], None] = time.sleep,
    ):
        if period <= 0:
            raise ValueError(f"Tick period must be positive, got {period}")
        self.period = period
        self._time = time_fn
        self._sleep = sleep_fn
        self._next_due = self._time() + period

    def reset(self) -> None:
        self._next_due = self._time() + self.period

    def wait_next_tick(self) -> None:
        delay = self._next_due - self._time()
        if delay > 0:
            self._sleep(delay)
            self._next_due += self.period
        elif delay < -self.period:
            self.reset()
        else:
            self._next_due += self.period
