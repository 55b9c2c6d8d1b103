"""One-second tick source for the display loop."""

from __future__ import annotations

import time
from collections.abc import Callable

TICK_SECONDS = 1.0


class Ticker:
    """Decide when the polling loop should tick the timer.

    ``due()`` returns True at most once per elapsed second. Time lost while
    the host was suspended is not made up with extra ticks, and a paused
    ticker never reports a tick.
    """

    def __init__(
        self,
        interval: float = TICK_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.interval = interval
        self.clock = clock
        self._next_at: float | None = None

    @property
    def active(self) -> bool:
        return self._next_at is not None

    def start(self) -> None:
        """Arm the ticker; no-op when already armed."""
        if self._next_at is None:
            self._next_at = self.clock() + self.interval

    def stop(self) -> None:
        """Disarm the ticker so no pending tick can fire."""
        self._next_at = None

    def due(self) -> bool:
        """Check whether a tick is due, and schedule the next one if so."""
        if self._next_at is None:
            return False
        now = self.clock()
        if now < self._next_at:
            return False
        self._next_at = now + self.interval
        return True
