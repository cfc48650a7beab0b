"""A countdown for a timed game, read on demand rather than by a running thread."""

from __future__ import annotations

import time
from collections.abc import Callable

Clock = Callable[[], float]


class Timer:
    """Counts down ``minutes`` from the moment ``start`` is called.

    ``clock`` returns seconds as a float and defaults to a monotonic clock;
    elapsed time is counted in whole seconds.
    """

    def __init__(self, minutes: int, clock: Clock | None = None) -> None:
        if isinstance(minutes, bool) or not isinstance(minutes, int):
            raise TypeError("minutes must be an integer")
        if minutes < 0:
            raise ValueError("minutes must not be negative")
        self.total_seconds = minutes * 60
        self._clock = time.monotonic if clock is None else clock
        self._started_at: float | None = None

    def start(self) -> None:
        """Start (or restart) the countdown from the full time limit."""
        self._started_at = self._clock()

    def remaining(self) -> int:
        """Seconds left; zero or less once time has run out."""
        if self._started_at is None:
            raise RuntimeError("the timer has not been started")
        elapsed = int(self._clock() - self._started_at)
        return self.total_seconds - elapsed

    def is_time_up(self) -> bool:
        """Whether the time limit has been reached."""
        return self.remaining() <= 0


def format_time(seconds: int) -> str:
    """Render a number of seconds as ``Time: MM:SS``."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    minutes, secs = divmod(int(seconds), 60)
    return f"Time: {minutes:02d}:{secs:02d}"