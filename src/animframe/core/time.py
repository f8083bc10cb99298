"""Clock abstraction for real-time and simulated waiting.

The frame gate and :meth:`AnimationFrame.sleep` never call ``time.sleep``
directly; they go through a :class:`Clock` so tests can run the blocking
poll loops deterministically.

Real-time usage:
    clock = RealClock()
    start = clock.monotonic()
    clock.sleep(0.1)
    elapsed = clock.monotonic() - start  # ~0.1 seconds, not guaranteed

Simulated time usage:
    clock = SimClock(start=0.0)
    clock.sleep(5.0)  # returns immediately
    assert clock.monotonic() == 5.0
"""

from __future__ import annotations

import time
from typing import Callable, Protocol

__all__ = [
    "Clock",
    "RealClock",
    "SimClock",
]


class Clock(Protocol):
    """Protocol for clocks supporting monotonic time and blocking sleep."""

    def monotonic(self) -> float:
        """Return monotonic time in seconds (suitable for measuring durations)."""
        ...

    def sleep(self, seconds: float) -> None:
        """Block for the specified number of seconds."""
        ...


class RealClock:
    """Real-time implementation using the system monotonic clock."""

    def monotonic(self) -> float:
        """Return monotonic time from time.monotonic()."""
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        """Sleep using time.sleep()."""
        if seconds < 0:
            raise ValueError(f"Sleep duration must be non-negative: {seconds}")
        time.sleep(seconds)


class SimClock:
    """Deterministic simulated clock.

    ``sleep`` advances simulated time instead of blocking. An optional
    ``on_sleep`` hook is called after every sleep with the new time, which
    lets tests inject button clicks while a poll loop is waiting.

    Example:
        clicks = []
        clock = SimClock(on_sleep=lambda now: clicks.append(now))
        clock.sleep(0.1)
        assert clicks == [0.1]
    """

    def __init__(
        self,
        *,
        start: float = 0.0,
        on_sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._now: float = float(start)
        self.on_sleep = on_sleep
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        """Return current simulated monotonic time."""
        return self._now

    def sleep(self, seconds: float) -> None:
        """Record the sleep, advance time and run the hook.

        Raises:
            ValueError: If seconds < 0
        """
        if seconds < 0:
            raise ValueError(f"Sleep duration must be non-negative: {seconds}")
        self.sleeps.append(float(seconds))
        self._now += seconds
        if self.on_sleep is not None:
            self.on_sleep(self._now)

    @property
    def total_slept(self) -> float:
        return sum(self.sleeps)
