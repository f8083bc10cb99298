"""Play / single-step gate for the frame cycle.

The gate holds two flags. ``playing`` lets the student program run
through ``paint_frame`` calls without stopping; ``step_pending`` marks a
single-step request, which releases exactly one waiting frame and then
drops back to paused.

Clicks arrive from the input pump between polls; the waiting side never
touches the flags except through :meth:`FrameGate.consume`.
"""

from __future__ import annotations

import logging
from typing import Callable

from animframe.core.time import Clock

logger = logging.getLogger(__name__)

DEFAULT_POLL_S = 0.1


class FrameGate:
    """Two-flag gate between the transport buttons and ``paint_frame``."""

    def __init__(self, *, playing: bool = False) -> None:
        self.playing: bool = bool(playing)
        self.step_pending: bool = False

    # Button side ---------------------------------------------------------
    def toggle_play(self) -> None:
        """Flip between playing and paused.

        Pressed during a pending step, play takes over: the step is dropped
        and the gate stays released.
        """
        if self.step_pending:
            self.step_pending = False
            self.playing = True
        else:
            self.playing = not self.playing
        logger.debug("gate: %s", "play" if self.playing else "pause")

    def request_step(self) -> bool:
        """Release the next frame only. Returns False if ignored (playing)."""
        if self.playing:
            return False
        self.playing = True
        self.step_pending = True
        logger.debug("gate: step")
        return True

    @property
    def play_mode(self) -> bool:
        """True while free-running (released and not just stepping)."""
        return self.playing and not self.step_pending

    @property
    def step_enabled(self) -> bool:
        """Whether the frame-advance control is shown as enabled."""
        return not self.play_mode

    # Waiting side --------------------------------------------------------
    @property
    def released(self) -> bool:
        return self.playing

    def consume(self) -> None:
        """Finish a release; a pending step returns the gate to paused."""
        if self.step_pending:
            self.playing = False
            self.step_pending = False

    def wait(
        self,
        pump: Callable[[], None],
        clock: Clock,
        poll_s: float = DEFAULT_POLL_S,
    ) -> int:
        """Block until released, pumping input between polls.

        Returns the number of polls spent waiting (0 when already playing).
        """
        if poll_s <= 0:
            raise ValueError(f"poll interval must be > 0: {poll_s}")
        polls = 0
        while True:
            pump()
            if self.released:
                break
            clock.sleep(poll_s)
            polls += 1
        self.consume()
        return polls
