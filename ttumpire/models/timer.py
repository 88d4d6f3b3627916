"""
Timer model for the TT Umpire application.

A Timer is either a stopwatch (counts up from zero) or a countdown (counts
down from a fixed duration and keeps going into overtime). It never reads a
clock itself: every operation takes the current clock reading ``now``.

The clock is expected to be monotonic. If a reading earlier than
``running_since`` is supplied, ``elapsed`` goes negative for that query; the
value is reported as-is rather than clamped.
"""
from dataclasses import dataclass
from typing import Optional

from ..utils import fmt_clock, round_half_away


@dataclass
class Timer:
    """
    Pausable stopwatch or countdown.

    Attributes:
        accumulated: Seconds accumulated over finished run segments
        running_since: Clock reading when the current run started, None when paused
        target_duration: Countdown target in seconds, None for a stopwatch
    """
    accumulated: float = 0.0
    running_since: Optional[float] = None
    target_duration: Optional[float] = None

    def __setattr__(self, name, value):
        # A countdown target is fixed once set
        if name == "target_duration" and "target_duration" in self.__dict__:
            raise AttributeError("target_duration is fixed once the timer is created")
        super().__setattr__(name, value)

    @classmethod
    def new_stopwatch(cls, running: bool, now: float) -> "Timer":
        """Create a stopwatch, running from ``now`` or paused at zero."""
        return cls(running_since=now if running else None)

    @classmethod
    def new_countdown(cls, duration_seconds: float, running: bool, now: float) -> "Timer":
        """Create a countdown of ``duration_seconds``, running from ``now`` or paused."""
        return cls(
            running_since=now if running else None,
            target_duration=float(duration_seconds),
        )

    @property
    def is_running(self) -> bool:
        return self.running_since is not None

    @property
    def is_countdown(self) -> bool:
        return self.target_duration is not None

    # ------------------------------------------------------------------
    # Run control
    # ------------------------------------------------------------------
    def toggle(self, now: float) -> None:
        """Switch between running and paused at clock reading ``now``."""
        if self.running_since is not None:
            self.accumulated += now - self.running_since
            self.running_since = None
        else:
            self.running_since = now

    def pause(self, now: float) -> None:
        if self.is_running:
            self.toggle(now)

    def resume(self, now: float) -> None:
        if not self.is_running:
            self.toggle(now)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def elapsed(self, now: float) -> float:
        """Seconds counted so far, including the current run segment."""
        if self.running_since is None:
            return self.accumulated
        return self.accumulated + (now - self.running_since)

    def remaining_or_elapsed(self, now: float) -> float:
        """
        Value shown on the clock before formatting.

        Stopwatches report elapsed time. Countdowns report the time left,
        which turns negative once the target is exceeded.
        """
        if self.target_duration is None:
            return self.elapsed(now)
        return self.target_duration - self.elapsed(now)

    def display_seconds(self, now: float) -> int:
        # abs() makes an exceeded countdown count up again from zero
        return abs(round_half_away(self.remaining_or_elapsed(now)))

    def display(self, now: float) -> str:
        """Clock text as M:SS."""
        return fmt_clock(self.display_seconds(now))

    def expired(self, now: float) -> bool:
        """True once a countdown has run past its target. Always False for a stopwatch."""
        if self.target_duration is None:
            return False
        return self.elapsed(now) > self.target_duration
