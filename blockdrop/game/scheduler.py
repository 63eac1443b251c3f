"""
Drop scheduler: the single timer that makes pieces fall.

The scheduler runs on a virtual millisecond clock that only moves when the
owner calls advance(). A pygame loop feeds it the frame time; tests feed it
exact numbers. Every wake-up reschedules itself before returning, and the
pending wake-up is represented by a TimerHandle that can be cancelled so a
stale timer never fires after a restart.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class TimerHandle:
    """A pending wake-up at `deadline` on the scheduler's clock."""

    def __init__(self, deadline: float, callback: Callable[[], None]) -> None:
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "pending"
        return f"<TimerHandle deadline={self.deadline:.1f} {state}>"


class DropScheduler:
    """Repeating timer that calls `on_tick` every `interval()` milliseconds.

    Attributes:
        now: Current time on the virtual clock, in milliseconds.
    """

    def __init__(self, on_tick: Callable[[], None], interval: Callable[[], float]) -> None:
        """Create a stopped scheduler.

        Args:
            on_tick: Called on every wake-up. It decides for itself whether
                the wake-up does anything (e.g. nothing while paused).
            interval: Returns the delay before the next wake-up. Read again
                after every wake-up, so speed changes apply immediately.
        """
        self._on_tick = on_tick
        self._interval = interval
        self._handle: TimerHandle | None = None
        self.now: float = 0.0

    @property
    def running(self) -> bool:
        return self._handle is not None and not self._handle.cancelled

    @property
    def handle(self) -> TimerHandle | None:
        return self._handle

    def start(self) -> TimerHandle:
        """Schedule the first wake-up, replacing any pending one."""
        self.cancel()
        return self._schedule(self.now)

    def cancel(self) -> None:
        """Invalidate the pending wake-up, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def advance(self, elapsed_ms: float) -> int:
        """Move the clock forward and fire every wake-up that falls due.

        Returns:
            The number of wake-ups fired.

        Raises:
            ValueError: If `elapsed_ms` is negative.
        """
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time must be >= 0, got {elapsed_ms}")
        target = self.now + elapsed_ms
        fired = 0
        while self.running and self._handle.deadline <= target:
            handle = self._handle
            self.now = handle.deadline
            handle.callback()
            fired += 1
        self.now = target
        return fired

    def _schedule(self, origin: float) -> TimerHandle:
        delay = self._interval()
        assert delay > 0, f"drop interval must be positive, got {delay}"
        handle = TimerHandle(origin + delay, lambda: self._fire(handle))
        self._handle = handle
        return handle

    def _fire(self, handle: TimerHandle) -> None:
        if handle.cancelled or handle is not self._handle:
            return
        self._on_tick()
        # A callback that cancelled or restarted the timer owns the next wake-up.
        if self._handle is handle:
            self._schedule(handle.deadline)
