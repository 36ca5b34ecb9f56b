"""
Deferred scheduling for the reveal delay.

The session only ever needs "run this after D milliseconds". Hosts decide
how that happens: tests fire callbacks on demand, Streamlit checks the due
time on each rerun.
"""

from __future__ import annotations

import time
from typing import Callable, Optional, Protocol


Callback = Callable[[], None]


class Scheduler(Protocol):
    def schedule(self, delay_ms: int, callback: Callback) -> None:
        ...


class ImmediateScheduler:
    """Runs callbacks right away, ignoring the delay."""

    def schedule(self, delay_ms: int, callback: Callback) -> None:
        callback()


class DeferredScheduler:
    """
    Holds a single pending callback until its due time.

    Scheduling again replaces the pending callback.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._callback: Optional[Callback] = None
        self._due_at: Optional[float] = None

    def schedule(self, delay_ms: int, callback: Callback) -> None:
        self._callback = callback
        self._due_at = self.clock() + delay_ms / 1000.0

    @property
    def pending(self) -> bool:
        return self._callback is not None

    def due_in(self) -> Optional[float]:
        """Seconds until the pending callback is due (0 if overdue)."""
        if self._due_at is None:
            return None
        return max(0.0, self._due_at - self.clock())

    def run_due(self) -> bool:
        """
        Run the pending callback if its time has come.

        Returns:
            True if a callback ran
        """
        if self._callback is None or self.clock() < self._due_at:
            return False
        return self.flush()

    def flush(self) -> bool:
        """Run the pending callback now, regardless of due time."""
        callback = self._callback
        if callback is None:
            return False
        self._callback = None
        self._due_at = None
        callback()
        return True

    def cancel(self) -> None:
        self._callback = None
        self._due_at = None
