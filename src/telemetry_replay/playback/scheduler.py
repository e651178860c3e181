"""Timer sources for the playback engine — real threads or a virtual clock."""

from __future__ import annotations

import heapq
import itertools
import threading
from collections.abc import Callable
from typing import Protocol

_EPSILON = 1e-9  # float slack when comparing virtual due times


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Arms one-shot timers.  ``call_later`` must not block."""

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle: ...


class ThreadingScheduler:
    """Fires callbacks on ``threading.Timer`` daemon threads (wall-clock time)."""

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay_s, callback)
        timer.daemon = True
        timer.name = "PlaybackTick"
        timer.start()
        return timer


class _ManualTimer:
    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Deterministic virtual clock; nothing fires until :meth:`advance` is called.

    Callbacks run on the caller's thread, in due-time order (ties in arming
    order).  Timers armed by a callback fire in the same ``advance`` call if
    they fall due before its end.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._heap: list[tuple[float, int, _ManualTimer]] = []
        self._seq = itertools.count()

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> _ManualTimer:
        timer = _ManualTimer(self.now + max(delay_s, 0.0), callback)
        heapq.heappush(self._heap, (timer.due, next(self._seq), timer))
        return timer

    @property
    def pending_count(self) -> int:
        """Number of armed, not-yet-cancelled timers."""
        return sum(1 for _, _, t in self._heap if not t.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward by *seconds*, firing every timer that falls due.

        Returns the number of callbacks run.
        """
        target = self.now + seconds
        fired = 0
        while self._heap and self._heap[0][0] <= target + _EPSILON:
            due, _, timer = heapq.heappop(self._heap)
            if timer.cancelled:
                continue
            self.now = due
            timer.callback()
            fired += 1
        self.now = target
        return fired
