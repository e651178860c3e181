"""Tests for the timer sources."""

from __future__ import annotations

import threading

from telemetry_replay.playback.scheduler import ManualScheduler, ThreadingScheduler


def test_manual_nothing_fires_before_advance():
    sched = ManualScheduler()
    calls: list[str] = []
    sched.call_later(0.1, lambda: calls.append("a"))
    assert calls == []
    assert sched.pending_count == 1


def test_manual_fires_when_due():
    sched = ManualScheduler()
    calls: list[str] = []
    sched.call_later(0.1, lambda: calls.append("a"))

    assert sched.advance(0.05) == 0
    assert sched.advance(0.05) == 1
    assert calls == ["a"]
    assert sched.pending_count == 0


def test_manual_fires_in_due_order():
    sched = ManualScheduler()
    calls: list[str] = []
    sched.call_later(0.3, lambda: calls.append("late"))
    sched.call_later(0.1, lambda: calls.append("early"))
    sched.call_later(0.1, lambda: calls.append("early-2"))

    sched.advance(1.0)
    assert calls == ["early", "early-2", "late"]


def test_manual_cancelled_timer_never_fires():
    sched = ManualScheduler()
    calls: list[str] = []
    handle = sched.call_later(0.1, lambda: calls.append("a"))
    handle.cancel()

    assert sched.advance(1.0) == 0
    assert calls == []
    assert sched.pending_count == 0


def test_manual_rearmed_timers_fire_within_one_advance():
    """A callback that re-arms itself at 0.1 s fires three times in 0.3 s."""
    sched = ManualScheduler()
    times: list[float] = []

    def _cb() -> None:
        times.append(sched.now)
        sched.call_later(0.1, _cb)

    sched.call_later(0.1, _cb)
    assert sched.advance(0.3) == 3
    assert len(times) == 3
    assert sched.now == 0.3


def test_threading_scheduler_fires_callback():
    fired = threading.Event()
    timer = ThreadingScheduler().call_later(0.01, fired.set)
    assert fired.wait(timeout=2.0)
    assert timer.daemon


def test_threading_scheduler_cancel():
    fired = threading.Event()
    timer = ThreadingScheduler().call_later(0.2, fired.set)
    timer.cancel()
    assert not fired.wait(timeout=0.4)
