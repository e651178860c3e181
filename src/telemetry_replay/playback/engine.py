"""PlaybackEngine — VCR-style transport over a TelemetrySeries."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import replace

from telemetry_replay.playback.scheduler import Scheduler, ThreadingScheduler, TimerHandle
from telemetry_replay.playback.speeds import DEFAULT_SPEED, PlaybackSpeed
from telemetry_replay.playback.state import PlaybackState
from telemetry_replay.telemetry.models import NormalizedSample, TelemetrySeries

_logger = logging.getLogger(__name__)


class PlaybackEngine:
    """Drives ``current_index`` through a series on a timer.

    Two states, Paused and Playing.  While Playing a tick fires every
    ``speed_ms`` and advances the index by one; at the last sample the index
    stays pinned and the engine keeps Playing until :meth:`pause` (unless
    *auto_pause_at_end* is set).

    At most one timer is armed at a time.  Every arm bumps a generation
    counter and a tick whose generation is stale is ignored, so once
    :meth:`pause`, :meth:`scrub`, :meth:`load` or :meth:`close` returns no
    earlier tick can touch the state, even one whose timer thread already
    woke up.

    Parameters
    ----------
    scheduler:
        Timer source with ``call_later(delay_s, callback)``.  Defaults to a
        :class:`~telemetry_replay.playback.scheduler.ThreadingScheduler`.
    series:
        Initial series; empty when omitted.
    speed:
        Initial tick interval.
    auto_pause_at_end:
        Pause when a tick reaches the last sample instead of staying Playing.
    on_tick:
        Called with the new :class:`PlaybackState` after every applied tick.
        It runs with the engine lock held, so it never reports a tick after
        :meth:`pause` or :meth:`load` has returned.  It may call back into
        the engine but must not wait on another thread that does.
    """

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        series: TelemetrySeries | None = None,
        speed: PlaybackSpeed | int = DEFAULT_SPEED,
        auto_pause_at_end: bool = False,
        on_tick: Callable[[PlaybackState], None] | None = None,
    ) -> None:
        self._scheduler = scheduler or ThreadingScheduler()
        self._series = series if series is not None else TelemetrySeries()
        self._state = PlaybackState(speed_ms=int(PlaybackSpeed(speed)))
        self._auto_pause_at_end = auto_pause_at_end
        self._on_tick = on_tick

        self._lock = threading.RLock()
        self._timer: TimerHandle | None = None
        self._generation = 0

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def state(self) -> PlaybackState:
        with self._lock:
            return self._state

    @property
    def series(self) -> TelemetrySeries:
        with self._lock:
            return self._series

    def current_sample(self) -> NormalizedSample:
        """Sample at the current index, or ``ZERO_SAMPLE`` for an empty series."""
        with self._lock:
            return self._series.sample_or_zero(self._state.current_index)

    # ------------------------------------------------------------------
    # Transport commands
    # ------------------------------------------------------------------

    def load(self, series: TelemetrySeries) -> None:
        """Install *series*; playback resets to index 0, Paused.  Speed is kept."""
        with self._lock:
            self._disarm()
            self._series = series
            self._state = PlaybackState(speed_ms=self._state.speed_ms)
            _logger.debug("Loaded series of %d sample(s)", len(series))

    def play(self) -> None:
        """Start advancing.  No-op when already Playing or the series is empty."""
        with self._lock:
            if self._state.is_playing or not self._series:
                return
            self._state = replace(self._state, is_playing=True)
            self._arm()
            _logger.debug("Play from index %d", self._state.current_index)

    def pause(self) -> None:
        """Stop advancing.  No-op when already Paused."""
        with self._lock:
            if not self._state.is_playing:
                return
            self._disarm()
            self._state = replace(self._state, is_playing=False)
            _logger.debug("Paused at index %d", self._state.current_index)

    def toggle(self) -> None:
        """Play when Paused, pause when Playing."""
        with self._lock:
            if self._state.is_playing:
                self.pause()
            else:
                self.play()

    def scrub(self, index: int) -> None:
        """Jump to *index* (clamped into the series) and pause."""
        with self._lock:
            if not self._series:
                return
            self._disarm()
            clamped = min(max(int(index), 0), len(self._series) - 1)
            self._state = replace(self._state, current_index=clamped, is_playing=False)
            _logger.debug("Scrubbed to index %d (requested %d)", clamped, index)

    def set_speed(self, speed: PlaybackSpeed | int) -> None:
        """Change the tick interval; takes effect from the next tick.

        Raises
        ------
        ValueError
            If *speed* is not one of the :class:`PlaybackSpeed` intervals.
        """
        speed_ms = int(PlaybackSpeed(speed))
        with self._lock:
            if speed_ms == self._state.speed_ms:
                return
            self._state = replace(self._state, speed_ms=speed_ms)
            if self._state.is_playing:
                self._disarm()
                self._arm()
            _logger.debug("Speed set to %d ms", speed_ms)

    def close(self) -> None:
        """Disarm any pending tick and pause.  The engine can be reused after."""
        with self._lock:
            self._disarm()
            self._state = replace(self._state, is_playing=False)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _arm(self) -> None:
        self._generation += 1
        generation = self._generation
        self._timer = self._scheduler.call_later(
            PlaybackSpeed(self._state.speed_ms).interval_s, lambda: self._tick(generation)
        )

    def _disarm(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _tick(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or not self._state.is_playing:
                return
            self._timer = None
            last = len(self._series) - 1
            index = min(self._state.current_index + 1, last)
            self._state = replace(self._state, current_index=index)

            if self._auto_pause_at_end and index == last:
                self._state = replace(self._state, is_playing=False)
                _logger.debug("Reached end of series, paused")
            else:
                self._arm()

            if self._on_tick is not None:
                self._on_tick(self._state)
