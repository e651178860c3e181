"""ReplaySession — one loaded recording plus its playback engine."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from telemetry_replay.playback.engine import PlaybackEngine
from telemetry_replay.playback.scheduler import Scheduler
from telemetry_replay.playback.speeds import DEFAULT_SPEED, PlaybackSpeed
from telemetry_replay.playback.state import PlaybackState
from telemetry_replay.telemetry.models import NormalizedSample, TelemetrySeries
from telemetry_replay.telemetry.normalizer import SeriesNormalizer
from telemetry_replay.telemetry.parser import CsvRowParser
from telemetry_replay.telemetry.reader import TelemetryCsvReader

_logger = logging.getLogger(__name__)


class ReplaySession:
    """Owns the ingestion pipeline and the engine for one replay.

    This is the whole surface a dashboard needs: the full series, the
    current sample, the playback state and the transport commands.  Several
    sessions can coexist; nothing here is global.

    Parameters
    ----------
    scheduler:
        Timer source passed to the engine (real threads by default).
    parser, normalizer:
        Pipeline stages.  Injected for testability.
    speed:
        Initial playback speed.
    auto_pause_at_end:
        Forwarded to :class:`PlaybackEngine`.
    on_tick:
        Forwarded to :class:`PlaybackEngine`.
    """

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        parser: CsvRowParser | None = None,
        normalizer: SeriesNormalizer | None = None,
        speed: PlaybackSpeed | int = DEFAULT_SPEED,
        auto_pause_at_end: bool = False,
        on_tick: Callable[[PlaybackState], None] | None = None,
    ) -> None:
        self._parser = parser or CsvRowParser()
        self._normalizer = normalizer or SeriesNormalizer()
        self._engine = PlaybackEngine(
            scheduler,
            speed=speed,
            auto_pause_at_end=auto_pause_at_end,
            on_tick=on_tick,
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_text(self, text: str) -> TelemetrySeries:
        """Parse and normalize CSV *text*, then install it as the current series."""
        rows = self._parser.parse(text)
        series = TelemetrySeries(self._normalizer.normalize(rows))
        self._engine.load(series)
        _logger.info("Loaded session with %d sample(s)", len(series))
        return series

    def load_file(self, path: str | os.PathLike[str]) -> TelemetrySeries:
        """Read the CSV at *path* and install it.

        Raises
        ------
        TelemetryReadError
            If the file cannot be read as text.  The current series is kept.
        """
        text = TelemetryCsvReader(self._parser).read_text(path)
        return self.load_text(text)

    # ------------------------------------------------------------------
    # Presentation boundary
    # ------------------------------------------------------------------

    @property
    def engine(self) -> PlaybackEngine:
        return self._engine

    @property
    def series(self) -> TelemetrySeries:
        return self._engine.series

    @property
    def state(self) -> PlaybackState:
        return self._engine.state

    def current_sample(self) -> NormalizedSample:
        return self._engine.current_sample()

    def play(self) -> None:
        self._engine.play()

    def pause(self) -> None:
        self._engine.pause()

    def scrub(self, index: int) -> None:
        self._engine.scrub(index)

    def set_speed(self, speed: PlaybackSpeed | int) -> None:
        self._engine.set_speed(speed)

    def close(self) -> None:
        self._engine.close()
