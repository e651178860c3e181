"""Telemetry data models — normalized samples and the immutable series."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

RawRow = dict[str, Any]
"""One parsed CSV line: column name → int, float or str. Absent fields are missing keys."""

EXTRA_FIELDS_KEY = "__parsed_extra"
"""Key under which unnamed trailing fields of an over-long row are kept."""


def numeric_or_zero(value: object) -> float:
    """Return *value* as a finite float; missing, text, bool or overflowing values read as 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    try:
        value = float(value)
    except OverflowError:
        return 0.0
    return value if math.isfinite(value) else 0.0


class SampleIndexError(IndexError):
    """Raised by :meth:`TelemetrySeries.at` for an index outside ``[0, length-1]``."""


@dataclass(frozen=True)
class NormalizedSample:
    """One telemetry row plus its position in the 0–100 display space.

    ``fields`` keeps every original column untouched; ``lat_norm`` and
    ``long_norm`` are derived from the session-wide lat/long range.
    """

    fields: RawRow = field(repr=False)
    """Original column values as parsed."""

    lat_norm: float = 0.0
    """Latitude rescaled to [0.0, 100.0]."""

    long_norm: float = 0.0
    """Longitude rescaled to [0.0, 100.0]."""

    def __getitem__(self, key: str) -> Any:
        if key == "latNorm":
            return self.lat_norm
        if key == "longNorm":
            return self.long_norm
        return self.fields[key]

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    @property
    def time(self) -> Any:
        return self.fields.get("time", 0)

    def to_dict(self) -> dict[str, Any]:
        """Return all original fields with ``latNorm``/``longNorm`` appended."""
        d = dict(self.fields)
        d["latNorm"] = self.lat_norm
        d["longNorm"] = self.long_norm
        return d


ZERO_SAMPLE = NormalizedSample(
    fields={"time": 0, "throttle": 0, "speed": 0, "rpm": 0},
    lat_norm=0.0,
    long_norm=0.0,
)
"""Stand-in for "no current sample" (empty series or out-of-range index)."""


class TelemetrySeries:
    """Read-only, ordered container of :class:`NormalizedSample`.

    Input order is playback order; samples are never re-sorted by ``time``.
    A new recording means a new series — there are no mutation operations.
    """

    def __init__(self, samples: Iterable[NormalizedSample] = ()) -> None:
        self._samples: tuple[NormalizedSample, ...] = tuple(samples)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[RawRow]) -> TelemetrySeries:
        """Normalize parsed *rows* into a series."""
        from telemetry_replay.telemetry.normalizer import SeriesNormalizer

        return cls(SeriesNormalizer().normalize(list(rows)))

    @classmethod
    def from_text(cls, text: str) -> TelemetrySeries:
        """Parse and normalize CSV *text* into a series."""
        from telemetry_replay.telemetry.parser import CsvRowParser

        return cls.from_rows(CsvRowParser().parse(text))

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def length(self) -> int:
        return len(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[NormalizedSample]:
        return iter(self._samples)

    def __bool__(self) -> bool:
        return bool(self._samples)

    def at(self, index: int) -> NormalizedSample:
        """Return the sample at *index*.

        Raises
        ------
        SampleIndexError
            If *index* is not in ``[0, length-1]``.  Negative indices are not
            wrapped around.
        """
        if not 0 <= index < len(self._samples):
            raise SampleIndexError(
                f"Sample index {index} out of range for series of length {len(self._samples)}"
            )
        return self._samples[index]

    def sample_or_zero(self, index: int) -> NormalizedSample:
        """Return ``at(index)``, or :data:`ZERO_SAMPLE` when there is no such sample."""
        try:
            return self.at(index)
        except SampleIndexError:
            return ZERO_SAMPLE

    def all(self) -> tuple[NormalizedSample, ...]:
        return self._samples

    def columns(self) -> list[str]:
        """Column names in first-seen order, followed by the derived columns."""
        seen: dict[str, None] = {}
        for sample in self._samples:
            for key in sample.fields:
                if key != EXTRA_FIELDS_KEY:
                    seen.setdefault(key, None)
        return [*seen, "latNorm", "longNorm"]

    def column(self, name: str) -> list[Any]:
        """Values of one channel across the series (None where a row lacks it)."""
        return [sample.get(name) for sample in self._samples]

    def track_points(self) -> list[tuple[float, float]]:
        """``(long_norm, lat_norm)`` for every sample — the full GPS path."""
        return [(s.long_norm, s.lat_norm) for s in self._samples]

    def __repr__(self) -> str:
        return f"TelemetrySeries(length={len(self._samples)})"
