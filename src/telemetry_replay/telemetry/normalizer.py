"""SeriesNormalizer — rescales lat/long into the 0–100 display space."""

from __future__ import annotations

import math
from collections.abc import Sequence

from telemetry_replay.telemetry.models import NormalizedSample, RawRow, numeric_or_zero

_SCALE = 100.0


def _rescale(value: float, lo: float, hi: float) -> float:
    span = (hi - lo) or 1.0  # constant channel → every row maps to 0
    scaled = (value - lo) / span * _SCALE
    if not math.isfinite(scaled):
        return 0.0
    return min(max(scaled, 0.0), _SCALE)


class SeriesNormalizer:
    """Appends ``lat_norm``/``long_norm`` to each row.

    The range of each coordinate is taken over the whole session with a
    missing value counted as 0, so a log where only some rows carry
    ``lat`` has its range stretched down to 0.
    """

    def __init__(self, lat_key: str = "lat", long_key: str = "long") -> None:
        self._lat_key = lat_key
        self._long_key = long_key

    def normalize(self, rows: Sequence[RawRow]) -> list[NormalizedSample]:
        """Return one :class:`NormalizedSample` per row, in input order."""
        if not rows:
            return []

        lats = [numeric_or_zero(r.get(self._lat_key)) for r in rows]
        longs = [numeric_or_zero(r.get(self._long_key)) for r in rows]
        lat_min, lat_max = min(lats), max(lats)
        long_min, long_max = min(longs), max(longs)

        return [
            NormalizedSample(
                fields=dict(row),
                lat_norm=_rescale(lat, lat_min, lat_max),
                long_norm=_rescale(lon, long_min, long_max),
            )
            for row, lat, lon in zip(rows, lats, longs)
        ]
