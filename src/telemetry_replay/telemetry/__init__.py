"""Telemetry ingestion — CSV text to a chart-ready series.

Public API
----------
CsvRowParser        - CSV text → raw row dicts (rows without ``time`` dropped)
TelemetryCsvReader  - reads a session CSV from disk
TelemetryReadError  - raised when a file cannot be read as text
SeriesNormalizer    - raw rows → NormalizedSample (lat/long rescaled to 0–100)
NormalizedSample    - one row plus ``latNorm``/``longNorm``
TelemetrySeries     - immutable ordered sequence of samples
SampleIndexError    - raised by ``TelemetrySeries.at`` out of range
ZERO_SAMPLE         - fallback sample when there is no current one
GAUGE_CHANNELS      - throttle/speed/rpm gauge ranges
gauge_readings      - gauge values for one sample
"""

from telemetry_replay.telemetry.channels import GAUGE_CHANNELS, Channel, GaugeReading, gauge_readings
from telemetry_replay.telemetry.models import (
    ZERO_SAMPLE,
    NormalizedSample,
    RawRow,
    SampleIndexError,
    TelemetrySeries,
)
from telemetry_replay.telemetry.normalizer import SeriesNormalizer
from telemetry_replay.telemetry.parser import CsvRowParser
from telemetry_replay.telemetry.reader import TelemetryCsvReader, TelemetryReadError

__all__ = [
    "GAUGE_CHANNELS",
    "Channel",
    "CsvRowParser",
    "GaugeReading",
    "NormalizedSample",
    "RawRow",
    "SampleIndexError",
    "SeriesNormalizer",
    "TelemetryCsvReader",
    "TelemetryReadError",
    "TelemetrySeries",
    "ZERO_SAMPLE",
    "gauge_readings",
]
