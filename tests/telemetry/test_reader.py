"""Tests for TelemetryCsvReader."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from telemetry_replay.telemetry.models import TelemetrySeries
from telemetry_replay.telemetry.reader import TelemetryCsvReader, TelemetryReadError

CSV = "time,throttle,lat,long\n0,10,1,1\n1,20,2,3\n"


def test_read_returns_rows(tmp_path):
    path = tmp_path / "session.csv"
    path.write_text(CSV, encoding="utf-8")

    rows = TelemetryCsvReader().read(path)
    assert rows == [
        {"time": 0, "throttle": 10, "lat": 1, "long": 1},
        {"time": 1, "throttle": 20, "lat": 2, "long": 3},
    ]


def test_read_accepts_str_path(tmp_path):
    path = tmp_path / "session.csv"
    path.write_text(CSV, encoding="utf-8")
    assert len(TelemetryCsvReader().read(str(path))) == 2


def test_read_accepts_bom(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_bytes(b"\xef\xbb\xbf" + CSV.encode("utf-8"))
    rows = TelemetryCsvReader().read(path)
    assert rows[0]["time"] == 0


def test_read_series(tmp_path):
    path = tmp_path / "session.csv"
    path.write_text(CSV, encoding="utf-8")

    series = TelemetryCsvReader().read_series(path)
    assert isinstance(series, TelemetrySeries)
    assert series.column("latNorm") == [0.0, 100.0]


def test_read_uses_injected_parser(tmp_path):
    path = tmp_path / "session.csv"
    path.write_text(CSV, encoding="utf-8")
    parser = MagicMock()
    parser.parse.return_value = [{"time": 9}]

    assert TelemetryCsvReader(parser=parser).read(path) == [{"time": 9}]
    parser.parse.assert_called_once_with(CSV)


def test_read_nonexistent_file_raises(tmp_path):
    with pytest.raises(TelemetryReadError, match="not found"):
        TelemetryCsvReader().read(tmp_path / "missing.csv")


def test_read_directory_raises(tmp_path):
    with pytest.raises(TelemetryReadError, match="Not a file"):
        TelemetryCsvReader().read(tmp_path)


def test_read_binary_file_raises(tmp_path):
    path = tmp_path / "garbage.csv"
    path.write_bytes(b"\xff\xfe\x00\x81\x8d")
    with pytest.raises(TelemetryReadError, match="decode") as info:
        TelemetryCsvReader().read(path)
    assert isinstance(info.value.__cause__, UnicodeDecodeError)


def test_read_empty_file_gives_no_rows(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    assert TelemetryCsvReader().read(path) == []
