"""TelemetryCsvReader — reads a recorded session CSV from disk."""

from __future__ import annotations

import logging
import os

from telemetry_replay.telemetry.models import RawRow, TelemetrySeries
from telemetry_replay.telemetry.parser import CsvRowParser

_logger = logging.getLogger(__name__)


class TelemetryReadError(Exception):
    """Raised when a telemetry CSV cannot be opened or decoded as text."""


class TelemetryCsvReader:
    """Reads one session log file and hands its text to :class:`CsvRowParser`.

    Parameters
    ----------
    parser:
        Row parser to use.  Injected for testability.
    encoding:
        Text encoding of the log; ``utf-8-sig`` also accepts a leading BOM.
    """

    def __init__(
        self,
        parser: CsvRowParser | None = None,
        encoding: str = "utf-8-sig",
    ) -> None:
        self._parser = parser or CsvRowParser()
        self._encoding = encoding

    def read_text(self, path: str | os.PathLike[str]) -> str:
        """Return the decoded contents of *path*.

        Raises
        ------
        TelemetryReadError
            If the file does not exist, is not a regular file, cannot be
            opened, or is not valid text in the configured encoding.
        """
        if not os.path.exists(path):
            raise TelemetryReadError(f"File not found: {os.fspath(path)!r}")
        if not os.path.isfile(path):
            raise TelemetryReadError(f"Not a file: {os.fspath(path)!r}")

        try:
            with open(path, encoding=self._encoding, newline="") as fh:
                return fh.read()
        except UnicodeDecodeError as exc:
            raise TelemetryReadError(
                f"Could not decode {os.fspath(path)!r} as {self._encoding} text: {exc}"
            ) from exc
        except OSError as exc:
            raise TelemetryReadError(f"Could not open {os.fspath(path)!r}: {exc}") from exc

    def read(self, path: str | os.PathLike[str]) -> list[RawRow]:
        """Return the raw rows of the CSV at *path*."""
        rows = self._parser.parse(self.read_text(path))
        _logger.debug("Read %d row(s) from %s", len(rows), os.fspath(path))
        return rows

    def read_series(self, path: str | os.PathLike[str]) -> TelemetrySeries:
        """Read and normalize the CSV at *path* into a :class:`TelemetrySeries`."""
        return TelemetrySeries.from_rows(self.read(path))
