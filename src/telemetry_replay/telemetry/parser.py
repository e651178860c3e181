"""CsvRowParser — converts delimited telemetry text into typed raw rows."""

from __future__ import annotations

import csv
import io
import logging
import math
import re

from telemetry_replay.telemetry.models import EXTRA_FIELDS_KEY, RawRow

_logger = logging.getLogger(__name__)

TIME_FIELD = "time"

_INT_RE = re.compile(r"^\s*[-+]?\d+\s*$")
_FLOAT_RE = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?\s*$")


def coerce_value(text: str) -> int | float | str | None:
    """Return *text* as a number if it is entirely numeric, else unchanged.

    Empty (or whitespace-only) text returns None, meaning "absent".
    """
    if not text.strip():
        return None
    if _INT_RE.match(text):
        try:
            return int(text)
        except ValueError:
            pass  # past the interpreter's int digit limit
    if _FLOAT_RE.match(text):
        value = float(text)
        if math.isfinite(value):
            return value
    return text


class CsvRowParser:
    """Parses CSV text with a header line into a list of raw row dicts.

    Tolerant of ragged input: fields missing from a short row are left out of
    its dict and surplus unnamed fields are kept under ``__parsed_extra``.
    Rows without a ``time`` value are dropped silently.

    Parameters
    ----------
    delimiter:
        Field separator; a comma unless the log says otherwise.
    """

    def __init__(self, delimiter: str = ",") -> None:
        self._delimiter = delimiter

    def parse(self, text: str) -> list[RawRow]:
        """Convert *text* to raw rows, in input order."""
        reader = csv.reader(io.StringIO(text.lstrip("\ufeff")), delimiter=self._delimiter)

        header: list[str] | None = None
        rows: list[RawRow] = []
        dropped = 0

        while True:
            try:
                fields = next(reader)
            except StopIteration:
                break
            except csv.Error as exc:
                _logger.debug("Skipping unreadable row at line %d: %s", reader.line_num, exc)
                dropped += 1
                continue

            if not fields or all(not f.strip() for f in fields):
                continue  # blank line
            if header is None:
                header = [name.strip() for name in fields]
                continue

            row = self._build_row(header, fields)
            if row.get(TIME_FIELD) is None:
                dropped += 1
                continue
            rows.append(row)

        if dropped:
            _logger.debug("Dropped %d row(s) without a readable %r value", dropped, TIME_FIELD)
        return rows

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _build_row(header: list[str], fields: list[str]) -> RawRow:
        row: RawRow = {}
        for name, text in zip(header, fields):
            value = coerce_value(text)
            if value is not None:
                row[name] = value
        if len(fields) > len(header):
            row[EXTRA_FIELDS_KEY] = fields[len(header):]
        return row
