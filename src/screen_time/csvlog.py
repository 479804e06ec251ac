"""Append-only CSV log of completed focus sessions."""

from __future__ import annotations

import csv
import io
import os
from pathlib import Path

from .models import LogRecord


LINE_TERMINATOR = "\n"


def _writer(stream):
    return csv.writer(stream, lineterminator=LINE_TERMINATOR)


def format_record(record: LogRecord) -> str:
    """Return the CSV line for ``record`` without the line terminator."""
    buffer = io.StringIO()
    _writer(buffer).writerow(record.as_row())
    return buffer.getvalue()[: -len(LINE_TERMINATOR)]


def append_record(path: Path, record: LogRecord) -> None:
    """Append one record to ``path``, creating the file if needed.

    The write is flushed and synced to disk before returning. No header row is
    ever written. ``OSError`` and ``csv.Error`` propagate to the caller.
    """
    with open(path, "a", encoding="utf-8", newline="") as handle:
        _writer(handle).writerow(record.as_row())
        handle.flush()
        os.fsync(handle.fileno())


def read_records(path: Path) -> list[LogRecord]:
    """Parse every record stored in ``path``."""
    records: list[LogRecord] = []
    with open(path, "r", encoding="utf-8", newline="") as handle:
        for row in csv.reader(handle):
            if not row:
                continue
            title, end_timestamp, duration = row
            records.append(
                LogRecord(
                    window_title=title,
                    end_timestamp=end_timestamp,
                    duration_secs=int(duration),
                )
            )
    return records
