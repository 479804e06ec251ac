"""Helpers for locating the session log."""

from __future__ import annotations

from pathlib import Path


LOG_FILENAME = "screen_time_log.csv"


def get_log_path() -> Path:
    """Return the session log path, relative to the working directory."""
    return Path(LOG_FILENAME)
