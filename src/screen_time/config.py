"""Configuration models and helpers for the screen time tracker."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

from .paths import get_log_path


UNKNOWN_TITLE = "Unknown"
TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"


@dataclass(slots=True)
class TrackerSettings:
    """Runtime configuration for the session logger."""

    sample_interval: timedelta = timedelta(seconds=1)
    log_path: Path = field(default_factory=get_log_path)
    unknown_title: str = UNKNOWN_TITLE

    @classmethod
    def from_options(
        cls,
        sample_seconds: float = 1.0,
        log_path: Path | None = None,
    ) -> "TrackerSettings":
        return cls(
            sample_interval=timedelta(seconds=sample_seconds),
            log_path=Path(log_path) if log_path is not None else get_log_path(),
        )
