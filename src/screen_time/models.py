"""Domain models for tracked focus sessions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoopState:
    """The title currently in focus and when its session started.

    An empty ``previous_title`` means no session has been observed yet.
    ``start_time`` is a monotonic clock reading.
    """

    previous_title: str = ""
    start_time: float = 0.0

    @property
    def in_session(self) -> bool:
        return bool(self.previous_title)


@dataclass(frozen=True, slots=True)
class LogRecord:
    """A completed focus session as written to the log file."""

    window_title: str
    end_timestamp: str
    duration_secs: int

    def as_row(self) -> list[str]:
        return [self.window_title, self.end_timestamp, str(self.duration_secs)]
