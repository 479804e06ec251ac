"""Session logger loop: samples the focused window and records sessions."""

from __future__ import annotations

import csv
import logging
import threading
import time
from datetime import datetime
from typing import Callable, Optional

from .config import TIMESTAMP_FMT, TrackerSettings
from .csvlog import append_record
from .models import LogRecord, LoopState
from .probe import X11TitleProbe

logger = logging.getLogger(__name__)


def process_tick(
    state: LoopState, title: str, now: float, timestamp: str
) -> tuple[LoopState, Optional[LogRecord]]:
    """Advance the loop by one sample.

    ``now`` is a monotonic reading and ``timestamp`` the formatted wall-clock
    time of this sample. Returns the next state and the record for the session
    that just ended, if any. The first observed title never yields a record.
    """
    if title == state.previous_title:
        return state, None

    record = None
    if state.in_session:
        record = LogRecord(
            window_title=state.previous_title,
            end_timestamp=timestamp,
            duration_secs=max(0, int(now - state.start_time)),
        )
    return LoopState(previous_title=title, start_time=now), record


class SessionLogger:
    """Samples the focused window title at a fixed interval and appends
    completed sessions to the CSV log."""

    def __init__(
        self,
        settings: TrackerSettings,
        probe: Optional[Callable[[], Optional[str]]] = None,
        monotonic: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.settings = settings
        self._probe = probe if probe is not None else X11TitleProbe()
        self._monotonic = monotonic
        self._wall_clock = wall_clock
        self._state = LoopState(start_time=monotonic())

    @property
    def state(self) -> LoopState:
        return self._state

    def run_forever(self) -> None:
        try:
            self._run_loop(threading.Event())
        except KeyboardInterrupt:
            logger.info(
                "Tracker interrupted; open session for %r is not recorded.",
                self._state.previous_title,
            )

    def run_until_stopped(self, stop_event: threading.Event) -> None:
        """Run the loop until the provided event is set."""
        self._run_loop(stop_event)

    def sample_once(self) -> Optional[LogRecord]:
        title = self._probe() or self.settings.unknown_title
        now = self._monotonic()
        timestamp = self._wall_clock().strftime(TIMESTAMP_FMT)
        self._state, record = process_tick(self._state, title, now, timestamp)
        if record is None:
            return None

        logger.debug(
            "Session ended: title=%r duration=%ss; now focused: %r",
            record.window_title,
            record.duration_secs,
            title,
        )
        try:
            append_record(self.settings.log_path, record)
        except (OSError, csv.Error) as exc:
            logger.error(
                "Error writing to %s, dropping session for %r: %s",
                self.settings.log_path,
                record.window_title,
                exc,
            )
        return record

    def _run_loop(self, stop_event: threading.Event) -> None:
        interval = self.settings.sample_interval.total_seconds()
        logger.info(
            "Starting tracker; writing to %s every %.1fs",
            self.settings.log_path,
            interval,
        )
        while not stop_event.is_set():
            self.sample_once()
            stop_event.wait(interval)
