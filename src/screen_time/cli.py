"""Command-line interface for the screen time tracker."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .config import TrackerSettings

app = typer.Typer(help="Log how long each focused window keeps the focus.")


@app.command()
def track(
    log_path: Optional[Path] = typer.Option(
        None,
        "--log",
        path_type=Path,
        help="CSV file that receives completed sessions.",
    ),
    sample_seconds: float = typer.Option(
        1.0,
        "--interval",
        min=0.1,
        help="Sampling interval in seconds.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
) -> None:
    """Sample the focused window until interrupted."""
    from .tracker import SessionLogger

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    settings = TrackerSettings.from_options(
        sample_seconds=sample_seconds, log_path=log_path
    )
    SessionLogger(settings=settings).run_forever()
