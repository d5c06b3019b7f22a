"""
Live progress and diagnostics context for long batch runs.

A Timer tracks nested named phases, drives a rich progress bar for
per-item loops, and collects warnings and notes attributed to whichever
phase was open when they were reported. Everything reported also goes to
the standard logging tree, so a Timer with the progress display turned off
is still a usable diagnostics sink.

Usage:
    timer = Timer("import map")
    timer.start("convert buildings")
    timer.start_iter("create building front paths", len(buildings))
    for b in buildings:
        timer.next()
        ...
    timer.stop("convert buildings")
    timer.done()
"""

from __future__ import annotations

import time
from typing import List, Optional, Tuple

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.markup import escape
from rich.table import Table

from .logging_config import get_logger

logger = get_logger(__name__)


class Timer:
    """Phase tracker and warning sink."""

    def __init__(
        self,
        name: str,
        show_progress: bool = False,
        console: Optional[Console] = None,
    ):
        self.name = name
        self.show_progress = show_progress
        self.console = console or Console()

        self.warnings: List[Tuple[str, str]] = []
        self.notes: List[Tuple[str, str]] = []

        self._phases: List[Tuple[str, float]] = []
        self._progress: Optional[Progress] = None
        self._task: Optional[TaskID] = None
        self._remaining = 0

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.done()

    @property
    def current_phase(self) -> str:
        if self._phases:
            return self._phases[-1][0]
        return self.name

    # =========================================================================
    # PHASES
    # =========================================================================

    def start(self, phase: str) -> None:
        logger.debug("Starting %s", phase)
        self._phases.append((phase, time.perf_counter()))

    def stop(self, phase: str) -> float:
        """Close the innermost phase, which must be `phase`. Returns seconds elapsed."""
        if not self._phases or self._phases[-1][0] != phase:
            raise ValueError(
                f"Can't stop {phase!r}; the open phase is {self.current_phase!r}"
            )
        self._finish_iter()
        _, started = self._phases.pop()
        elapsed = time.perf_counter() - started
        logger.info("%s took %.2fs", phase, elapsed)
        return elapsed

    def start_iter(self, label: str, total: int) -> None:
        """Begin a loop of `total` items; call next() once per item."""
        self._finish_iter()
        self._remaining = total
        if not self.show_progress or total == 0:
            return
        if self._progress is None:
            self._progress = Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
                TimeElapsedColumn(),
                console=self.console,
                transient=True,
            )
            self._progress.start()
        self._task = self._progress.add_task(label, total=total)

    def next(self) -> None:
        if self._remaining <= 0:
            raise ValueError("next() called more times than start_iter() allowed")
        self._remaining -= 1
        if self._progress is not None and self._task is not None:
            self._progress.advance(self._task)
        if self._remaining == 0:
            self._finish_iter()

    def _finish_iter(self) -> None:
        if self._progress is not None and self._task is not None:
            self._progress.remove_task(self._task)
        self._task = None
        self._remaining = 0

    # =========================================================================
    # DIAGNOSTICS
    # =========================================================================

    def warn(self, message: str, **context) -> None:
        """
        Record a warning against the current phase.

        Keyword context (``building_id``, ``osm_way_id``, ``lot_id``) rides
        along on the log record.
        """
        phase = self.current_phase
        self.warnings.append((phase, message))
        logger.warning(message, extra={"phase": phase, **context})

    def note(self, message: str, **context) -> None:
        phase = self.current_phase
        self.notes.append((phase, message))
        logger.info(message, extra={"phase": phase, **context})

    def warnings_for(self, phase: str) -> List[str]:
        return [msg for p, msg in self.warnings if p == phase]

    def done(self) -> None:
        """Tear down the progress display, then print notes and collected warnings."""
        self._finish_iter()
        if self._progress is not None:
            self._progress.stop()
            self._progress = None

        for phase, message in self.notes:
            self.console.print(f"[dim]{escape(phase)}:[/dim] {escape(message)}")

        if not self.warnings:
            return

        table = Table(title=f"{self.name}: {len(self.warnings)} warnings")
        table.add_column("Phase", style="cyan")
        table.add_column("Warning", style="yellow")
        for phase, message in self.warnings:
            table.add_row(escape(phase), escape(message))
        self.console.print(table)
