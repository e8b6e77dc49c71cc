"""
Module: extractor.timing

Purpose:
    Timing instrumentation for cropping runs, so slow files and phases
    show up in the log.

Key Classes:
    - TimingLog: Collects run-level and per-file timing metrics

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - contextlib (std)
    - dataclasses (std)

Used By:
    - extractor.pipeline: Per-file decode/crop phases
    - extractor.batch: Whole-directory runs
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator, List, Optional, Tuple


@dataclass
class TimingLog:
    """
    Timing metrics for cropping runs.

    Attributes:
        run_timings: Dict of phase_name -> duration_seconds
        file_timings: Dict of file name -> {phase_name -> duration_seconds}

    Example:
        >>> log = TimingLog()
        >>> log.log_run("directory", 1.92)
        >>> log.log_file("items_1.png", "crop", 0.031)
        >>> print(log.summary())
    """
    run_timings: Dict[str, float] = field(default_factory=dict)
    file_timings: Dict[str, Dict[str, float]] = field(default_factory=dict)

    def log_run(self, phase: str, duration: float) -> None:
        """Log a run-level timing metric."""
        self.run_timings[phase] = duration

    def log_file(self, file_name: str, phase: str, duration: float) -> None:
        """Log a per-file timing metric."""
        self.file_timings.setdefault(file_name, {})[phase] = duration

    def get_file_total(self, file_name: str) -> float:
        """Get total time for a file."""
        return sum(self.file_timings.get(file_name, {}).values())

    def get_slowest_files(self, n: int = 3) -> List[Tuple[str, float]]:
        """Get the N slowest files with their total time."""
        totals = [(name, sum(phases.values())) for name, phases in self.file_timings.items()]
        totals.sort(key=lambda x: x[1], reverse=True)
        return totals[:n]

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = ["", "=== Cropping Timing Summary ==="]

        if self.run_timings:
            lines.append("Run:")
            for phase, duration in sorted(self.run_timings.items()):
                lines.append(f"  {phase:25s} {duration:.3f}s")

        if self.file_timings:
            lines.append("")
            lines.append("Files:")
            for name, phases in self.file_timings.items():
                detail = ", ".join(f"{p}: {d:.3f}s" for p, d in phases.items())
                lines.append(f"  {name}: {self.get_file_total(name):.3f}s ({detail})")

        slowest = self.get_slowest_files(3)
        if len(self.file_timings) > 3 and slowest:
            lines.append("")
            lines.append("Slowest files:")
            for name, total in slowest:
                lines.append(f"  {name}: {total:.3f}s")

        lines.append("")
        return "\n".join(lines)


@contextmanager
def timed_phase(
    log: TimingLog,
    phase: str,
    file_name: Optional[str] = None,
) -> Generator[None, None, None]:
    """
    Context manager for timing a code phase.

    Args:
        log: TimingLog instance to record metrics
        phase: Name of the phase being timed
        file_name: If provided, records as a per-file metric;
                   otherwise records as a run-level metric

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "decode", file_name="items_1.png"):
        ...     image = Image.open(path)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if file_name:
            log.log_file(file_name, phase, elapsed)
        else:
            log.log_run(phase, elapsed)
