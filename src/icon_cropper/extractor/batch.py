"""
Module: extractor.batch

Purpose:
    Runs the per-image pipeline over every file in a directory. A file
    that fails (not an image, output directory not writable) is reported
    and the batch moves on to the next entry.

Key Functions:
    - process_directory(): Crop every image in a directory

Key Classes:
    - BatchResult: Outcomes of processed files plus failed files

Dependencies:
    - extractor.pipeline: process_image

Used By:
    - cli: Directory mode
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from icon_cropper.core.errors import CropperError
from icon_cropper.core.models import GridSpec

from .config import CropConfig
from .pipeline import ProcessingOutcome, process_image
from .timing import TimingLog, timed_phase

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """
    Result of cropping a directory.

    Attributes:
        directory: Directory that was scanned.
        outcomes: One ProcessingOutcome per file that was processed.
        failures: (path, message) for each file that failed as a whole.
        elapsed: Wall time in seconds.
    """
    directory: Path
    outcomes: List[ProcessingOutcome] = field(default_factory=list)
    failures: List[Tuple[Path, str]] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def written(self) -> int:
        """Total cells written across all files."""
        return sum(o.written for o in self.outcomes)

    @property
    def skipped(self) -> int:
        """Total cells skipped across all files."""
        return sum(o.skipped for o in self.outcomes)

    @property
    def cell_errors(self) -> List[str]:
        """Every per-cell error across all files."""
        return [msg for o in self.outcomes for msg in o.errors]


def process_directory(
    directory: Path,
    spec: GridSpec,
    config: Optional[CropConfig] = None,
    *,
    timing_log: Optional[TimingLog] = None,
) -> BatchResult:
    """
    Crop every image in a directory.

    Entries are processed in name order. Subdirectories are ignored.
    Per-file errors never stop the batch.

    Args:
        directory: Directory of source images.
        spec: Grid description shared by every file.
        config: Run configuration (default CropConfig()).
        timing_log: Optional log that receives per-file and run timings.

    Returns:
        BatchResult listing processed and failed files.

    Raises:
        FileNotFoundError: If directory doesn't exist.
        NotADirectoryError: If directory is a file.
    """
    config = config or CropConfig()
    timing_log = timing_log if timing_log is not None else TimingLog()

    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    logger.info(f"Start directory processing: {directory}")
    result = BatchResult(directory=directory)

    with timed_phase(timing_log, "directory"):
        for entry in sorted(directory.iterdir()):
            if entry.is_dir():
                logger.debug(f"Skipping subdirectory {entry}")
                continue

            try:
                outcome = process_image(entry, spec, config, timing_log=timing_log)
            except CropperError as e:
                logger.warning(f"Failed to process {entry}: {e}")
                result.failures.append((entry, str(e)))
                continue

            result.outcomes.append(outcome)

    result.elapsed = timing_log.run_timings.get("directory", 0.0)
    logger.info(
        f"Directory process complete: {directory} "
        f"({len(result.outcomes)} files, {len(result.failures)} failed, "
        f"{result.written} cells written, {result.elapsed:.3f}s)"
    )
    logger.info(timing_log.summary())
    return result
