"""
Module: extractor.pipeline

Purpose:
    Per-image orchestrator. Decodes one source image, creates its output
    directory, then fans the grid cells out over a thread pool where each
    worker checks bounds, crops and writes its own cell.

Key Functions:
    - process_image(): Crop every cell of one image file
    - crop_image(): Crop every cell of an already decoded image

Key Classes:
    - CellResult: Outcome of a single cell
    - ProcessingOutcome: Aggregated per-file result

Dependencies:
    - PIL: Image decoding
    - concurrent.futures: Thread pool fan-out
    - icon_cropper.extractor.slicing: Bounds, cropping and writing

Used By:
    - extractor.batch: Once per directory entry
    - cli: Single-file mode
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from PIL import Image

from icon_cropper.core.errors import CropperError, DecodeError, OutputDirectoryError
from icon_cropper.core.models import CellIndex, GridSpec

from .config import CropConfig
from .slicing import CellSkip, cell_path, check_cell, extract_cell, write_cell
from .timing import TimingLog, timed_phase

logger = logging.getLogger(__name__)

CELL_WRITTEN = "written"
CELL_SKIPPED = "skipped"
CELL_FAILED = "failed"

# Decoded modes the PNG encoder rejects; these are converted to RGB on load
_NON_PNG_MODES = frozenset({"CMYK", "YCbCr", "LAB", "HSV"})


@dataclass(frozen=True)
class CellResult:
    """
    Outcome of processing one grid cell.

    Attributes:
        index: Grid position.
        ordinal: Output ordinal (row * columns + column).
        status: "written", "skipped" or "failed".
        path: Written file, if any.
        message: Skip reason or error text.
    """
    index: CellIndex
    ordinal: int
    status: str
    path: Optional[Path] = None
    message: str = ""


@dataclass
class ProcessingOutcome:
    """
    Result of cropping one source image.

    Attributes:
        source_path: Image that was processed.
        output_dir: Directory the cells were written to.
        written: Number of cells written.
        skipped: Number of cells outside the usable image area.
        errors: One message per failed cell, with path and cell index.
        written_ordinals: Ordinals of the written cells, ascending.
        elapsed: Wall time in seconds.
    """
    source_path: Path
    output_dir: Path
    written: int = 0
    skipped: int = 0
    errors: List[str] = field(default_factory=list)
    written_ordinals: List[int] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        """True if no cell failed."""
        return not self.errors

    def record(self, result: CellResult) -> None:
        """Fold one cell result into the totals."""
        if result.status == CELL_WRITTEN:
            self.written += 1
            self.written_ordinals.append(result.ordinal)
        elif result.status == CELL_SKIPPED:
            self.skipped += 1
        else:
            self.errors.append(result.message)


def process_image(
    image_path: Path,
    spec: GridSpec,
    config: Optional[CropConfig] = None,
    *,
    timing_log: Optional[TimingLog] = None,
) -> ProcessingOutcome:
    """
    Crop every grid cell of one image file.

    Cells are written to ``<config.output_root>/<image stem>/<ordinal>.png``.

    Args:
        image_path: Source image.
        spec: Grid description.
        config: Run configuration (default CropConfig()).
        timing_log: Optional log that receives decode/crop timings.

    Returns:
        ProcessingOutcome with per-cell totals and errors.

    Raises:
        DecodeError: If the image can't be opened or decoded.
        OutputDirectoryError: If the output directory can't be created.

    Example:
        >>> outcome = process_image(Path("items_1.png"), GridSpec((8, 18), 18))
        >>> outcome.written
        45
    """
    config = config or CropConfig()
    timing_log = timing_log if timing_log is not None else TimingLog()
    file_name = image_path.name

    logger.info(f"Start processing: {image_path}")

    with timed_phase(timing_log, "decode", file_name=file_name):
        image = _open_image(image_path)

    try:
        output_dir = config.output_dir_for(image_path)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(
                f"Failed to create output directory {output_dir} for {image_path}: {e}",
                path=output_dir,
            ) from e

        with timed_phase(timing_log, "crop", file_name=file_name):
            outcome = crop_image(
                image,
                spec,
                output_dir,
                config=config,
                source_path=image_path,
            )
    finally:
        image.close()

    outcome.elapsed = timing_log.get_file_total(file_name)
    logger.info(
        f"Process complete: {image_path} "
        f"({outcome.written} written, {outcome.skipped} skipped, "
        f"{len(outcome.errors)} failed, {outcome.elapsed:.3f}s)"
    )
    return outcome


def crop_image(
    image: Image.Image,
    spec: GridSpec,
    output_dir: Path,
    *,
    config: Optional[CropConfig] = None,
    source_path: Optional[Path] = None,
) -> ProcessingOutcome:
    """
    Crop every grid cell of a decoded image on a thread pool.

    The image is only read by the workers, so it is shared without
    locking. Output names come from the grid position, never from the
    order in which workers finish.

    Args:
        image: Fully loaded source image.
        spec: Grid description.
        output_dir: Directory for the cell files (created if missing).
        config: Run configuration (default CropConfig()).
        source_path: Original file, used for reporting.

    Returns:
        ProcessingOutcome. A failed cell is recorded in ``errors`` and
        does not stop its siblings.
    """
    config = config or CropConfig()
    source_path = source_path or Path(getattr(image, "filename", "") or "<image>")
    outcome = ProcessingOutcome(source_path=source_path, output_dir=output_dir)
    width, height = image.size

    with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
        futures: List[tuple[CellIndex, Future]] = [
            (
                index,
                pool.submit(
                    _process_cell,
                    image, spec, index, width, height, output_dir, config, source_path,
                ),
            )
            for index in spec.indices()
        ]

        for index, future in futures:
            try:
                result = future.result()
            except Exception as e:
                ordinal = spec.ordinal(index)
                msg = f"Cell {index} (#{ordinal}) of {source_path} failed: {e}"
                logger.error(msg)
                result = CellResult(index=index, ordinal=ordinal, status=CELL_FAILED, message=msg)
            outcome.record(result)

    outcome.written_ordinals.sort()
    return outcome


def _process_cell(
    image: Image.Image,
    spec: GridSpec,
    index: CellIndex,
    width: int,
    height: int,
    output_dir: Path,
    config: CropConfig,
    source_path: Path,
) -> CellResult:
    """Worker body: check bounds, crop and write one cell."""
    check = check_cell(spec, index, width, height)

    if isinstance(check, CellSkip):
        logger.warning(f"Skipped cell #{check.ordinal} of {source_path}: {check.reason}")
        return CellResult(
            index=index,
            ordinal=check.ordinal,
            status=CELL_SKIPPED,
            message=check.reason,
        )

    try:
        cell = extract_cell(image, check.bounds)
        path = write_cell(
            cell,
            cell_path(output_dir, check.ordinal),
            compress_level=config.compress_level,
            ordinal=check.ordinal,
        )
    except CropperError as e:
        msg = f"Cell {index} (#{check.ordinal}) of {source_path} failed: {e}"
        logger.error(msg)
        return CellResult(index=index, ordinal=check.ordinal, status=CELL_FAILED, message=msg)

    return CellResult(index=index, ordinal=check.ordinal, status=CELL_WRITTEN, path=path)


def _open_image(image_path: Path) -> Image.Image:
    """
    Open and fully decode an image so workers never touch the file.

    Modes PNG can't store (CMYK JPEGs, for example) come back as RGB.
    """
    try:
        image = Image.open(image_path)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Failed to open image {image_path}: {e}", path=image_path) from e

    try:
        image.load()
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        image.close()
        raise DecodeError(f"Failed to decode image {image_path}: {e}", path=image_path) from e

    if image.mode in _NON_PNG_MODES:
        converted = image.convert("RGB")
        image.close()
        image = converted

    return image
