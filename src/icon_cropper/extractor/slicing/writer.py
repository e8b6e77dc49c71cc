"""
Module: extractor.slicing.writer

Purpose:
    Writes cropped cells to disk as PNG files. Writes are atomic (temp
    file then rename), so an interrupted run never leaves a truncated
    cell behind.

Key Functions:
    - write_cell(): Persist one cell image
    - cell_path(): Destination path for an ordinal

Dependencies:
    - PIL.Image: Image saving

Used By:
    - extractor.pipeline: Final step of each cell task
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Optional

from PIL import Image

from icon_cropper.core.errors import CellWriteError

logger = logging.getLogger(__name__)


def cell_path(output_dir: Path, ordinal: int) -> Path:
    """Destination for a cell: <output_dir>/<ordinal>.png."""
    return output_dir / f"{ordinal}.png"


def write_cell(
    image: Image.Image,
    path: Path,
    *,
    compress_level: int = 1,
    ordinal: Optional[int] = None,
) -> Path:
    """
    Write a cell image atomically.

    Creates any missing parent directories first.

    Args:
        image: Cropped cell image.
        path: Target .png path.
        compress_level: PNG compression (1=fast, 9=small).
        ordinal: Cell ordinal, attached to errors for reporting.

    Returns:
        The written path.

    Raises:
        CellWriteError: If the directory or file can't be written.
    """
    try:
        _atomic_write_image(image, path, compress_level)
    except OSError as e:
        raise CellWriteError(
            f"Failed to write cell {ordinal} to {path}: {e}",
            path=path,
            ordinal=ordinal,
        ) from e

    logger.debug(f"Wrote cell {ordinal} to {path}")
    return path


def _atomic_write_image(image: Image.Image, path: Path, compress_level: int) -> None:
    """Write image atomically using temp file."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="wb",
        suffix=".png",
        dir=path.parent,
        delete=False,
    ) as f:
        temp_path = Path(f.name)
        try:
            image.save(f, format="PNG", compress_level=compress_level)
        except BaseException:
            f.close()
            temp_path.unlink(missing_ok=True)
            raise

    # Use replace() instead of rename() for Windows compatibility
    temp_path.replace(path)
