"""
Module: extractor.slicing.bounds_calculator

Purpose:
    Decides, for each grid cell, whether it can be cropped from a source
    image of a given size. Pure functions with no side effects, safe to
    call from any worker thread.

Key Functions:
    - check_cell(): Admit or skip a single cell
    - plan_cells(): Check every cell of a grid in row-major order

Dependencies:
    - icon_cropper.core.models: GridSpec, CellIndex, CellBounds

Used By:
    - extractor.pipeline: Runs check_cell inside each worker
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from icon_cropper.core.models import CellBounds, CellIndex, GridSpec


@dataclass(frozen=True)
class CellPlan:
    """
    An admitted cell, ready to be cropped.

    Attributes:
        index: Grid position.
        ordinal: Output ordinal (row * columns + column).
        bounds: Pixel region inside the source image.
    """
    index: CellIndex
    ordinal: int
    bounds: CellBounds


@dataclass(frozen=True)
class CellSkip:
    """
    A cell that falls outside the usable image area.

    Not an error: skips are reported and counted, and sibling cells are
    processed as usual.

    Attributes:
        index: Grid position.
        ordinal: Output ordinal the cell would have had.
        bounds: Pixel region that failed the check.
        reason: Human-readable explanation.
    """
    index: CellIndex
    ordinal: int
    bounds: CellBounds
    reason: str


CellCheck = Union[CellPlan, CellSkip]


def check_cell(
    spec: GridSpec,
    index: CellIndex,
    image_width: int,
    image_height: int,
) -> CellCheck:
    """
    Admit or skip one grid cell.

    The cell at ``origin + index * cell_size`` is admitted only when
    ``x + cell_size < image_width`` and ``y + cell_size < image_height``.
    The comparison is strict, so the last pixel column and row of the
    image never belong to a cell.

    Args:
        spec: Grid description.
        index: Cell position to check.
        image_width: Source image width in pixels.
        image_height: Source image height in pixels.

    Returns:
        CellPlan if admitted, CellSkip otherwise.

    Example:
        >>> spec = GridSpec(origin=(0, 0), cell_size=9)
        >>> check_cell(spec, CellIndex(0, 0), 90, 50)
        CellPlan(index=CellIndex(column=0, row=0), ordinal=0, bounds=CellBounds(0, 0, 9))
    """
    ordinal = spec.ordinal(index)
    bounds = spec.bounds_for(index)

    if bounds.fits_within(image_width, image_height):
        return CellPlan(index=index, ordinal=ordinal, bounds=bounds)

    return CellSkip(
        index=index,
        ordinal=ordinal,
        bounds=bounds,
        reason=(
            f"cell {index} spans x={bounds.left}..{bounds.right}, "
            f"y={bounds.top}..{bounds.bottom}, outside usable area "
            f"of {image_width}x{image_height} image"
        ),
    )


def plan_cells(spec: GridSpec, image_width: int, image_height: int) -> List[CellCheck]:
    """
    Check every cell of the grid.

    Returns:
        One CellPlan or CellSkip per cell, in row-major order.
    """
    return [
        check_cell(spec, index, image_width, image_height)
        for index in spec.indices()
    ]
