"""
Module: extractor.slicing

Purpose:
    Slicing subpackage: per-cell bounds checks, cropping and PNG output.

Key Modules:
    - bounds_calculator: Admit or skip grid cells
    - cropper: Crop admitted cells from the source image
    - writer: Atomic PNG writing

Dependencies:
    - PIL: Image manipulation
    - icon_cropper.core.models: GridSpec, CellBounds

Used By:
    - extractor.pipeline: Runs all three steps inside each worker
"""

from .bounds_calculator import CellPlan, CellSkip, check_cell, plan_cells
from .cropper import extract_cell
from .writer import cell_path, write_cell

__all__ = [
    "CellPlan",
    "CellSkip",
    "cell_path",
    "check_cell",
    "extract_cell",
    "plan_cells",
    "write_cell",
]
