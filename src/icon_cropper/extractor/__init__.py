"""
Module: extractor

Purpose:
    Grid extraction pipeline. Crops a regular grid of square cells out of
    source images and writes each cell as its own PNG.

Key Functions:
    - process_image(): Crop every cell of one image file
    - process_directory(): Crop every image in a directory

Key Classes:
    - CropConfig: Output root, worker count and PNG settings
    - ProcessingOutcome: Per-file result
    - BatchResult: Per-directory result

Dependencies:
    - PIL: Image decoding, cropping and saving
    - icon_cropper.core.models: GridSpec, CellIndex, CellBounds

Used By:
    - icon_cropper.cli: Command-line front end
"""

from .batch import BatchResult, process_directory
from .config import CropConfig, parse_color, parse_pos
from .pipeline import CellResult, ProcessingOutcome, crop_image, process_image

__all__ = [
    "BatchResult",
    "CellResult",
    "CropConfig",
    "ProcessingOutcome",
    "crop_image",
    "parse_color",
    "parse_pos",
    "process_directory",
    "process_image",
]
