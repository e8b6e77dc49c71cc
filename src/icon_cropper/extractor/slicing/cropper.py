"""
Module: extractor.slicing.cropper

Purpose:
    Crops admitted cells out of a decoded source image. The source is
    shared read-only across worker threads; every crop is an independent
    copy.

Key Functions:
    - extract_cell(): Crop a single cell region

Dependencies:
    - PIL: Image manipulation
    - icon_cropper.core.models: CellBounds

Used By:
    - extractor.pipeline: Called once per admitted cell
"""

from __future__ import annotations

from PIL import Image

from icon_cropper.core.errors import RegionError
from icon_cropper.core.models import CellBounds


def extract_cell(image: Image.Image, bounds: CellBounds) -> Image.Image:
    """
    Crop a cell from a source image.

    Args:
        image: Fully loaded source image (not modified)
        bounds: Region to crop

    Returns:
        Cropped image (new copy, not a view)

    Raises:
        RegionError: If the region isn't inside the image. An admitted
            cell always is, so this signals a broken invariant.

    Example:
        >>> cell = extract_cell(sheet, CellBounds(left=8, top=18, size=18))
        >>> cell.size
        (18, 18)
    """
    if not bounds.lies_within(image.width, image.height):
        raise RegionError(
            f"Region {bounds.box} exceeds image size {image.width}x{image.height}",
            box=bounds.box,
        )

    # crop() is lazy on some backends; copy() detaches it from the source
    return bounds.crop_from(image).copy()
