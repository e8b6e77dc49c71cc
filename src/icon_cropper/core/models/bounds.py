"""
Module: bounds

Purpose:
    Provides the CellBounds dataclass - the square pixel region one grid
    cell occupies inside a source image.

Key Functions:
    - CellBounds.box: (left, top, right, bottom) tuple for PIL crop
    - CellBounds.fits_within(width, height): Strict-less-than admission test
    - CellBounds.crop_from(image): Crop this region from a PIL image

Dependencies:
    - dataclasses (std)
    - PIL.Image (TYPE_CHECKING only)

Used By:
    - core.models.grid.GridSpec
    - extractor.slicing.bounds_calculator
    - extractor.slicing.cropper
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PIL import Image


@dataclass(frozen=True, slots=True)
class CellBounds:
    """
    Square image region in pixels.

    The region is defined as [left, left + size) x [top, top + size):
    - left/top are inclusive
    - right/bottom are exclusive

    Attributes:
        left: X-coordinate of left edge (inclusive)
        top: Y-coordinate of top edge (inclusive)
        size: Edge length of the square cell

    Invariants:
        - left >= 0
        - top >= 0
        - size > 0

    Example:
        >>> bounds = CellBounds(left=18, top=36, size=18)
        >>> bounds.box
        (18, 36, 36, 54)
        >>> bounds.fits_within(37, 55)
        True
        >>> bounds.fits_within(36, 55)  # right edge on the image edge
        False
    """

    left: int
    top: int
    size: int

    def __post_init__(self) -> None:
        """Validate bounds on construction."""
        if self.left < 0:
            raise ValueError(f"left must be >= 0: {self.left}")
        if self.top < 0:
            raise ValueError(f"top must be >= 0: {self.top}")
        if self.size <= 0:
            raise ValueError(f"size must be > 0: {self.size}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def right(self) -> int:
        """X-coordinate of right edge (exclusive)."""
        return self.left + self.size

    @property
    def bottom(self) -> int:
        """Y-coordinate of bottom edge (exclusive)."""
        return self.top + self.size

    @property
    def box(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) tuple suitable for PIL crop."""
        return (self.left, self.top, self.right, self.bottom)

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def fits_within(self, width: int, height: int) -> bool:
        """
        Check whether this cell is admitted for an image of the given size.

        Uses strict less-than on both axes, so a cell whose right or
        bottom edge lands exactly on the image edge is rejected even
        though its pixels exist. Existing grids depend on this.

        Args:
            width: Source image width in pixels
            height: Source image height in pixels

        Returns:
            True if right < width and bottom < height
        """
        return self.right < width and self.bottom < height

    def lies_within(self, width: int, height: int) -> bool:
        """True if every pixel of the region exists in a width x height image."""
        return self.right <= width and self.bottom <= height

    # ─────────────────────────────────────────────────────────────────────────
    # Image Operations
    # ─────────────────────────────────────────────────────────────────────────

    def crop_from(self, image: Image.Image) -> Image.Image:
        """
        Crop this region from an image.

        Args:
            image: PIL Image to crop from

        Returns:
            New PIL Image containing just this region
        """
        return image.crop(self.box)

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"CellBounds({self.left}, {self.top}, {self.size})"
