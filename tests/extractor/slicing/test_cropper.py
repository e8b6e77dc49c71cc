"""
Tests for extractor.slicing.cropper

Test Coverage:
- extract_cell(): Region contents, independence from the source
- Edge cases: Regions outside the image
"""

import pytest
from PIL import Image

from icon_cropper.core.errors import RegionError
from icon_cropper.core.models import CellBounds
from icon_cropper.extractor.slicing.cropper import extract_cell


def test_extract_cell_returns_region_pixels(sheet_factory, color_of):
    """Cropped cell holds the pixels of its region."""
    # Arrange
    sheet = sheet_factory(90, 50, cell_size=9)

    # Act
    cell = extract_cell(sheet, CellBounds(left=18, top=9, size=9))

    # Assert
    assert cell.size == (9, 9)
    assert cell.getpixel((0, 0)) == color_of(2, 1)
    assert cell.getpixel((8, 8)) == color_of(2, 1)


def test_extract_cell_does_not_mutate_source(sheet_factory, color_of):
    """Drawing on the cell leaves the source untouched."""
    sheet = sheet_factory(90, 50, cell_size=9)
    before = sheet.tobytes()

    cell = extract_cell(sheet, CellBounds(left=0, top=0, size=9))
    cell.paste((0, 0, 0), (0, 0, 9, 9))

    assert sheet.tobytes() == before
    assert sheet.getpixel((0, 0)) == color_of(0, 0)


def test_extract_cell_keeps_image_mode():
    """RGBA sources produce RGBA cells."""
    sheet = Image.new("RGBA", (40, 40), color=(1, 2, 3, 4))

    cell = extract_cell(sheet, CellBounds(left=10, top=10, size=10))

    assert cell.mode == "RGBA"
    assert cell.getpixel((5, 5)) == (1, 2, 3, 4)


def test_extract_cell_accepts_region_ending_on_image_edge():
    """Regions ending exactly at the edge still exist in the image."""
    sheet = Image.new("RGB", (20, 20), color="white")

    cell = extract_cell(sheet, CellBounds(left=10, top=10, size=10))

    assert cell.size == (10, 10)


def test_extract_cell_raises_when_region_outside_image():
    """Regions past the image edge raise RegionError."""
    sheet = Image.new("RGB", (20, 20), color="white")

    with pytest.raises(RegionError) as exc_info:
        extract_cell(sheet, CellBounds(left=15, top=0, size=10))

    assert exc_info.value.box == (15, 0, 25, 10)
