"""
Tests for extractor.slicing.writer

Test Coverage:
- write_cell(): PNG output, parent directory creation, atomic replace
- Edge cases: Unwritable destinations
"""

import pytest
from PIL import Image

from icon_cropper.core.errors import CellWriteError, IoError
from icon_cropper.extractor.slicing.writer import cell_path, write_cell


@pytest.fixture
def sample_cell():
    """Create sample cell image."""
    return Image.new("RGB", (18, 18), color=(40, 80, 120))


def test_cell_path_uses_ordinal_as_name(tmp_path):
    """Cells are named <ordinal>.png."""
    assert cell_path(tmp_path / "items", 7) == tmp_path / "items" / "7.png"


def test_write_cell_creates_parent_directories(tmp_path, sample_cell):
    """Creates output directories if they don't exist."""
    # Arrange
    path = tmp_path / "nonexistent" / "items" / "0.png"

    # Act
    result = write_cell(sample_cell, path)

    # Assert
    assert result == path
    assert path.exists()


def test_write_cell_saves_png_with_same_pixels(tmp_path, sample_cell):
    """Written file is a PNG with the cell's pixels."""
    path = tmp_path / "3.png"

    write_cell(sample_cell, path)

    with Image.open(path) as saved:
        assert saved.format == "PNG"
        assert saved.size == (18, 18)
        assert saved.convert("RGB").getpixel((9, 9)) == (40, 80, 120)


def test_write_cell_leaves_no_temp_files(tmp_path, sample_cell):
    """Only the destination remains after an atomic write."""
    write_cell(sample_cell, tmp_path / "0.png")

    assert [p.name for p in tmp_path.iterdir()] == ["0.png"]


def test_write_cell_overwrites_existing_file(tmp_path, sample_cell):
    """Existing cells are replaced."""
    path = tmp_path / "0.png"
    path.write_bytes(b"stale")

    write_cell(sample_cell, path)

    with Image.open(path) as saved:
        assert saved.size == (18, 18)


def test_write_cell_raises_cell_write_error_when_parent_is_file(tmp_path, sample_cell):
    """A file in place of the parent directory raises CellWriteError."""
    blocker = tmp_path / "items"
    blocker.write_text("not a directory")

    with pytest.raises(CellWriteError) as exc_info:
        write_cell(sample_cell, blocker / "5.png", ordinal=5)

    assert exc_info.value.ordinal == 5
    assert exc_info.value.path == blocker / "5.png"
    assert isinstance(exc_info.value, IoError)
    assert "cell 5" in str(exc_info.value)
