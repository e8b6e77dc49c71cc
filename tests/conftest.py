import pytest
import sys
from pathlib import Path
from PIL import Image, ImageDraw

# Add src to sys.path so we can import icon_cropper
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def cell_color(column: int, row: int) -> tuple:
    """Distinct fill color for the cell at (column, row)."""
    return (10 + column * 25, 10 + row * 40, 200)


def make_sheet(
    width: int,
    height: int,
    *,
    origin=(0, 0),
    cell_size: int = 9,
    columns: int = 9,
    rows: int = 5,
) -> Image.Image:
    """Create an RGB sheet where every grid cell is filled with cell_color()."""
    img = Image.new("RGB", (width, height), color="white")
    draw = ImageDraw.Draw(img)
    x0, y0 = origin
    for row in range(rows):
        for column in range(columns):
            left = x0 + column * cell_size
            top = y0 + row * cell_size
            draw.rectangle(
                (left, top, left + cell_size - 1, top + cell_size - 1),
                fill=cell_color(column, row),
            )
    return img


# Common test fixtures
@pytest.fixture
def sheet_factory():
    """Return the make_sheet helper."""
    return make_sheet


@pytest.fixture
def sample_sheet_path(tmp_path: Path):
    """A 90x50 sheet with 9x9 cells saved as PNG."""
    img = make_sheet(90, 50, cell_size=9)
    img_path = tmp_path / "sources" / "items.png"
    img_path.parent.mkdir()
    img.save(img_path)
    return img_path


@pytest.fixture
def color_of():
    """Return the cell_color helper."""
    return cell_color
