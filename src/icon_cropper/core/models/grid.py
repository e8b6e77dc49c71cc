"""
Module: grid

Purpose:
    Provides GridSpec - the immutable description of a regular grid of
    square cells inside a source image - and CellIndex, a zero-based
    (column, row) position within that grid.

Key Functions:
    - GridSpec.indices(): Enumerate every CellIndex in row-major order
    - GridSpec.ordinal(index): Output ordinal for a grid position
    - GridSpec.bounds_for(index): CellBounds of a grid position

Dependencies:
    - dataclasses (std)
    - core.errors: InvalidSpecError

Used By:
    - extractor.slicing.bounds_calculator
    - extractor.pipeline
    - cli
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from ..errors import InvalidSpecError
from .bounds import CellBounds

# Item icon sheets are laid out 9 columns by 5 rows
DEFAULT_COLUMNS = 9
DEFAULT_ROWS = 5


@dataclass(frozen=True, slots=True)
class CellIndex:
    """
    Zero-based position of a cell in the grid.

    Attributes:
        column: Column number, counted from the left
        row: Row number, counted from the top
    """

    column: int
    row: int

    def __str__(self) -> str:
        return f"({self.column}, {self.row})"


@dataclass(frozen=True, slots=True)
class GridSpec:
    """
    Immutable grid description.

    Attributes:
        origin: (x, y) pixel position of the top-left corner of cell (0, 0)
        cell_size: Edge length of each square cell in pixels
        columns: Number of cells per row
        rows: Number of cells per column

    Invariants:
        - cell_size > 0
        - columns > 0
        - rows > 0
        - origin coordinates >= 0

    Example:
        >>> spec = GridSpec(origin=(8, 18), cell_size=18)
        >>> spec.cell_count
        45
        >>> spec.ordinal(CellIndex(column=2, row=1))
        11
    """

    origin: Tuple[int, int]
    cell_size: int
    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS

    def __post_init__(self) -> None:
        """Validate grid fields on construction."""
        if self.cell_size <= 0:
            raise InvalidSpecError(f"cell_size must be > 0: {self.cell_size}")
        if self.columns <= 0:
            raise InvalidSpecError(f"columns must be > 0: {self.columns}")
        if self.rows <= 0:
            raise InvalidSpecError(f"rows must be > 0: {self.rows}")
        if len(self.origin) != 2:
            raise InvalidSpecError(f"origin must be an (x, y) pair: {self.origin!r}")
        x, y = self.origin
        if x < 0 or y < 0:
            raise InvalidSpecError(f"origin must be >= 0: {self.origin!r}")
        # Normalize lists from config files into a hashable tuple
        object.__setattr__(self, "origin", (int(x), int(y)))

    @property
    def cell_count(self) -> int:
        """Total number of cells in the grid."""
        return self.columns * self.rows

    def indices(self) -> Iterator[CellIndex]:
        """Yield every cell index in row-major order."""
        for row in range(self.rows):
            for column in range(self.columns):
                yield CellIndex(column=column, row=row)

    def ordinal(self, index: CellIndex) -> int:
        """
        Output ordinal for a grid position.

        Derived from the position alone, so it does not depend on the
        order in which worker threads finish.

        Raises:
            IndexError: If the index lies outside the grid
        """
        if not (0 <= index.column < self.columns and 0 <= index.row < self.rows):
            raise IndexError(f"cell {index} outside {self.columns}x{self.rows} grid")
        return index.row * self.columns + index.column

    def bounds_for(self, index: CellIndex) -> CellBounds:
        """Pixel region of a cell: origin + index * cell_size."""
        x, y = self.origin
        return CellBounds(
            left=x + index.column * self.cell_size,
            top=y + index.row * self.cell_size,
            size=self.cell_size,
        )
