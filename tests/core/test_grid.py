"""
Unit Tests for GridSpec and CellIndex Models

Tests for grid validation, row-major enumeration and ordinals.
"""

import pytest

from icon_cropper.core.errors import InvalidSpecError
from icon_cropper.core.models import CellBounds, CellIndex, GridSpec


class TestGridSpecValidation:
    """Tests for GridSpec construction."""

    def test_init_when_defaults_then_uses_nine_by_five(self):
        """Columns and rows default to the item sheet layout."""
        spec = GridSpec(origin=(8, 18), cell_size=18)
        assert spec.columns == 9
        assert spec.rows == 5
        assert spec.cell_count == 45

    def test_init_when_cell_size_zero_then_raises_invalid_spec(self):
        """cell_size == 0 is rejected."""
        with pytest.raises(InvalidSpecError, match="cell_size must be > 0"):
            GridSpec(origin=(0, 0), cell_size=0)

    def test_init_when_columns_zero_then_raises_invalid_spec(self):
        """columns == 0 is rejected."""
        with pytest.raises(InvalidSpecError, match="columns must be > 0"):
            GridSpec(origin=(0, 0), cell_size=10, columns=0)

    def test_init_when_rows_negative_then_raises_invalid_spec(self):
        """Negative rows are rejected."""
        with pytest.raises(InvalidSpecError, match="rows must be > 0"):
            GridSpec(origin=(0, 0), cell_size=10, rows=-1)

    def test_init_when_origin_negative_then_raises_invalid_spec(self):
        """Negative origin coordinates are rejected."""
        with pytest.raises(InvalidSpecError, match="origin must be >= 0"):
            GridSpec(origin=(-1, 0), cell_size=10)

    def test_init_when_invalid_spec_then_is_also_value_error(self):
        """InvalidSpecError can be caught as ValueError."""
        with pytest.raises(ValueError):
            GridSpec(origin=(0, 0), cell_size=0)

    def test_init_when_origin_is_list_then_normalizes_to_tuple(self):
        """Origins loaded from JSON arrive as lists."""
        spec = GridSpec(origin=[3, 4], cell_size=10)
        assert spec.origin == (3, 4)
        assert hash(spec) == hash(GridSpec(origin=(3, 4), cell_size=10))

    def test_setattr_when_frozen_then_raises(self):
        """GridSpec is immutable."""
        spec = GridSpec(origin=(0, 0), cell_size=10)
        with pytest.raises(AttributeError):
            spec.cell_size = 5  # type: ignore[misc]


class TestGridSpecEnumeration:
    """Tests for indices(), ordinal() and bounds_for()."""

    def test_indices_when_called_then_row_major_order(self):
        """Indices walk each row left to right, top row first."""
        spec = GridSpec(origin=(0, 0), cell_size=10, columns=3, rows=2)
        assert list(spec.indices()) == [
            CellIndex(0, 0), CellIndex(1, 0), CellIndex(2, 0),
            CellIndex(0, 1), CellIndex(1, 1), CellIndex(2, 1),
        ]

    def test_ordinal_when_enumerated_then_matches_position(self):
        """Ordinals follow row * columns + column."""
        spec = GridSpec(origin=(0, 0), cell_size=10, columns=9, rows=5)
        ordinals = [spec.ordinal(i) for i in spec.indices()]
        assert ordinals == list(range(45))
        assert spec.ordinal(CellIndex(column=2, row=1)) == 11

    def test_ordinal_when_index_outside_grid_then_raises(self):
        """Indices outside the grid have no ordinal."""
        spec = GridSpec(origin=(0, 0), cell_size=10, columns=2, rows=2)
        with pytest.raises(IndexError):
            spec.ordinal(CellIndex(column=2, row=0))

    def test_bounds_for_when_offset_origin_then_adds_index_times_size(self):
        """Bounds start at origin + index * cell_size."""
        spec = GridSpec(origin=(8, 18), cell_size=18)
        assert spec.bounds_for(CellIndex(column=2, row=3)) == CellBounds(
            left=8 + 2 * 18, top=18 + 3 * 18, size=18
        )

    def test_cell_index_str_when_called_then_shows_pair(self):
        """CellIndex prints as (column, row)."""
        assert str(CellIndex(column=4, row=1)) == "(4, 1)"
