"""
Core Models Package

Immutable, validated data models describing a cell grid.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation while cells are processed on worker threads
2. Safe to share one GridSpec across the whole thread pool
3. Can be used as dict keys or in sets
"""

from .bounds import CellBounds
from .grid import CellIndex, GridSpec

__all__ = [
    "CellBounds",
    "CellIndex",
    "GridSpec",
]
