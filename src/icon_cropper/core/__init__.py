"""
Core Package

Immutable grid models and the schema used to validate grid config files.
Nothing in here touches the filesystem except the config loader.
"""

from .models import CellBounds, CellIndex, GridSpec

__all__ = [
    "CellBounds",
    "CellIndex",
    "GridSpec",
]
