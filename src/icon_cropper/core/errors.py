"""
Module: core.errors

Purpose:
    Exception hierarchy shared by the grid models, the extraction
    pipeline and the CLI. Each error carries enough context (file path,
    cell ordinal) for a human to re-run the failed piece.

Key Classes:
    - CropperError: Base class for every error raised by this package
    - InvalidSpecError: Malformed grid parameters
    - DecodeError: Source image unreadable or unsupported
    - RegionError: Crop box rejected by the image backend
    - IoError: Base for filesystem failures
    - OutputDirectoryError: Per-image output directory could not be created
    - CellWriteError: A single cell could not be written
    - ConfigError: Grid config file unreadable or invalid
    - UsageError: Conflicting or missing input selectors

Used By:
    - core.models: GridSpec validation
    - extractor.pipeline / extractor.batch: Per-file and per-cell failures
    - cli: Exit code mapping
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional


class CropperError(Exception):
    """Base error for the icon cropper."""
    pass


class InvalidSpecError(CropperError, ValueError):
    """Grid parameters are malformed (e.g. zero cell size)."""
    pass


class DecodeError(CropperError):
    """Source image could not be opened or decoded."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class RegionError(CropperError):
    """Image backend rejected a crop region."""

    def __init__(self, message: str, box: Optional[tuple] = None):
        super().__init__(message)
        self.box = box


class IoError(CropperError, OSError):
    """Directory creation or file write failed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class OutputDirectoryError(IoError):
    """Output directory for one source image could not be created."""
    pass


class CellWriteError(IoError):
    """A single cell image could not be persisted."""

    def __init__(self, message: str, path: Optional[Path] = None, ordinal: Optional[int] = None):
        super().__init__(message, path)
        self.ordinal = ordinal


class ConfigError(CropperError):
    """Grid config file could not be read or failed validation."""

    def __init__(self, message: str, path: Optional[Path] = None, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


class UsageError(CropperError):
    """Input selectors are missing or conflicting."""
    pass
