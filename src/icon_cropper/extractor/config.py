"""
Module: extractor.config

Purpose:
    Configuration dataclass for a cropping run, plus parsers for the
    comma-separated values accepted on the command line.

Key Classes:
    - CropConfig: Output root, worker count and PNG settings

Key Functions:
    - parse_pos(): Parse "x,y" into an (x, y) tuple
    - parse_color(): Parse "r,g,b" into an (r, g, b) tuple

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - extractor.pipeline: Uses CropConfig for output and worker settings
    - cli: Builds CropConfig from flags and config file
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

DEFAULT_OUTPUT_ROOT = Path("output")


def default_max_workers() -> int:
    """Worker count used when none is configured."""
    return min(8, os.cpu_count() or 1)


@dataclass(frozen=True)
class CropConfig:
    """
    Configuration for a cropping run.

    Attributes:
        output_root: Directory that receives one subdirectory per source
            image (default "output")
        max_workers: Threads used to crop and write the cells of one image
        compress_level: PNG compression (1=fast, 9=small)
        frame_size: Reserved. Parsed and carried, not used by extraction.
        color_key: Reserved background color (r, g, b). Not used by
            extraction.
    """
    output_root: Path = DEFAULT_OUTPUT_ROOT
    max_workers: int = field(default_factory=default_max_workers)
    compress_level: int = 1
    frame_size: Optional[int] = None
    color_key: Optional[Tuple[int, int, int]] = None

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1: {self.max_workers}")
        if not 0 <= self.compress_level <= 9:
            raise ValueError(f"compress_level must be 0-9: {self.compress_level}")
        if self.frame_size is not None and self.frame_size < 0:
            raise ValueError(f"frame_size must be >= 0: {self.frame_size}")
        object.__setattr__(self, "output_root", Path(self.output_root))

    def output_dir_for(self, image_path: Path) -> Path:
        """Output directory for one source image: <output_root>/<stem>."""
        return self.output_root / image_path.stem


def parse_pos(value: str) -> Tuple[int, int]:
    """
    Parse an "x,y" origin.

    Raises:
        ValueError: If the value doesn't have exactly two integer parts

    Example:
        >>> parse_pos("8,18")
        (8, 18)
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise ValueError(f"invalid pos: {value}")
    try:
        x = int(parts[0])
    except ValueError:
        raise ValueError(f"invalid x: {parts[0]}") from None
    try:
        y = int(parts[1])
    except ValueError:
        raise ValueError(f"invalid y: {parts[1]}") from None
    if x < 0 or y < 0:
        raise ValueError(f"invalid pos: {value}")
    return (x, y)


def parse_color(value: str) -> Tuple[int, int, int]:
    """
    Parse an "r,g,b" color key.

    Raises:
        ValueError: If the value isn't three integers in 0-255
    """
    parts = value.split(",")
    if len(parts) != 3:
        raise ValueError(f"invalid color: {value}")
    try:
        channels = tuple(int(p) for p in parts)
    except ValueError:
        raise ValueError(f"invalid color: {value}") from None
    if any(not 0 <= c <= 255 for c in channels):
        raise ValueError(f"invalid color: {value}")
    return channels  # type: ignore[return-value]
