"""
Module: cli

Purpose:
    Command-line front end. Parses grid parameters from flags and an
    optional JSON config file, picks single-file or directory mode, and
    maps failures to exit codes.

Key Functions:
    - main(): Entry point for the ``icon-cropper`` script
    - build_parser(): argparse parser
    - resolve_settings(): Merge flags over config file into GridSpec + CropConfig

Exit codes:
    0 - run completed (directory mode: even if some files failed)
    1 - no input selected, or single-file processing failed
    2 - invalid arguments or config file
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from icon_cropper import __version__
from icon_cropper.core.errors import ConfigError, CropperError, InvalidSpecError, UsageError
from icon_cropper.core.models import GridSpec
from icon_cropper.core.models.grid import DEFAULT_COLUMNS, DEFAULT_ROWS
from icon_cropper.core.schemas import load_grid_config
from icon_cropper.extractor import CropConfig, parse_color, parse_pos, process_directory, process_image
from icon_cropper.extractor.config import DEFAULT_OUTPUT_ROOT, default_max_workers
from icon_cropper.extractor.timing import TimingLog

logger = logging.getLogger("icon_cropper")

MODE_FILE = "file"
MODE_DIRECTORY = "directory"


def _pos_arg(value: str) -> Tuple[int, int]:
    try:
        return parse_pos(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _color_arg(value: str) -> Tuple[int, int, int]:
    try:
        return parse_color(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="icon-cropper",
        description="Minecraft Item Icon Cropper: crop a grid of item icons into separate PNGs",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-f", "--file", type=Path, help="Image file to crop")
    parser.add_argument("-d", "--directory", type=Path, help="Directory of image files to crop")
    parser.add_argument(
        "-o", "--output", type=Path,
        help=f"Output root directory (default: {DEFAULT_OUTPUT_ROOT})",
    )
    parser.add_argument(
        "-c", "--color", type=_color_arg,
        help='Background color key, e.g. "255,255,0" (reserved, not applied)',
    )
    parser.add_argument(
        "-S", "--framesize", type=int,
        help="Item frame size in pixels (reserved, not applied)",
    )
    parser.add_argument("-s", "--size", type=int, help="Item cell size in pixels")
    parser.add_argument("--pos", type=_pos_arg, help="Position where the item grid starts, as x,y")
    parser.add_argument("--columns", type=int, help=f"Grid columns (default: {DEFAULT_COLUMNS})")
    parser.add_argument("--rows", type=int, help=f"Grid rows (default: {DEFAULT_ROWS})")
    parser.add_argument("--workers", type=int, help="Worker threads per image")
    parser.add_argument("--config", type=Path, help="JSON grid config file; flags override it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def select_mode(args: argparse.Namespace) -> str:
    """
    Decide between single-file and directory mode.

    Raises:
        UsageError: If neither or both selectors were given.
    """
    if args.file is not None and args.directory is not None:
        raise UsageError(
            "Both --file and --directory were given; they can't be combined. "
            f"file: {args.file}, dir: {args.directory}"
        )
    if args.file is None and args.directory is None:
        raise UsageError("Neither --file nor --directory was given.")
    return MODE_FILE if args.file is not None else MODE_DIRECTORY


def resolve_settings(
    args: argparse.Namespace,
    file_config: Optional[Dict[str, Any]] = None,
) -> Tuple[GridSpec, CropConfig]:
    """
    Merge command-line values over config file values.

    Args:
        args: Parsed arguments.
        file_config: Validated grid config dictionary, if any.

    Returns:
        (GridSpec, CropConfig) for the run.

    Raises:
        InvalidSpecError: If pos or size is missing or the grid is malformed.
        ValueError: If the run configuration is malformed.
    """
    file_config = file_config or {}

    def pick(flag: Any, key: str, default: Any = None) -> Any:
        if flag is not None:
            return flag
        return file_config.get(key, default)

    pos = pick(args.pos, "pos")
    size = pick(args.size, "size")
    if pos is None:
        raise InvalidSpecError("--pos is required (or 'pos' in the config file)")
    if size is None:
        raise InvalidSpecError("--size is required (or 'size' in the config file)")

    spec = GridSpec(
        origin=tuple(pos),
        cell_size=size,
        columns=pick(args.columns, "columns", DEFAULT_COLUMNS),
        rows=pick(args.rows, "rows", DEFAULT_ROWS),
    )

    color = pick(args.color, "color")
    config = CropConfig(
        output_root=Path(pick(args.output, "output", DEFAULT_OUTPUT_ROOT)),
        max_workers=pick(args.workers, "workers", default_max_workers()),
        frame_size=pick(args.framesize, "framesize"),
        color_key=tuple(color) if color is not None else None,
    )
    return spec, config


def main(argv: Optional[List[str]] = None) -> int:
    """Run the cropper. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    logger.info("Minecraft Item Icon Cropper")
    logger.info("===========================")

    try:
        mode = select_mode(args)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        both_given = args.file is not None and args.directory is not None
        # Conflicting selectors are reported without failing the process
        return 0 if both_given else 1

    try:
        file_config = load_grid_config(args.config) if args.config else None
        spec, config = resolve_settings(args, file_config)
    except ConfigError as e:
        for detail in e.errors:
            print(f"  {detail}", file=sys.stderr)
        parser.error(str(e))
    except ValueError as e:
        parser.error(str(e))

    if config.frame_size is not None or config.color_key is not None:
        logger.debug("framesize/color are reserved and not applied during cropping")

    timing_log = TimingLog()

    if mode == MODE_FILE:
        logger.info("Running with file processing mode.")
        try:
            outcome = process_image(args.file, spec, config, timing_log=timing_log)
        except CropperError as e:
            logger.error(f"Error: {e}")
            return 1
        logger.info(timing_log.summary())
        return 0 if outcome.ok else 1

    logger.info("Running with directory processing mode.")
    try:
        result = process_directory(args.directory, spec, config, timing_log=timing_log)
    except OSError as e:
        logger.error(f"Error: {e}")
        return 1

    for path, message in result.failures:
        logger.warning(f"Failed: {path}: {message}")
    if result.cell_errors:
        logger.warning(
            f"{len(result.cell_errors)} cell(s) failed to write across "
            f"{len(result.outcomes)} file(s)"
        )
    logger.info(timing_log.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
