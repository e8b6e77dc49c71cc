"""
Schema Validation Utilities

Loads and validates grid config files against grid_config.schema.json.

A config file carries the same grid parameters as the command line
(pos, size, columns, rows, output, workers and the reserved framesize and
color). Values are validated here so the pipeline only ever sees a
well-formed GridSpec.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..errors import ConfigError


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


def validate_grid_config(data: dict[str, Any], *, path: Path | None = None) -> None:
    """
    Validate grid config data against the schema.

    Args:
        data: Parsed config dictionary
        path: Source file, used only for error context

    Raises:
        ConfigError: If data is invalid. ``errors`` lists every violation.
    """
    if not isinstance(data, dict):
        raise ConfigError(
            f"Grid config must be a JSON object, got {type(data).__name__}",
            path=path,
        )

    schema = _load_schema("grid_config")
    validator = jsonschema.Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if errors:
        messages = []
        for error in errors:
            location = "/".join(str(p) for p in error.absolute_path) or "<root>"
            messages.append(f"{location}: {error.message}")
        raise ConfigError(
            f"Schema validation failed: {messages[0]}",
            path=path,
            errors=messages,
        )


def load_grid_config(path: Path) -> dict[str, Any]:
    """
    Read and validate a grid config file.

    Args:
        path: Path to a JSON file

    Returns:
        The validated config dictionary

    Raises:
        ConfigError: If the file can't be read, isn't JSON, or is invalid

    Example:
        >>> load_grid_config(Path("grid.json"))
        {'pos': [8, 18], 'size': 18}
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Failed to read grid config {path}: {e}", path=path) from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Grid config {path} is not valid JSON: {e}", path=path) from e

    validate_grid_config(data, path=path)
    return data
