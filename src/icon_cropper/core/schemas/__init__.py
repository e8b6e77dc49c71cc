"""Grid config schema and loader."""

from .validator import load_grid_config, validate_grid_config

__all__ = [
    "load_grid_config",
    "validate_grid_config",
]
