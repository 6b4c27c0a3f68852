"""Loaders for grid descriptions (plain text and YAML)."""

from gridpaths.dsl.loader import (
    GridScenario,
    dump_grid_yaml,
    load_grid_file,
    load_grid_yaml,
    parse_grid_text,
)

__all__ = [
    "GridScenario",
    "dump_grid_yaml",
    "load_grid_file",
    "load_grid_yaml",
    "parse_grid_text",
]
