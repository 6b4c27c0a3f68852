"""Text and YAML loaders for grid scenarios.

A plain text grid is one row per line, using the markers ``.`` (open),
``#`` (obstacle), ``S`` (start) and ``E`` (end). Markers may be separated by
whitespace. Blank lines are ignored.

A YAML scenario wraps the same rows::

    grid:
      - "S..#"
      - ".#.."
      - "...E"
    start: [0, 0]     # optional, defaults to the S marker
    end: [2, 3]       # optional, defaults to the E marker
    max_paths: 3      # optional

YAML documents are validated against the packaged
``gridpaths/schemas/grid_scenario.json`` schema.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path as FsPath
from typing import Any, Dict, List, Optional, Union

import jsonschema
import yaml

from gridpaths.config import SEARCH_CONFIG
from gridpaths.logging import get_logger
from gridpaths.model.grid import Grid
from gridpaths.types.base import Cell

logger = get_logger(__name__)


@dataclass(frozen=True)
class GridScenario:
    """A grid plus the search parameters that came with it.

    Attributes:
        grid: Parsed grid.
        start: Start cell (explicit or from the ``S`` marker), if known.
        end: End cell (explicit or from the ``E`` marker), if known.
        max_paths: Requested path limit, if given.
    """

    grid: Grid
    start: Optional[Cell] = None
    end: Optional[Cell] = None
    max_paths: Optional[int] = None


@lru_cache(maxsize=1)
def _scenario_schema() -> Dict[str, Any]:
    try:
        with (
            resources.files("gridpaths.schemas")
            .joinpath("grid_scenario.json")
            .open("r", encoding="utf-8")
        ) as f:
            return json.load(f)
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(
            "Failed to locate packaged schema 'gridpaths/schemas/grid_scenario.json'."
        ) from exc


def _normalize_row(line: str) -> str:
    return "".join(line.split())


def _check_size(rows: List[str]) -> None:
    """Reject row lists larger than ``SEARCH_CONFIG.max_grid_cells`` before parsing."""
    cells = len(rows) * max(len(row) for row in rows)
    if cells > SEARCH_CONFIG.max_grid_cells:
        raise ValueError(
            f"Grid has {cells} cells, limit is {SEARCH_CONFIG.max_grid_cells}"
        )


def _parse_rows(rows: List[str]) -> Grid:
    _check_size(rows)
    return Grid.from_rows(rows)


def parse_grid_text(text: str) -> Grid:
    """Parse a plain text grid.

    Raises:
        ValueError: On unknown markers, ragged rows, empty or oversized input.
    """
    rows = [_normalize_row(line) for line in text.splitlines()]
    rows = [row for row in rows if row]
    if not rows:
        raise ValueError("Grid text is empty")
    return _parse_rows(rows)


def load_grid_yaml(yaml_str: str) -> GridScenario:
    """Load a grid scenario from a YAML string.

    Raises:
        ValueError: If the document is not a mapping, or the grid is ragged
            or oversized.
        jsonschema.ValidationError: If the document does not match the
            grid scenario schema.
    """
    data = yaml.safe_load(yaml_str)
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    jsonschema.validate(data, _scenario_schema())

    grid = _parse_rows([_normalize_row(r) for r in data["grid"]])
    start = Cell(*data["start"]) if "start" in data else grid.start
    end = Cell(*data["end"]) if "end" in data else grid.goal

    return GridScenario(
        grid=grid, start=start, end=end, max_paths=data.get("max_paths")
    )


def load_grid_file(path: Union[str, FsPath]) -> GridScenario:
    """Load a ``.yaml``/``.yml`` scenario or a plain text grid from disk."""
    path = FsPath(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        scenario = load_grid_yaml(text)
    else:
        grid = parse_grid_text(text)
        scenario = GridScenario(grid=grid, start=grid.start, end=grid.goal)
    logger.debug("Loaded %r from %s", scenario.grid, path)
    return scenario


def scenario_to_dict(scenario: GridScenario) -> Dict[str, Any]:
    """Return the YAML-shaped dictionary for ``scenario``."""
    data: Dict[str, Any] = {"grid": scenario.grid.to_rows()}
    if scenario.start is not None:
        data["start"] = [scenario.start.row, scenario.start.col]
    if scenario.end is not None:
        data["end"] = [scenario.end.row, scenario.end.col]
    if scenario.max_paths is not None:
        data["max_paths"] = scenario.max_paths
    return data


def dump_grid_yaml(scenario: GridScenario) -> str:
    """Serialize ``scenario`` back to YAML accepted by :func:`load_grid_yaml`."""
    return yaml.safe_dump(scenario_to_dict(scenario), sort_keys=False)
