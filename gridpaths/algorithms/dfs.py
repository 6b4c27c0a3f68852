"""Depth-first single-path grid search."""

from __future__ import annotations

from typing import Dict, List, Optional

from gridpaths.algorithms.common import open_neighbors, reconstruct_path, validate_endpoints
from gridpaths.logging import get_logger
from gridpaths.model.grid import Grid
from gridpaths.model.path import Path
from gridpaths.types.base import Cell

logger = get_logger(__name__)


def find_path_dfs(grid: Grid, start: Cell, end: Cell) -> Optional[Path]:
    """Return some path from ``start`` to ``end`` found depth-first, or None.

    Neighbours are pushed in the usual up, down, left, right order and marked
    visited when pushed, so the last pushed neighbour (right) is explored
    first. The result is not necessarily shortest.

    Raises:
        PreconditionViolation: If either endpoint is out of bounds or obstructed.
    """
    start, end = Cell(*start), Cell(*end)
    validate_endpoints(grid, start, end)

    parent: Dict[Cell, Optional[Cell]] = {start: None}
    stack: List[Cell] = [start]
    while stack:
        current = stack.pop()
        if current == end:
            return reconstruct_path(parent, end)
        for neighbor in open_neighbors(grid, current):
            if neighbor not in parent:
                parent[neighbor] = current
                stack.append(neighbor)

    logger.debug("No path %s -> %s", start, end)
    return None
