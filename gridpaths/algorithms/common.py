"""Helpers shared by the grid search algorithms."""

from __future__ import annotations

from typing import Dict, List, Optional

from gridpaths.model.grid import Grid
from gridpaths.model.path import Path
from gridpaths.types.base import Cell, PreconditionViolation


def validate_endpoints(grid: Grid, start: Cell, end: Cell) -> None:
    """Check that ``start`` and ``end`` are in bounds and passable.

    Raises:
        PreconditionViolation: If either endpoint is out of bounds or obstructed.
    """
    for label, cell in (("start", start), ("end", end)):
        if not grid.in_bounds(cell):
            raise PreconditionViolation(
                f"{label} cell {tuple(cell)} is outside grid {grid.rows}x{grid.cols}"
            )
        if not grid.is_passable(cell):
            raise PreconditionViolation(f"{label} cell {tuple(cell)} is an obstacle")


def open_neighbors(grid: Grid, cell: Cell) -> List[Cell]:
    """Return the in-bounds, passable neighbours of ``cell`` in search order."""
    return [n for n in grid.neighbors(cell) if grid.in_bounds(n) and grid.is_passable(n)]


def reconstruct_path(parent: Dict[Cell, Optional[Cell]], end: Cell) -> Path:
    """Walk parent pointers back from ``end`` and return the forward path."""
    cells: List[Cell] = []
    current: Optional[Cell] = end
    while current is not None:
        cells.append(current)
        current = parent[current]
    cells.reverse()
    return Path(tuple(cells))
