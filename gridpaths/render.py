"""Text rendering of grids and paths."""

from __future__ import annotations

from typing import Iterable, Optional

from gridpaths.model.grid import Grid
from gridpaths.types.base import Cell, CellKind

_KEEP = {CellKind.START, CellKind.GOAL}


def render_path(grid: Grid, path: Optional[Iterable[Cell]], marker: str = "*") -> str:
    """Return the grid as text with ``path`` overlaid.

    Cells are separated by single spaces, one row per line. Path cells are
    drawn with ``marker`` except where the grid holds a start or end marker.
    Out-of-bounds path cells are ignored.
    """
    canvas = [[kind.value for kind in row] for row in grid.cells]
    for cell in path or ():
        row, col = cell
        if grid.in_bounds(Cell(row, col)) and grid.cells[row][col] not in _KEEP:
            canvas[row][col] = marker
    return "\n".join(" ".join(row) for row in canvas)


def render_grid(grid: Grid) -> str:
    """Return the grid as text without any overlay."""
    return render_path(grid, None)
