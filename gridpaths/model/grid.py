"""Immutable rectangular grid with obstacle markers.

``Grid`` stores one :class:`CellKind` per cell and answers bounds and
passability queries. It is built once (usually via :meth:`Grid.from_rows`)
and never mutated; searches only read from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Tuple, Union

from gridpaths.types.base import DIRECTIONS, Cell, CellKind

RowSpec = Union[str, Sequence[str], Sequence[CellKind]]


@dataclass(frozen=True)
class Grid:
    """A rectangular cell map.

    Attributes:
        cells: Row-major tuple of rows, each a tuple of CellKind.
        rows: Number of rows.
        cols: Number of columns.
        start: Cell carrying the START marker, if any.
        goal: Cell carrying the GOAL marker, if any.
    """

    cells: Tuple[Tuple[CellKind, ...], ...]
    rows: int = field(init=False)
    cols: int = field(init=False)
    start: Optional[Cell] = field(init=False, default=None)
    goal: Optional[Cell] = field(init=False, default=None)

    def __post_init__(self) -> None:
        """Copy the cells, validate the shape and locate the START/GOAL markers."""
        cells = tuple(
            tuple(k if isinstance(k, CellKind) else CellKind.from_marker(k) for k in row)
            for row in self.cells
        )
        object.__setattr__(self, "cells", cells)

        if not self.cells or not self.cells[0]:
            raise ValueError("Grid must have at least one row and one column")
        width = len(self.cells[0])
        for idx, row in enumerate(self.cells):
            if len(row) != width:
                raise ValueError(
                    f"Grid rows must have equal length: row {idx} has {len(row)} "
                    f"cells, expected {width}"
                )

        start: Optional[Cell] = None
        goal: Optional[Cell] = None
        for r, row in enumerate(self.cells):
            for c, kind in enumerate(row):
                if kind is CellKind.START:
                    if start is not None:
                        raise ValueError(
                            f"Grid has more than one start marker: {start}, {Cell(r, c)}"
                        )
                    start = Cell(r, c)
                elif kind is CellKind.GOAL:
                    if goal is not None:
                        raise ValueError(
                            f"Grid has more than one goal marker: {goal}, {Cell(r, c)}"
                        )
                    goal = Cell(r, c)

        # frozen dataclass: derived fields are set through object.__setattr__
        object.__setattr__(self, "rows", len(self.cells))
        object.__setattr__(self, "cols", width)
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "goal", goal)

    @classmethod
    def from_rows(cls, rows: Sequence[RowSpec]) -> Grid:
        """Build a grid from marker rows.

        Each row is either a string of single-character markers (``.``, ``#``,
        ``S``, ``E``) or a sequence of markers / CellKind members.

        Raises:
            ValueError: On unknown markers, ragged rows or empty input.
        """
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def open(cls, rows: int, cols: int) -> Grid:
        """Return a ``rows`` x ``cols`` grid with every cell open."""
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        return cls(tuple((CellKind.OPEN,) * cols for _ in range(rows)))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def in_bounds(self, cell: Cell) -> bool:
        """Return True iff ``cell`` lies within ``[0, rows) x [0, cols)``."""
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def kind(self, cell: Cell) -> CellKind:
        """Return the marker at ``cell``.

        Raises:
            IndexError: If ``cell`` is out of bounds.
        """
        if not self.in_bounds(cell):
            raise IndexError(
                f"Cell {tuple(cell)} is outside grid {self.rows}x{self.cols}"
            )
        row, col = cell
        return self.cells[row][col]

    def is_passable(self, cell: Cell) -> bool:
        """Return True iff the in-bounds ``cell`` is not an obstacle.

        Callers must check :meth:`in_bounds` first.

        Raises:
            IndexError: If ``cell`` is out of bounds.
        """
        return self.kind(cell).passable

    def neighbors(self, cell: Cell) -> Tuple[Cell, ...]:
        """Return the four orthogonal neighbours of ``cell``.

        Order is up, down, left, right. The result is not filtered for bounds
        or passability.
        """
        row, col = cell
        return tuple(Cell(row + dr, col + dc) for dr, dc in DIRECTIONS)

    def passable_cells(self) -> Iterator[Cell]:
        """Yield every passable cell in row-major order."""
        for r, row in enumerate(self.cells):
            for c, kind in enumerate(row):
                if kind.passable:
                    yield Cell(r, c)

    def obstacle_count(self) -> int:
        return sum(
            1 for row in self.cells for kind in row if kind is CellKind.OBSTACLE
        )

    def to_rows(self) -> list[str]:
        """Return the grid as marker strings, inverse of :meth:`from_rows`."""
        return ["".join(kind.value for kind in row) for row in self.cells]

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, obstacles={self.obstacle_count()})"
