"""Lightweight representation of a single grid path.

The ``Path`` dataclass stores an ordered cell sequence. Cached properties
expose the canonical identity and the set of visited cells, and helpers
provide equality, ordering by length and sub-path extraction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, FrozenSet, Iterable, Iterator, Tuple

from gridpaths.config import SEARCH_CONFIG, validate_identity_separator
from gridpaths.types.base import Cell


def path_identity(cells: Iterable[Cell], separator: str | None = None) -> str:
    """Return the canonical identity of a cell sequence.

    Each cell is rendered as ``row,col`` and the cells are joined in order
    with ``separator`` (``SEARCH_CONFIG.identity_separator`` by default), so
    ``[(0, 0), (0, 1)]`` becomes ``"0,0->0,1"``. Structurally identical
    sequences always produce the same identity.
    """
    sep = validate_identity_separator(
        SEARCH_CONFIG.identity_separator if separator is None else separator
    )
    return sep.join(f"{row},{col}" for row, col in cells)


@dataclass(frozen=True)
class Path:
    """Represents a single path through a grid.

    Attributes:
        cells: Ordered tuple of cells from the source to the destination.
    """

    cells: Tuple[Cell, ...]
    _cell_set: FrozenSet[Cell] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Copy the input into a tuple of Cells and reject empty paths."""
        cells = tuple(Cell(*c) for c in self.cells)
        if not cells:
            raise ValueError("Path must contain at least one cell")
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "_cell_set", frozenset(cells))

    def __getitem__(self, idx: int) -> Cell:
        return self.cells[idx]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        """Return the number of cells in the path."""
        return len(self.cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cell_set

    @property
    def src_cell(self) -> Cell:
        """Return the first cell in the path."""
        return self.cells[0]

    @property
    def dst_cell(self) -> Cell:
        """Return the last cell in the path."""
        return self.cells[-1]

    @property
    def visited(self) -> FrozenSet[Cell]:
        """Return the set of distinct cells on the path."""
        return self._cell_set

    @cached_property
    def identity(self) -> str:
        """Canonical identity string, see :func:`path_identity`."""
        return path_identity(self.cells)

    def __lt__(self, other: Any) -> bool:
        """Compare two paths by length.

        Returns NotImplemented if ``other`` is not a Path.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return len(self.cells) < len(other.cells)

    def __repr__(self) -> str:
        return f"Path({self.identity})"

    def get_sub_path(self, dst_cell: Cell) -> Path:
        """Return the prefix of this path ending at the first ``dst_cell``.

        Raises:
            ValueError: If ``dst_cell`` is not on the path.
        """
        for idx, cell in enumerate(self.cells):
            if cell == dst_cell:
                return Path(self.cells[: idx + 1])
        raise ValueError(f"Cell {tuple(dst_cell)} not found in path.")
