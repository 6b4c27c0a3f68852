"""Base value types and enums shared across gridpaths."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Tuple

#: Row/column offsets explored from every cell, in search order (up, down, left, right).
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class PreconditionViolation(ValueError):
    """Raised when a search is requested with invalid endpoints or bounds.

    Covers start/end cells that are out of bounds or obstructed and
    ``max_paths < 1``. A search that simply finds nothing is not an error.
    """


class Cell(NamedTuple):
    """A (row, col) grid coordinate."""

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Cell":
        """Return the cell displaced by ``(d_row, d_col)``."""
        return Cell(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


class CellKind(Enum):
    """Marker stored in each grid cell.

    Values are the single-character text markers used by grid files.
    """

    OPEN = "."
    OBSTACLE = "#"
    START = "S"
    GOAL = "E"

    @property
    def passable(self) -> bool:
        return self is not CellKind.OBSTACLE

    @classmethod
    def from_marker(cls, value: str) -> "CellKind":
        """Parse a text marker into a CellKind.

        Args:
            value: One of ``.``, ``#``, ``S``, ``E`` (a space is read as open).

        Returns:
            The corresponding CellKind member.

        Raises:
            ValueError: If the marker is not recognized.
        """
        if value == " ":
            return cls.OPEN
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(repr(k.value) for k in cls)
            raise ValueError(
                f"Invalid cell marker {value!r}. Valid markers are: {valid}"
            ) from None
