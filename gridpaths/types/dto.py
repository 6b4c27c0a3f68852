"""Immutable summary containers returned by the query layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from gridpaths.types.base import Cell


@dataclass(frozen=True)
class PathSummary:
    """Compact projection of a stored path.

    Attributes:
        id: Canonical identity of the path.
        start: First cell of the path.
        end: Last cell of the path.
        length: Number of cells in the path.
    """

    id: str
    start: Cell
    end: Cell
    length: int

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-safe representation."""
        return {
            "id": self.id,
            "start": [self.start.row, self.start.col],
            "end": [self.end.row, self.end.col],
            "length": self.length,
        }

    def __str__(self) -> str:
        return f"Summary[{self.id}: {self.start} -> {self.end} ({self.length})]"
