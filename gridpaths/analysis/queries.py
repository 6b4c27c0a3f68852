"""Derived views over a ``PathRepository``.

Every method of ``PathQueries`` is read-only: it never inserts into, removes
from or reorders the repository. Results are new lists, dicts or frozensets
that callers own.

Set operations accept ``Path`` objects, ``PathRecord`` objects or plain cell
sequences, and treat ``None`` as an empty path.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import islice
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

from gridpaths.model.path import Path
from gridpaths.model.repository import PathRecord, PathRepository
from gridpaths.types.base import Cell
from gridpaths.types.dto import PathSummary

CellSource = Union[Path, PathRecord, Iterable[Cell], None]


def _cells_of(source: CellSource) -> FrozenSet[Cell]:
    """Return the distinct cells of a path-like value."""
    if source is None:
        return frozenset()
    if isinstance(source, PathRecord):
        return source.path.visited
    if isinstance(source, Path):
        return source.visited
    return frozenset(Cell(*c) for c in source)


def _summarize(record: PathRecord) -> PathSummary:
    return PathSummary(
        id=record.id, start=record.start, end=record.end, length=record.length
    )


@dataclass(frozen=True)
class PathQueries:
    """Query layer bound to one repository.

    Attributes:
        repository: Repository to read from.
    """

    repository: PathRepository

    # ---- Filtering ---------------------------------------------------------
    def filter_by_length_range(self, min_len: int, max_len: int) -> List[PathRecord]:
        """Return records with ``min_len <= length <= max_len`` in insertion order."""
        return [r for r in self.repository.all() if min_len <= r.length <= max_len]

    def filter_containing(self, cell: Optional[Cell]) -> List[PathRecord]:
        """Return records whose path passes through ``cell``."""
        if cell is None:
            return []
        cell = Cell(*cell)
        return [r for r in self.repository.all() if cell in r.path]

    # ---- Ordering ----------------------------------------------------------
    def sort_by_length_then_recency_desc(self) -> List[PathRecord]:
        """Return records by ascending length, most recently found first on ties."""
        return sorted(self.repository.all(), key=lambda r: (r.length, -r.seq))

    def sort_by_recency_desc(self) -> List[PathRecord]:
        """Return records with the most recently found first."""
        return sorted(self.repository.all(), key=lambda r: r.seq, reverse=True)

    def top_shortest(self, n: int) -> List[PathRecord]:
        """Return the ``n`` shortest records; ties keep insertion order."""
        if n <= 0:
            return []
        # sorted() is stable, so equal lengths stay in insertion order
        return sorted(self.repository.all(), key=lambda r: r.length)[:n]

    # ---- Set algebra -------------------------------------------------------
    def union_of_cells(self, paths: Optional[Sequence[CellSource]]) -> FrozenSet[Cell]:
        """Return every cell visited by at least one of ``paths``."""
        if not paths:
            return frozenset()
        return frozenset().union(*(_cells_of(p) for p in paths))

    def intersection_of_cells(
        self, paths: Optional[Sequence[CellSource]]
    ) -> FrozenSet[Cell]:
        """Return the cells visited by all of ``paths``."""
        if not paths:
            return frozenset()
        first, *rest = (_cells_of(p) for p in paths)
        return first.intersection(*rest)

    def difference_of_cells(
        self, path_a: CellSource, path_b: CellSource
    ) -> FrozenSet[Cell]:
        """Return the cells of ``path_a`` that ``path_b`` does not visit."""
        return _cells_of(path_a) - _cells_of(path_b)

    # ---- Counting and grouping ---------------------------------------------
    def count_cell_frequency(self) -> Dict[Cell, int]:
        """Map each cell to the number of stored paths that traverse it."""
        counter: Counter[Cell] = Counter()
        for record in self.repository.all():
            counter.update(record.path.visited)
        return dict(counter)

    def top_visited_cells(self, n: int) -> List[Tuple[Cell, int]]:
        """Return the ``n`` most traversed cells with their counts.

        Ties are ordered by the first stored path (then position) that visits
        the cell.
        """
        if n <= 0:
            return []
        counts = self.count_cell_frequency()
        first_seen: Dict[Cell, int] = {}
        for record in self.repository.all():
            for cell in record.path:
                first_seen.setdefault(cell, len(first_seen))
        ranked = sorted(counts.items(), key=lambda kv: (-kv[1], first_seen[kv[0]]))
        return ranked[:n]

    def group_by_length(self) -> Dict[int, List[PathRecord]]:
        """Return records grouped by length, ascending."""
        return self.repository.group_by_length()

    # ---- Projection --------------------------------------------------------
    def summaries(self) -> List[PathSummary]:
        """Project every record to a :class:`PathSummary` in insertion order."""
        return [_summarize(r) for r in self.repository.all()]

    def pipeline(self, min_len: int, max_len: int, limit: int) -> List[PathSummary]:
        """Filter by length range, sort by length, take ``limit``, summarize.

        The stages run in exactly that order. Sorting is stable so equal
        lengths keep insertion order.
        """
        if limit <= 0:
            return []
        filtered = self.filter_by_length_range(min_len, max_len)
        ordered = sorted(filtered, key=lambda r: r.length)
        return [_summarize(r) for r in islice(ordered, limit)]
