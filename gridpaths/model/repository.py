"""Indexed, append-ordered store of discovered paths.

``PathRepository`` keeps three views over the same ``PathRecord`` objects:

- an insertion-ordered list (``all()``),
- an identity index (``get_by_id``),
- a length index (``get_by_length``).

Insertion is idempotent on the canonical identity: inserting a path whose
identity is already stored is a silent no-op. The three views are updated
together and are only ever emptied together by ``clear()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Union

from gridpaths.config import SEARCH_CONFIG
from gridpaths.logging import get_logger
from gridpaths.model.path import Path
from gridpaths.types.base import Cell

logger = get_logger(__name__)

PathLike = Union[Path, Iterable[Cell]]


@dataclass(frozen=True, eq=False)
class PathRecord:
    """A stored path plus its derived metadata.

    Attributes:
        id: Canonical identity of ``path``.
        path: The stored path.
        length: Number of cells in ``path``.
        seq: Discovery order within the owning repository (0-based).
    """

    id: str
    path: Path
    length: int
    seq: int

    @property
    def cells(self) -> tuple[Cell, ...]:
        return self.path.cells

    @property
    def start(self) -> Cell:
        return self.path.src_cell

    @property
    def end(self) -> Cell:
        return self.path.dst_cell

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathRecord):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"Path[{self.id}: {self.length} steps]"


@dataclass
class PathRepository:
    """Store of unique paths indexed by identity and by length."""

    _records: List[PathRecord] = field(default_factory=list)
    _by_id: Dict[str, PathRecord] = field(default_factory=dict)
    _by_length: Dict[int, List[PathRecord]] = field(default_factory=dict)
    _next_seq: int = 0

    def insert(self, path: PathLike) -> Optional[PathRecord]:
        """Store ``path`` unless a path with the same identity is present.

        Args:
            path: A Path or any non-empty sequence of cells.

        Returns:
            The new PathRecord, or None if the identity was already stored.
        """
        if not isinstance(path, Path):
            path = Path(tuple(path))

        path_id = path.identity
        if path_id in self._by_id:
            logger.debug("Skipping duplicate path %s", path_id)
            return None

        record = PathRecord(id=path_id, path=path, length=len(path), seq=self._next_seq)
        self._next_seq += 1
        self._records.append(record)
        self._by_id[path_id] = record
        self._by_length.setdefault(record.length, []).append(record)

        if SEARCH_CONFIG.check_invariants:
            self.check_invariants()
        return record

    def get_by_id(self, path_id: str) -> Optional[PathRecord]:
        """Return the record with identity ``path_id`` or None."""
        return self._by_id.get(path_id)

    def get_by_length(self, length: int) -> List[PathRecord]:
        """Return the records with exactly ``length`` cells, in insertion order."""
        return list(self._by_length.get(length, ()))

    def all(self) -> List[PathRecord]:
        """Return every record in insertion order."""
        return list(self._records)

    def lengths(self) -> List[int]:
        """Return the distinct stored lengths in ascending order."""
        return sorted(self._by_length)

    def group_by_length(self) -> Dict[int, List[PathRecord]]:
        """Return a copy of the length index ordered by ascending length."""
        return {length: list(self._by_length[length]) for length in self.lengths()}

    def clear(self) -> None:
        """Remove every record and restart the discovery sequence."""
        self._records.clear()
        self._by_id.clear()
        self._by_length.clear()
        self._next_seq = 0

        if SEARCH_CONFIG.check_invariants:
            self.check_invariants()

    def check_invariants(self) -> None:
        """Assert that the three indices describe the same set of records.

        Raises:
            AssertionError: If the indices disagree.
        """
        ids = [record.id for record in self._records]
        if len(ids) != len(set(ids)):
            raise AssertionError("Duplicate identities in ordered path list")
        if set(ids) != set(self._by_id):
            raise AssertionError("Identity index out of sync with ordered path list")
        grouped = [r for group in self._by_length.values() for r in group]
        if len(grouped) != len(self._records):
            raise AssertionError(
                f"Length index holds {len(grouped)} records, expected {len(self._records)}"
            )
        for length, group in self._by_length.items():
            if not group:
                raise AssertionError(f"Empty length group {length}")
            for record in group:
                if record.length != length or self._by_id.get(record.id) is not record:
                    raise AssertionError(f"Length index out of sync for {record.id}")

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PathRecord]:
        return iter(list(self._records))

    def __contains__(self, path_id: object) -> bool:
        return path_id in self._by_id
