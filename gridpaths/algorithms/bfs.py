"""Breadth-first grid searches.

``find_paths`` is the multi-path search. It carries whole partial paths in
its work queue and marks cells visited globally for the duration of the
call: once one branch of the frontier claims a cell, no other branch may
enter it. The paths it returns are therefore exactly the completions that
fit a single BFS expansion tree, bounded by ``max_paths``.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Set, Tuple

from gridpaths.algorithms.common import open_neighbors, reconstruct_path, validate_endpoints
from gridpaths.config import SEARCH_CONFIG
from gridpaths.logging import get_logger
from gridpaths.model.grid import Grid
from gridpaths.model.path import Path, path_identity
from gridpaths.model.repository import PathRepository
from gridpaths.types.base import Cell

logger = get_logger(__name__)


@dataclass
class SearchStats:
    """Bookkeeping collected during one multi-path search.

    Attributes:
        visit_order: Cells in the order they were first marked visited.
        expansions: Number of partial paths dequeued and expanded.
        completions: Number of dequeued paths that ended at the target,
            including duplicates that were not emitted.
    """

    visit_order: List[Cell] = field(default_factory=list)
    expansions: int = 0
    completions: int = 0


def find_paths(
    grid: Grid,
    start: Cell,
    end: Cell,
    max_paths: int,
    repository: Optional[PathRepository] = None,
) -> List[Path]:
    """Find up to ``max_paths`` distinct paths from ``start`` to ``end``.

    Args:
        grid: Grid to search.
        start: Source cell; must be in bounds and passable.
        end: Target cell; must be in bounds and passable.
        max_paths: Upper bound on returned paths; must be >= 1.
        repository: Repository to populate. It is cleared first. A private
            repository is used when omitted.

    Returns:
        Discovered paths in discovery order; empty if ``end`` is unreachable.

    Raises:
        PreconditionViolation: On invalid endpoints or ``max_paths < 1``.
    """
    paths, _ = find_paths_with_stats(grid, start, end, max_paths, repository)
    return paths


def find_paths_with_stats(
    grid: Grid,
    start: Cell,
    end: Cell,
    max_paths: int,
    repository: Optional[PathRepository] = None,
) -> Tuple[List[Path], SearchStats]:
    """Same as :func:`find_paths` but also return :class:`SearchStats`."""
    start, end = Cell(*start), Cell(*end)
    max_paths = SEARCH_CONFIG.resolve_max_paths(max_paths)
    validate_endpoints(grid, start, end)

    if repository is None:
        repository = PathRepository()
    repository.clear()

    stats = SearchStats()
    emitted_ids: Set[str] = set()
    found: List[Path] = []

    visited: Set[Cell] = {start}
    stats.visit_order.append(start)
    queue: Deque[Tuple[Cell, ...]] = deque([(start,)])

    logger.debug(
        "Searching up to %d paths %s -> %s on %dx%d grid",
        max_paths,
        start,
        end,
        grid.rows,
        grid.cols,
    )

    while queue and len(repository) < max_paths:
        partial = queue.popleft()
        current = partial[-1]

        if current == end:
            stats.completions += 1
            path_id = path_identity(partial)
            if path_id not in emitted_ids:
                emitted_ids.add(path_id)
                path = Path(partial)
                repository.insert(path)
                found.append(path)
                logger.debug("Found path #%d of length %d", len(found), len(path))
            continue

        stats.expansions += 1
        for neighbor in open_neighbors(grid, current):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            stats.visit_order.append(neighbor)
            queue.append(partial + (neighbor,))

    logger.debug(
        "Search finished: %d path(s), %d expansion(s), %d visited cell(s)",
        len(found),
        stats.expansions,
        len(visited),
    )
    return found, stats


def find_path_bfs(grid: Grid, start: Cell, end: Cell) -> Optional[Path]:
    """Return one shortest path from ``start`` to ``end`` or None.

    Uses a visited set and parent pointers instead of carrying whole paths.

    Raises:
        PreconditionViolation: If either endpoint is out of bounds or obstructed.
    """
    start, end = Cell(*start), Cell(*end)
    validate_endpoints(grid, start, end)

    parent: Dict[Cell, Optional[Cell]] = {start: None}
    queue: Deque[Cell] = deque([start])
    while queue:
        current = queue.popleft()
        if current == end:
            return reconstruct_path(parent, end)
        for neighbor in open_neighbors(grid, current):
            if neighbor not in parent:
                parent[neighbor] = current
                queue.append(neighbor)

    logger.debug("No path %s -> %s", start, end)
    return None
