"""SearchContext: one grid, one repository, one search session at a time.

Usage:
    # One-off search
    from gridpaths import search
    ctx = search(grid, (0, 0), (2, 2), max_paths=3)
    shortest = ctx.queries.top_shortest(1)

    # Repeated searches over the same grid
    ctx = SearchContext(grid)
    ctx.search((0, 0), (2, 2))
    ctx.search((0, 0), (1, 2))  # clears the previous session first
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from gridpaths.algorithms.bfs import SearchStats, find_paths_with_stats
from gridpaths.analysis.queries import PathQueries
from gridpaths.config import SEARCH_CONFIG, SearchConfig
from gridpaths.logging import get_logger
from gridpaths.model.grid import Grid
from gridpaths.model.path import Path
from gridpaths.model.repository import PathRecord, PathRepository
from gridpaths.types.base import Cell

logger = get_logger(__name__)


@dataclass
class SearchContext:
    """Binds a grid to its own repository and query layer.

    Attributes:
        grid: Grid searched by every session.
        repository: Repository owned by this context.
        config: Defaults for searches run through this context.
        last_stats: Stats of the most recent search, if any.
    """

    grid: Grid
    repository: PathRepository = field(default_factory=PathRepository)
    config: SearchConfig = field(default_factory=lambda: SEARCH_CONFIG)
    last_stats: Optional[SearchStats] = field(default=None, init=False)

    @property
    def queries(self) -> PathQueries:
        return PathQueries(self.repository)

    @property
    def records(self) -> List[PathRecord]:
        return self.repository.all()

    def search(
        self, start: Cell, end: Cell, max_paths: Optional[int] = None
    ) -> List[Path]:
        """Clear the repository and run a multi-path search.

        Args:
            start: Source cell.
            end: Target cell.
            max_paths: Upper bound on paths; ``config.default_max_paths`` if None.

        Returns:
            Paths found, in discovery order.

        Raises:
            PreconditionViolation: On invalid endpoints or ``max_paths``.
        """
        limit = self.config.resolve_max_paths(max_paths)
        paths, stats = find_paths_with_stats(
            self.grid, start, end, limit, self.repository
        )
        self.last_stats = stats
        if not paths:
            logger.info("No path from %s to %s", Cell(*start), Cell(*end))
        return paths


def search(
    grid: Grid, start: Cell, end: Cell, max_paths: Optional[int] = None
) -> SearchContext:
    """Run one search on a fresh context and return the context."""
    ctx = SearchContext(grid)
    ctx.search(start, end, max_paths)
    return ctx
