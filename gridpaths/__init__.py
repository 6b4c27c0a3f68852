"""gridpaths: multi-path grid search with an indexed path repository.

gridpaths finds several distinct paths between two cells of an obstacle grid
using a breadth-first search with global visited marking, stores them in a
repository indexed by identity and by length, and offers read-only queries
(filtering, ranking, set algebra over visited cells) on the result.

Primary API:
    Grid - immutable obstacle grid
    find_paths() - multi-path breadth-first search
    PathRepository - indexed store of discovered paths
    PathQueries - read-only queries over a repository
    search() / SearchContext - grid + repository + queries in one object

Example:
    from gridpaths import Grid, search

    grid = Grid.from_rows(["S..", ".#.", "..E"])
    ctx = search(grid, grid.start, grid.goal, max_paths=3)
    for summary in ctx.queries.pipeline(1, 10, limit=2):
        print(summary)
"""

from __future__ import annotations

from gridpaths import cli, logging
from gridpaths._version import __version__
from gridpaths.algorithms import find_path_bfs, find_path_dfs, find_paths
from gridpaths.analysis import PathQueries, SearchContext, search
from gridpaths.model.grid import Grid
from gridpaths.model.path import Path, path_identity
from gridpaths.model.repository import PathRecord, PathRepository
from gridpaths.render import render_path
from gridpaths.types.base import Cell, CellKind, PreconditionViolation
from gridpaths.types.dto import PathSummary

__all__ = [
    # Version
    "__version__",
    # Model
    "Cell",
    "CellKind",
    "Grid",
    "Path",
    "PathRecord",
    "PathRepository",
    "path_identity",
    # Search
    "find_paths",
    "find_path_bfs",
    "find_path_dfs",
    "search",
    "SearchContext",
    # Queries
    "PathQueries",
    "PathSummary",
    # Errors
    "PreconditionViolation",
    # Utilities
    "render_path",
    "cli",
    "logging",
]
