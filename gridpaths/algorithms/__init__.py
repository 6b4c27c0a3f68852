"""Grid search algorithms.

- ``find_paths`` runs the multi-path breadth-first search that fills a
  ``PathRepository``.
- ``find_path_bfs`` / ``find_path_dfs`` return a single path using a visited
  grid and parent pointers.
"""

from gridpaths.algorithms.bfs import (
    SearchStats,
    find_path_bfs,
    find_paths,
    find_paths_with_stats,
)
from gridpaths.algorithms.dfs import find_path_dfs

__all__ = [
    "SearchStats",
    "find_paths",
    "find_paths_with_stats",
    "find_path_bfs",
    "find_path_dfs",
]
