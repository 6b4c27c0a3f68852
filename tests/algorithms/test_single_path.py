"""Tests for the single-path BFS and DFS searches."""

import pytest

from gridpaths.algorithms import find_path_bfs, find_path_dfs
from gridpaths.lib.nx import is_valid_path
from gridpaths.types.base import Cell, PreconditionViolation


def test_bfs_shortest_on_open_grid(open3):
    path = find_path_bfs(open3, Cell(0, 0), Cell(2, 2))

    assert path is not None
    assert list(path) == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]


def test_dfs_prefers_last_pushed_neighbor(open3):
    path = find_path_dfs(open3, Cell(0, 0), Cell(2, 2))

    assert path is not None
    assert list(path) == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]


def test_dfs_on_ring(ring3):
    path = find_path_dfs(ring3, ring3.start, ring3.goal)
    assert list(path) == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]


@pytest.mark.parametrize("finder", [find_path_bfs, find_path_dfs])
def test_unreachable_returns_none(walled, finder):
    assert finder(walled, walled.start, walled.goal) is None


@pytest.mark.parametrize("finder", [find_path_bfs, find_path_dfs])
def test_start_equals_end(open3, finder):
    path = finder(open3, Cell(2, 1), Cell(2, 1))
    assert list(path) == [Cell(2, 1)]


@pytest.mark.parametrize("finder", [find_path_bfs, find_path_dfs])
def test_paths_are_valid_in_maze(maze, finder):
    path = finder(maze, maze.start, maze.goal)

    assert path.src_cell == maze.start
    assert path.dst_cell == maze.goal
    assert is_valid_path(maze, path)


@pytest.mark.parametrize("finder", [find_path_bfs, find_path_dfs])
def test_obstructed_endpoint_raises(ring3, finder):
    with pytest.raises(PreconditionViolation):
        finder(ring3, ring3.start, Cell(1, 1))
