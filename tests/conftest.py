"""Shared grid and repository fixtures."""

from __future__ import annotations

import pytest

from gridpaths.model.grid import Grid
from gridpaths.model.repository import PathRepository


@pytest.fixture
def open3() -> Grid:
    #  . . .
    #  . . .
    #  . . .
    return Grid.open(3, 3)


@pytest.fixture
def ring3() -> Grid:
    #  S . .
    #  . # .
    #  . . E
    return Grid.from_rows(["S..", ".#.", "..E"])


@pytest.fixture
def walled() -> Grid:
    #  S # .
    #  . # .
    #  . # E
    return Grid.from_rows(["S#.", ".#.", ".#E"])


@pytest.fixture
def maze() -> Grid:
    #  S . . # . .
    #  # # . # . #
    #  . . . . . .
    #  . # # # # .
    #  . . . # E .
    return Grid.from_rows(
        [
            "S..#..",
            "##.#.#",
            "......",
            ".####.",
            "...#E.",
        ]
    )


@pytest.fixture
def filled_repository() -> PathRepository:
    """Repository holding four hand-made paths (lengths 3, 3, 5, 2)."""
    repo = PathRepository()
    repo.insert([(0, 0), (0, 1), (1, 1)])
    repo.insert([(0, 0), (1, 0), (1, 1)])
    repo.insert([(0, 0), (0, 1), (0, 2), (1, 2), (1, 1)])
    repo.insert([(0, 0), (1, 0)])
    return repo
