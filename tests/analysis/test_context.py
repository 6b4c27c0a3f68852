"""Tests for SearchContext sessions."""

import pytest

from gridpaths.analysis.context import SearchContext, search
from gridpaths.config import SearchConfig
from gridpaths.model.repository import PathRepository
from gridpaths.types.base import Cell, PreconditionViolation


def test_search_populates_own_repository(ring3):
    ctx = SearchContext(ring3)
    paths = ctx.search(ring3.start, ring3.goal, 2)

    assert len(paths) == 1
    assert len(ctx.repository) == 1
    assert ctx.records[0].path == paths[0]
    assert ctx.queries.top_shortest(1)[0].length == 5
    assert ctx.last_stats is not None
    assert ctx.last_stats.completions == 1


def test_contexts_do_not_share_repositories(open3):
    a = SearchContext(open3)
    b = SearchContext(open3)
    a.search(Cell(0, 0), Cell(0, 1), 1)

    assert len(a.repository) == 1
    assert len(b.repository) == 0


def test_second_search_replaces_first(open3):
    ctx = SearchContext(open3)
    ctx.search(Cell(0, 0), Cell(2, 2), 1)
    ctx.search(Cell(1, 1), Cell(1, 1), 1)

    assert [r.id for r in ctx.records] == ["1,1"]


def test_default_max_paths_from_config(open3):
    ctx = SearchContext(open3, config=SearchConfig(default_max_paths=0))
    with pytest.raises(PreconditionViolation):
        ctx.search(Cell(0, 0), Cell(2, 2))


def test_external_repository_is_used(open3):
    repo = PathRepository()
    ctx = SearchContext(open3, repository=repo)
    ctx.search(Cell(0, 0), Cell(0, 2))

    assert len(repo) == 1


def test_module_search_helper(walled, caplog):
    with caplog.at_level("INFO", logger="gridpaths"):
        ctx = search(walled, walled.start, walled.goal, 3)

    assert ctx.records == []
    assert "No path" in caplog.text
