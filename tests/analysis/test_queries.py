"""Tests for the read-only query layer."""

import pytest

from gridpaths.analysis.queries import PathQueries
from gridpaths.model.path import Path
from gridpaths.model.repository import PathRepository
from gridpaths.types.base import Cell
from gridpaths.types.dto import PathSummary

P1 = "0,0->0,1->1,1"
P2 = "0,0->1,0->1,1"
P3 = "0,0->0,1->0,2->1,2->1,1"
P4 = "0,0->1,0"


@pytest.fixture
def queries(filled_repository) -> PathQueries:
    return PathQueries(filled_repository)


def _ids(records):
    return [r.id for r in records]


def test_filter_by_length_range(queries):
    assert _ids(queries.filter_by_length_range(2, 3)) == [P1, P2, P4]
    assert _ids(queries.filter_by_length_range(5, 5)) == [P3]
    assert queries.filter_by_length_range(6, 10) == []
    assert queries.filter_by_length_range(4, 2) == []


def test_filter_containing(queries):
    assert _ids(queries.filter_containing(Cell(1, 0))) == [P2, P4]
    assert _ids(queries.filter_containing((0, 2))) == [P3]
    assert queries.filter_containing(Cell(7, 7)) == []
    assert queries.filter_containing(None) == []


def test_sort_by_length_then_recency_desc(queries):
    assert _ids(queries.sort_by_length_then_recency_desc()) == [P4, P2, P1, P3]


def test_sort_by_recency_desc(queries):
    assert _ids(queries.sort_by_recency_desc()) == [P4, P3, P2, P1]


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, []),
        (-3, []),
        (1, [P4]),
        (2, [P4, P1]),
        (3, [P4, P1, P2]),
        (10, [P4, P1, P2, P3]),
    ],
)
def test_top_shortest(queries, n, expected):
    assert _ids(queries.top_shortest(n)) == expected


def test_union_of_cells(queries, filled_repository):
    p1, p2 = filled_repository.all()[:2]
    assert queries.union_of_cells([p1, p2]) == {
        Cell(0, 0),
        Cell(0, 1),
        Cell(1, 0),
        Cell(1, 1),
    }


def test_intersection_of_cells(queries, filled_repository):
    p1, p2, p3, _ = filled_repository.all()
    assert queries.intersection_of_cells([p1, p2]) == {Cell(0, 0), Cell(1, 1)}
    assert queries.intersection_of_cells([p1, p3]) == {
        Cell(0, 0),
        Cell(0, 1),
        Cell(1, 1),
    }
    assert queries.intersection_of_cells([p3]) == p3.path.visited


def test_difference_of_cells(queries, filled_repository):
    p1, _, p3, _ = filled_repository.all()
    assert queries.difference_of_cells(p3, p1) == {Cell(0, 2), Cell(1, 2)}
    assert queries.difference_of_cells(p1, p3) == frozenset()


def test_set_algebra_on_empty_input(queries, filled_repository):
    p1 = filled_repository.all()[0]
    assert queries.union_of_cells([]) == frozenset()
    assert queries.intersection_of_cells([]) == frozenset()
    assert queries.union_of_cells(None) == frozenset()
    assert queries.difference_of_cells(p1, []) == p1.path.visited
    assert queries.difference_of_cells(p1, None) == p1.path.visited
    assert queries.difference_of_cells(None, p1) == frozenset()


def test_set_algebra_accepts_mixed_inputs(queries):
    path = Path(((5, 5), (5, 6)))
    result = queries.union_of_cells([path, [(0, 0)], [Cell(5, 5)]])
    assert result == {Cell(5, 5), Cell(5, 6), Cell(0, 0)}


def test_set_results_are_independent(queries, filled_repository):
    records = filled_repository.all()
    result = queries.union_of_cells(records)
    assert isinstance(result, frozenset)

    filled_repository.clear()
    assert Cell(0, 2) in result


def test_count_cell_frequency(queries):
    assert queries.count_cell_frequency() == {
        Cell(0, 0): 4,
        Cell(0, 1): 2,
        Cell(1, 1): 3,
        Cell(1, 0): 2,
        Cell(0, 2): 1,
        Cell(1, 2): 1,
    }


def test_count_cell_frequency_counts_paths_not_visits():
    repo = PathRepository()
    repo.insert([(0, 0), (0, 1), (0, 0)])
    assert PathQueries(repo).count_cell_frequency()[Cell(0, 0)] == 1


def test_top_visited_cells(queries):
    assert queries.top_visited_cells(2) == [(Cell(0, 0), 4), (Cell(1, 1), 3)]
    assert queries.top_visited_cells(4)[2:] == [(Cell(0, 1), 2), (Cell(1, 0), 2)]
    assert queries.top_visited_cells(0) == []


def test_group_by_length(queries):
    groups = queries.group_by_length()
    assert {k: _ids(v) for k, v in groups.items()} == {2: [P4], 3: [P1, P2], 5: [P3]}


def test_summaries(queries):
    first = queries.summaries()[0]
    assert first == PathSummary(id=P1, start=Cell(0, 0), end=Cell(1, 1), length=3)
    assert first.to_dict() == {"id": P1, "start": [0, 0], "end": [1, 1], "length": 3}


def test_pipeline_stage_order(queries):
    result = queries.pipeline(3, 5, 2)

    assert [s.id for s in result] == [P1, P2]
    assert all(isinstance(s, PathSummary) for s in result)
    assert result[0].start == Cell(0, 0)
    assert result[0].end == Cell(1, 1)


def test_pipeline_limits_after_sorting(queries):
    # P3 is inserted before P4 but sorts after it
    assert [s.id for s in queries.pipeline(2, 5, 1)] == [P4]
    assert [s.length for s in queries.pipeline(1, 10, 10)] == [2, 3, 3, 5]


@pytest.mark.parametrize("limit", [0, -1])
def test_pipeline_non_positive_limit(queries, limit):
    assert queries.pipeline(1, 10, limit) == []


def test_queries_do_not_mutate(queries, filled_repository):
    before = filled_repository.all()
    queries.sort_by_length_then_recency_desc()
    queries.top_shortest(2)
    queries.pipeline(1, 10, 3)
    queries.count_cell_frequency()
    assert filled_repository.all() == before
    assert [r.seq for r in filled_repository.all()] == [0, 1, 2, 3]
