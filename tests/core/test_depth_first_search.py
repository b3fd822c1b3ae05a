"""Tests for depth-first search."""

import itertools
import sys

import pytest

from undigraph.core.exceptions import VertexNotFoundError
from undigraph.core.graph import UndirectedGraph
from undigraph.core.traversal import DFSResult, VertexState, depth_first_search


def assert_parenthesis_structure(result: DFSResult) -> None:
    """Check that every pair of intervals is nested or disjoint."""
    intervals = [result.interval(label) for label in result]
    intervals = [iv for iv in intervals if iv is not None]
    for (d1, f1), (d2, f2) in itertools.combinations(intervals, 2):
        nested = d1 < d2 < f2 < f1 or d2 < d1 < f1 < f2
        disjoint = f1 < d2 or f2 < d1
        assert nested or disjoint, f"[{d1}, {f1}] and [{d2}, {f2}] overlap"


def test_dfs_line_graph_timestamps(line_graph):
    """Test discovery and finishing times on the path 0 - 1 - 2."""
    result = line_graph.depth_first_search()

    assert [result.interval(label) for label in ("0", "1", "2")] == [(1, 6), (2, 5), (3, 4)]
    assert result.parent("0") is None
    assert result.parent("1") == "0"
    assert result.parent("2") == "1"
    assert result.roots == ["0"]
    assert result.source is None


def test_dfs_covers_disconnected_graph(disconnected_graph):
    """Test that the full search builds a forest over every component."""
    result = disconnected_graph.depth_first_search()

    assert result.roots == ["0", "2"]
    assert result.interval("0") == (1, 4)
    assert result.interval("1") == (2, 3)
    assert result.interval("2") == (5, 8)
    assert result.interval("3") == (6, 7)
    for label in disconnected_graph:
        assert result.state(label) is VertexState.VISITED


def test_dfs_follows_adjacency_order(sample_graph):
    """Test that the deepest unexplored edge is taken in insertion order."""
    result = sample_graph.depth_first_search()
    assert result.order() == ["r", "s", "w", "t", "x", "u", "y", "v"]
    assert result.parent("v") == "r"
    assert result.parent("y") == "u"


@pytest.mark.parametrize("fixture_name", ["sample_graph", "forest_graph", "disconnected_graph"])
def test_dfs_parenthesis_theorem(request, fixture_name):
    """Test that DFS intervals never partially overlap."""
    graph = request.getfixturevalue(fixture_name)
    result = graph.depth_first_search()
    assert_parenthesis_structure(result)


def test_dfs_timestamps_are_a_permutation(forest_graph):
    """Test that each clock tick is used exactly once."""
    result = forest_graph.depth_first_search()
    ticks = []
    for label in forest_graph:
        ticks.extend(result.interval(label))
    assert sorted(ticks) == list(range(1, 2 * forest_graph.vertex_count() + 1))


def test_dfs_descendant_intervals_nested_in_parent(sample_graph):
    """Test that each tree child finishes inside its parent's interval."""
    result = sample_graph.depth_first_search()
    for label in sample_graph:
        parent = result.parent(label)
        if parent is None:
            continue
        parent_start, parent_end = result.interval(parent)
        start, end = result.interval(label)
        assert parent_start < start < end < parent_end


def test_dfs_from_source_leaves_other_components(disconnected_graph):
    """Test that a single-source search does not touch unreachable vertices."""
    result = disconnected_graph.depth_first_search("2")

    assert result.source == "2"
    assert result.roots == ["2"]
    assert result.interval("2") == (1, 4)
    assert result.interval("3") == (2, 3)
    for label in ("0", "1"):
        assert result.state(label) is VertexState.UNVISITED
        assert result.discovery_time(label) is None
        assert result.finishing_time(label) is None
        assert result.parent(label) is None
        assert result.interval(label) is None
    assert result.order() == ["2", "3"]


def test_dfs_from_source_in_middle(line_graph):
    """Test a single-source search that starts at an inner vertex."""
    result = line_graph.depth_first_search("1")
    assert result.interval("1") == (1, 6)
    assert result.interval("0") == (2, 3)
    assert result.interval("2") == (4, 5)
    assert result.parent("0") == "1"
    assert result.parent("2") == "1"


def test_dfs_missing_source(line_graph):
    """Test that a missing source raises VertexNotFoundError."""
    with pytest.raises(VertexNotFoundError):
        line_graph.depth_first_search("missing")


def test_dfs_empty_graph():
    """Test that a full search of an empty graph finds nothing."""
    result = UndirectedGraph().depth_first_search()
    assert len(result) == 0
    assert result.roots == []


def test_dfs_clock_resets_between_runs(line_graph):
    """Test that each run starts its clock at zero."""
    line_graph.depth_first_search()
    result = line_graph.depth_first_search("2")
    assert result.discovery_time("2") == 1


def test_dfs_deep_path_does_not_recurse():
    """Test a path far longer than the interpreter recursion limit."""
    length = sys.getrecursionlimit() * 5
    graph = UndirectedGraph((str(i), str(i + 1)) for i in range(length))

    result = depth_first_search(graph, "0")

    assert result.discovery_time(str(length)) == length + 1
    assert result.finishing_time("0") == 2 * (length + 1)
    assert result.parent(str(length)) == str(length - 1)


def test_dfs_with_self_loop_and_parallel_edges():
    """Test that repeated edges are skipped once their target is discovered."""
    graph = UndirectedGraph([("a", "a"), ("a", "b"), ("a", "b")])
    result = graph.depth_first_search()
    assert result.interval("a") == (1, 4)
    assert result.interval("b") == (2, 3)
