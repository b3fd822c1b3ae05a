"""Shared test fixtures."""

import pytest

from undigraph.core.graph import UndirectedGraph


@pytest.fixture
def line_graph() -> UndirectedGraph:
    """Fixture providing the path 0 - 1 - 2."""
    return UndirectedGraph([("0", "1"), ("1", "2")])


@pytest.fixture
def disconnected_graph() -> UndirectedGraph:
    """Fixture providing two components: 0 - 1 and 2 - 3."""
    return UndirectedGraph([("0", "1"), ("2", "3")])


@pytest.fixture
def sample_graph() -> UndirectedGraph:
    """Fixture providing an eight vertex connected graph with cycles."""
    return UndirectedGraph(
        [
            ("r", "s"),
            ("r", "v"),
            ("s", "w"),
            ("w", "t"),
            ("w", "x"),
            ("t", "x"),
            ("t", "u"),
            ("x", "u"),
            ("x", "y"),
            ("u", "y"),
        ]
    )


@pytest.fixture
def forest_graph() -> UndirectedGraph:
    """Fixture providing three components, one of them a triangle."""
    return UndirectedGraph(
        [
            ("a", "b"),
            ("b", "c"),
            ("c", "a"),
            ("d", "e"),
            ("f", "g"),
            ("g", "h"),
        ]
    )
