"""
Undirected graph with adjacency list representation.

This module provides the UndirectedGraph class. It owns a mapping from vertex
label to Vertex and stores every undirected connection as two Edge records,
one in each endpoint's adjacency list. Vertices are created lazily the first
time an edge refers to them.

Traversals are delegated to undigraph.core.traversal and return per-run
result objects; the graph itself holds no search state.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .config import GraphConfig
from .exceptions import VertexNotFoundError
from .models import Edge, Vertex, validate_label, validate_weight
from .traversal import BFSResult, DFSResult, breadth_first_search, depth_first_search

logger = logging.getLogger(__name__)

EdgeSpec = Union[Tuple[str, str], Tuple[str, str, int]]


class UndirectedGraph:
    """
    Undirected graph keyed by vertex label.

    Attributes:
        config (GraphConfig): Edge insertion options
        _vertices (Dict[str, Vertex]): Vertices in insertion order
        _edge_count (int): Number of undirected edges kept
    """

    def __init__(
        self,
        edges: Optional[Iterable[EdgeSpec]] = None,
        config: Optional[GraphConfig] = None,
    ):
        """
        Initialize graph, optionally from a list of edges.

        Args:
            edges: Iterable of ``(a, b)`` or ``(a, b, weight)`` tuples
            config: Edge insertion options (default: GraphConfig())
        """
        self.config = config or GraphConfig()
        self._vertices: Dict[str, Vertex] = {}
        self._edge_count = 0
        if edges:
            self.add_edges(edges)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        return label in self._vertices

    def __iter__(self) -> Iterator[str]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return f"UndirectedGraph(vertices={self.vertex_count()}, edges={self.edge_count()})"

    def _get_or_create(self, label: str) -> Vertex:
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = Vertex(label)
            self._vertices[label] = vertex
        return vertex

    def add_edge(self, a: str, b: str, weight: Optional[int] = None) -> bool:
        """
        Add the undirected edge (a, b) to the graph.

        Missing vertices are created. An edge record is appended to each
        endpoint's adjacency list, so a repeated call adds a parallel edge
        unless the config forbids them. A self-loop puts two records on the
        same vertex.

        Args:
            a: Label of one endpoint
            b: Label of the other endpoint
            weight: Edge weight (default: config.default_weight)

        Returns:
            True if the edge was added, False if it was dropped as a duplicate

        Raises:
            ValidationError: If a label or the weight is invalid
        """
        validate_label(a)
        validate_label(b)
        if weight is None:
            weight = self.config.default_weight
        validate_weight(weight)

        if not self.config.allow_parallel_edges:
            existing = self._vertices.get(a)
            if existing is not None and existing.has_edge_to(b):
                logger.debug(f"Ignoring parallel edge ({a!r}, {b!r})")
                return False

        # add edge (a, b)
        self._get_or_create(a).add_edge(b, weight)
        # add edge (b, a)
        self._get_or_create(b).add_edge(a, weight)
        self._edge_count += 1
        logger.debug(f"Added edge ({a!r}, {b!r}) with weight {weight}")
        return True

    def add_edges(self, edges: Iterable[EdgeSpec]) -> int:
        """
        Add multiple edges.

        Args:
            edges: Iterable of ``(a, b)`` or ``(a, b, weight)`` tuples

        Returns:
            Number of edges actually added
        """
        added = 0
        for spec in edges:
            if self.add_edge(*spec):
                added += 1
        return added

    def clear(self) -> None:
        """Remove all vertices and their edges from the graph."""
        for vertex in self._vertices.values():
            vertex.clear()
        self._vertices.clear()
        self._edge_count = 0
        logger.debug("Cleared graph")

    def has_vertex(self, label: str) -> bool:
        """Check if a vertex exists in the graph."""
        return label in self._vertices

    def get_vertex(self, label: str) -> Vertex:
        """Get a vertex, raising VertexNotFoundError if it doesn't exist."""
        try:
            return self._vertices[label]
        except KeyError:
            raise VertexNotFoundError(label) from None

    def get_vertices(self) -> List[str]:
        """Get all vertex labels in insertion order."""
        return list(self._vertices)

    def get_edges(self, label: str) -> List[Edge]:
        """Get a copy of a vertex's adjacency list."""
        return list(self.get_vertex(label).adjacency)

    def get_neighbors(self, label: str) -> List[str]:
        """Get neighbor labels in adjacency order, parallel edges repeated."""
        return list(self.get_vertex(label).neighbors())

    def iter_neighbors(self, label: str) -> Iterator[str]:
        return self.get_vertex(label).neighbors()

    def get_degree(self, label: str) -> int:
        return self.get_vertex(label).degree()

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        """Get the number of undirected edges, parallel edges counted separately."""
        return self._edge_count

    def breadth_first_search(self, source: str) -> BFSResult:
        """Run BFS from ``source``. See traversal.breadth_first_search."""
        return breadth_first_search(self, source)

    def depth_first_search(self, source: Optional[str] = None) -> DFSResult:
        """Run DFS over the whole graph, or only from ``source`` if given."""
        return depth_first_search(self, source)

    def find_path(self, source: str, target: str) -> List[str]:
        """
        Find the shortest path from ``source`` to ``target``.

        Runs a fresh BFS from the source and follows its parent pointers.

        Args:
            source: Label of the start vertex
            target: Label of the destination vertex

        Returns:
            Labels along the path, both endpoints included

        Raises:
            VertexNotFoundError: If either label is not in the graph
            NoPathError: If the target is not reachable from the source
        """
        return self.breadth_first_search(source).path_to(target)

    @classmethod
    def from_edges(
        cls, edges: Iterable[EdgeSpec], config: Optional[GraphConfig] = None
    ) -> "UndirectedGraph":
        """Create an UndirectedGraph instance from a list of edges."""
        return cls(edges, config=config)
