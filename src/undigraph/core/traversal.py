"""
Breadth-first and depth-first search over an undirected graph.

Traversals never write to the graph. Each run builds a fresh table of
VertexRecord entries, one per vertex, and returns it wrapped in a BFSResult or
DFSResult. Several results for the same graph can therefore coexist; they
remain meaningful until the graph is mutated.

Within one run every vertex moves UNVISITED -> DISCOVERED -> VISITED and never
moves back.
"""

import logging
import math
from collections import deque
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Deque, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from .exceptions import VertexNotFoundError
from .paths import path_or_raise

if TYPE_CHECKING:
    from .graph import UndirectedGraph

logger = logging.getLogger(__name__)

# Distance of a vertex the search never reached
UNREACHED = math.inf

Distance = Union[int, float]


class VertexState(Enum):
    """Progress of a vertex within a single traversal."""

    UNVISITED = "unvisited"
    DISCOVERED = "discovered"
    VISITED = "visited"


@dataclass
class VertexRecord:
    """
    Per-run traversal metadata for one vertex.

    Attributes:
        state: Current VertexState
        parent: Label of the predecessor in the search tree, if any
        distance: Edge count from the BFS source, UNREACHED otherwise
        discovery_time: DFS clock value when the vertex was first reached
        finishing_time: DFS clock value when its subtree was done
    """

    state: VertexState = VertexState.UNVISITED
    parent: Optional[str] = None
    distance: Distance = UNREACHED
    discovery_time: Optional[int] = None
    finishing_time: Optional[int] = None

    @property
    def discovered(self) -> bool:
        return self.state is not VertexState.UNVISITED

    @property
    def visited(self) -> bool:
        return self.state is VertexState.VISITED


class TraversalResult:
    """Read-only view over the records produced by one traversal."""

    def __init__(self, records: Dict[str, VertexRecord], source: Optional[str] = None):
        self._records = records
        self.source = source

    @property
    def records(self) -> Mapping[str, VertexRecord]:
        return MappingProxyType(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, label: object) -> bool:
        return label in self._records

    def record(self, label: str) -> VertexRecord:
        """Get the record for a vertex, raising if the label is unknown."""
        try:
            return self._records[label]
        except KeyError:
            raise VertexNotFoundError(label) from None

    def state(self, label: str) -> VertexState:
        return self.record(label).state

    def parent(self, label: str) -> Optional[str]:
        return self.record(label).parent

    def is_reachable(self, label: str) -> bool:
        """Check if the traversal discovered the vertex."""
        return self.record(label).discovered

    def parents(self) -> Dict[str, Optional[str]]:
        """Get a copy of the parent pointers keyed by label."""
        return {label: rec.parent for label, rec in self._records.items()}


class BFSResult(TraversalResult):
    """
    Outcome of a breadth-first search.

    Attributes:
        source (str): Label the search started from
        order (List[str]): Labels in the order they were dequeued
    """

    def __init__(self, records: Dict[str, VertexRecord], source: str, order: List[str]):
        super().__init__(records, source)
        self.order = order

    def distance(self, label: str) -> Distance:
        return self.record(label).distance

    def distances(self) -> Dict[str, Distance]:
        return {label: rec.distance for label, rec in self._records.items()}

    def path_to(self, target: str) -> List[str]:
        """
        Reconstruct the path from this search's source to ``target``.

        Args:
            target: Label of the destination vertex

        Returns:
            Labels from the source to the target, both included

        Raises:
            VertexNotFoundError: If the target is not in the graph
            NoPathError: If the target was not reached from the source
        """
        self.record(target)
        return path_or_raise(self.parents(), self.source, target)


class DFSResult(TraversalResult):
    """
    Outcome of a depth-first search.

    Attributes:
        source (Optional[str]): Start label for a single-source search,
            None when the whole graph was searched
        roots (List[str]): Roots of the DFS trees in discovery order
    """

    def __init__(
        self,
        records: Dict[str, VertexRecord],
        roots: List[str],
        source: Optional[str] = None,
    ):
        super().__init__(records, source)
        self.roots = roots

    def discovery_time(self, label: str) -> Optional[int]:
        return self.record(label).discovery_time

    def finishing_time(self, label: str) -> Optional[int]:
        return self.record(label).finishing_time

    def interval(self, label: str) -> Optional[Tuple[int, int]]:
        """Get the (discovery, finishing) pair, or None if never reached."""
        rec = self.record(label)
        if rec.discovery_time is None or rec.finishing_time is None:
            return None
        return rec.discovery_time, rec.finishing_time

    def order(self) -> List[str]:
        """Discovered labels sorted by discovery time."""
        reached = [label for label, rec in self._records.items() if rec.discovered]
        return sorted(reached, key=lambda label: self._records[label].discovery_time)


def _fresh_records(graph: "UndirectedGraph") -> Dict[str, VertexRecord]:
    return {label: VertexRecord() for label in graph.get_vertices()}


def breadth_first_search(graph: "UndirectedGraph", source: str) -> BFSResult:
    """
    Perform a breadth-first search starting at ``source``.

    Neighbors are explored in adjacency insertion order, so ties between
    vertices at the same distance are broken first-in first-out.

    Args:
        graph: Graph to search
        source: Label of the root vertex

    Returns:
        BFSResult holding distances and parents for every vertex

    Raises:
        VertexNotFoundError: If the source is not in the graph
    """
    if not graph.has_vertex(source):
        raise VertexNotFoundError(source)

    logger.debug(f"Starting BFS from {source!r}")
    records = _fresh_records(graph)
    root = records[source]
    root.state = VertexState.DISCOVERED
    root.distance = 0

    queue: Deque[str] = deque([source])
    order: List[str] = []

    while queue:
        u = queue.popleft()
        u_rec = records[u]
        for v in graph.get_neighbors(u):
            v_rec = records[v]
            if v_rec.state is VertexState.UNVISITED:
                v_rec.state = VertexState.DISCOVERED
                v_rec.distance = u_rec.distance + 1
                v_rec.parent = u
                queue.append(v)
        u_rec.state = VertexState.VISITED
        order.append(u)

    logger.debug(f"BFS from {source!r} reached {len(order)} of {len(records)} vertices")
    return BFSResult(records, source, order)


class _DepthFirstVisitor:
    """Shared DFS clock and records for one depth-first search run."""

    def __init__(self, graph: "UndirectedGraph"):
        self.graph = graph
        self.records = _fresh_records(graph)
        self.time = 0

    def visit(self, root: str) -> None:
        """
        Visit every vertex reachable from ``root`` depth first.

        Uses an explicit stack of (label, neighbor iterator) pairs instead
        of recursion, so depth is limited only by memory.
        """
        self._discover(root)
        stack: List[Tuple[str, Iterator[str]]] = [(root, self.graph.iter_neighbors(root))]

        while stack:
            u, neighbors = stack[-1]
            for v in neighbors:
                v_rec = self.records[v]
                if v_rec.state is VertexState.UNVISITED:
                    v_rec.parent = u
                    self._discover(v)
                    stack.append((v, self.graph.iter_neighbors(v)))
                    break
            else:
                stack.pop()
                self._finish(u)

    def _discover(self, label: str) -> None:
        self.time += 1
        rec = self.records[label]
        rec.discovery_time = self.time
        rec.state = VertexState.DISCOVERED

    def _finish(self, label: str) -> None:
        rec = self.records[label]
        rec.state = VertexState.VISITED
        self.time += 1
        rec.finishing_time = self.time


def depth_first_search(graph: "UndirectedGraph", source: Optional[str] = None) -> DFSResult:
    """
    Perform a depth-first search of the graph.

    Without a source, every vertex is visited: vertices are taken in mapping
    order and each one still undiscovered becomes the root of a new DFS
    tree, producing a forest. With a source, only the vertices reachable
    from it are visited; the rest keep no timestamps.

    Discovery and finishing times share a single clock, so for any two
    vertices the intervals are either nested or disjoint.

    Args:
        graph: Graph to search
        source: Optional label of the only root

    Returns:
        DFSResult holding timestamps and parents for every vertex

    Raises:
        VertexNotFoundError: If a source is given and is not in the graph
    """
    if source is not None and not graph.has_vertex(source):
        raise VertexNotFoundError(source)

    visitor = _DepthFirstVisitor(graph)
    roots: List[str] = []

    if source is not None:
        logger.debug(f"Starting DFS from {source!r}")
        roots.append(source)
        visitor.visit(source)
    else:
        logger.debug(f"Starting DFS over {len(visitor.records)} vertices")
        for label, rec in visitor.records.items():
            if rec.state is VertexState.UNVISITED:
                roots.append(label)
                visitor.visit(label)

    logger.debug(f"DFS finished at time {visitor.time} with {len(roots)} tree(s)")
    return DFSResult(visitor.records, roots, source)
