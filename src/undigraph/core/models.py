"""
Vertex and edge models for the undirected graph.

A Vertex owns an ordered adjacency list of Edge records. Each Edge is a
directed reference to the label of another vertex; the graph stores an
undirected connection as two such records, one on each endpoint.
"""

from dataclasses import dataclass, field
from typing import Iterator, List

from .exceptions import ValidationError


def validate_label(label: str) -> None:
    """Validate that a vertex label is a non-empty string."""
    if not isinstance(label, str):
        raise ValidationError(f"vertex label must be a string, got {type(label).__name__}")
    if not label.strip():
        raise ValidationError("vertex label must be a non-empty string")


def validate_weight(weight: int) -> None:
    """Validate that an edge weight is an integer."""
    # bool subclasses int; reject it anyway
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValidationError(f"edge weight must be an integer, got {weight!r}")


@dataclass(frozen=True)
class Edge:
    """
    Reference from one vertex to another.

    Attributes:
        vertex_label (str): Label of the vertex this edge points at
        weight (int): Edge weight. Stored only; no algorithm reads it.
    """

    vertex_label: str
    weight: int = 0

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_label(self.vertex_label)
        validate_weight(self.weight)


@dataclass
class Vertex:
    """
    A named node in the graph.

    Attributes:
        label (str): Unique label of the vertex
        adjacency (List[Edge]): Outgoing edge records in insertion order
    """

    label: str
    adjacency: List[Edge] = field(default_factory=list)

    def __post_init__(self):
        validate_label(self.label)

    def add_edge(self, vertex_label: str, weight: int = 0) -> Edge:
        """Append an edge to the vertex with the given label."""
        edge = Edge(vertex_label, weight)
        self.adjacency.append(edge)
        return edge

    def has_edge_to(self, vertex_label: str) -> bool:
        """Check if any edge points at the given label."""
        return any(edge.vertex_label == vertex_label for edge in self.adjacency)

    def neighbors(self) -> Iterator[str]:
        """Yield neighbor labels in adjacency order, duplicates included."""
        for edge in self.adjacency:
            yield edge.vertex_label

    def degree(self) -> int:
        return len(self.adjacency)

    def clear(self) -> None:
        """Remove all of the edges from this vertex."""
        self.adjacency.clear()
