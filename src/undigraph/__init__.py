"""
undigraph: an undirected graph with breadth-first and depth-first search.
"""

from .core.config import GraphConfig
from .core import (
    UNREACHED,
    BFSResult,
    DFSResult,
    GraphError,
    NoPathError,
    UndirectedGraph,
    ValidationError,
    VertexNotFoundError,
    VertexState,
)

__version__ = "0.1.0"

__all__ = [
    "BFSResult",
    "DFSResult",
    "GraphConfig",
    "GraphError",
    "NoPathError",
    "UNREACHED",
    "UndirectedGraph",
    "ValidationError",
    "VertexNotFoundError",
    "VertexState",
]
