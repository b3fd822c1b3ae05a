"""Core graph functionality."""

from .config import GraphConfig, setup_logging
from .exceptions import (
    ConfigurationError,
    GraphError,
    GraphOperationError,
    NoPathError,
    ResourceNotFoundError,
    ValidationError,
    VertexNotFoundError,
)
from .models import Edge, Vertex
from .paths import reconstruct_path
from .traversal import (
    UNREACHED,
    BFSResult,
    DFSResult,
    VertexRecord,
    VertexState,
    breadth_first_search,
    depth_first_search,
)
from .graph import UndirectedGraph

__all__ = [
    "BFSResult",
    "ConfigurationError",
    "DFSResult",
    "Edge",
    "GraphConfig",
    "GraphError",
    "GraphOperationError",
    "NoPathError",
    "ResourceNotFoundError",
    "UNREACHED",
    "UndirectedGraph",
    "ValidationError",
    "Vertex",
    "VertexNotFoundError",
    "VertexRecord",
    "VertexState",
    "breadth_first_search",
    "depth_first_search",
    "reconstruct_path",
    "setup_logging",
]
