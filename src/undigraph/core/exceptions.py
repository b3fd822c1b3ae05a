"""
Custom exceptions for the undirected graph engine.

This module defines the hierarchy of exceptions raised by the graph, its
traversals and the path reconstruction helpers. Every exception derives from
GraphError so callers can catch the whole family with a single clause.
"""


class GraphError(Exception):
    """Base class for all errors raised by undigraph."""


class ValidationError(GraphError):
    """
    Raised when input data fails validation.

    Examples:
        * Empty or non-string vertex labels
        * Non-integer edge weights
        * Malformed edge-list documents
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class ConfigurationError(GraphError):
    """
    Raised when configuration is invalid.

    Examples:
        * Wrong type for a GraphConfig field
    """


class ResourceNotFoundError(GraphError):
    """
    Raised when a requested resource is not found.

    This exception is raised when attempting to access or operate on a
    resource that does not exist in the graph.
    """


class VertexNotFoundError(ResourceNotFoundError, KeyError):
    """
    Raised when a vertex label is absent from the vertex mapping.

    Traversals, path reconstruction and the per-vertex accessors raise this
    error. Edge insertion never does, since it creates missing vertices.

    Attributes:
        label (str): The label that could not be found
    """

    def __init__(self, label: str):
        self.label = label
        super().__init__(label)

    def __str__(self) -> str:
        return f"Vertex '{self.label}' not found in the graph"


class GraphOperationError(GraphError):
    """
    Raised when a graph operation cannot produce a result.

    Examples:
        * Requesting a path to a vertex that the search never reached
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class NoPathError(GraphOperationError):
    """
    Raised when no path exists between two vertices.

    Attributes:
        source (str): Label the search started from
        target (str): Label that could not be reached
    """

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"No path from {source} to {target} exists")
