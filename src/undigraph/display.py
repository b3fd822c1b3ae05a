"""
Text rendering of graphs, traversal results and paths.

These functions only read from the graph and from result objects. Each one
returns a string so callers decide where the output goes.
"""

from typing import List, Optional

from .core.graph import UndirectedGraph
from .core.traversal import BFSResult, DFSResult


def format_edges(graph: UndirectedGraph, label: str) -> str:
    """Render the adjacency list of one vertex."""
    targets = "".join(f"{target} " for target in graph.get_neighbors(label))
    return f"Edges to: {targets}"


def format_graph(graph: UndirectedGraph) -> str:
    """Render every vertex and its edges, one vertex per line."""
    return "\n".join(
        f"Vertex: {label}, {format_edges(graph, label)}" for label in graph.get_vertices()
    )


def format_bfs(graph: UndirectedGraph, result: BFSResult) -> str:
    """Render every vertex with its BFS distance and edges."""
    lines = []
    for label in graph.get_vertices():
        distance = result.distance(label)
        lines.append(f"Vertex: {label}, d = {distance}, {format_edges(graph, label)}")
    return "\n".join(lines)


def format_dfs(graph: UndirectedGraph, result: DFSResult) -> str:
    """Render every vertex with its DFS timestamps and edges."""
    lines = []
    for label in graph.get_vertices():
        rec = result.record(label)
        discovery = "-" if rec.discovery_time is None else rec.discovery_time
        finishing = "-" if rec.finishing_time is None else rec.finishing_time
        lines.append(
            f"Vertex: {label}, discovery time = {discovery}, "
            f"finishing time = {finishing}, {format_edges(graph, label)}"
        )
    return "\n".join(lines)


def format_path(path: Optional[List[str]], source: str, target: str) -> str:
    """
    Render a path as comma separated labels.

    Args:
        path: Labels from source to target, or None if there is no path
        source: Label of the start vertex
        target: Label of the destination vertex

    Returns:
        ``"0, 1, 2"`` style text, or a no-path message
    """
    if path is None:
        return f"No path from {source} to {target} exists"
    return ", ".join(path)
