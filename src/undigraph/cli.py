"""Command Line Interface for the undirected graph engine.

This module builds a graph from a JSON edge-list document and runs one
operation on it. JSON input can be provided either as a direct string or as
a file path prefixed with '@'.

The CLI supports the following commands:
    - show: Display every vertex and its edges
    - bfs: Breadth-first search from a source vertex
    - dfs: Depth-first search of the whole graph or from one vertex
    - path: Shortest path between two vertices

Example Usage:
    python -m undigraph show '{"edges": [["0", "1"], ["1", "2"]]}'
    python -m undigraph bfs @graph.json 0
    python -m undigraph --log-level DEBUG path @graph.json 0 2
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, List, Optional

from .core.config import GraphConfig, setup_logging
from .core.exceptions import GraphError, NoPathError, ValidationError
from .core.graph import UndirectedGraph
from .display import format_bfs, format_dfs, format_graph, format_path
from .utils.validation import SchemaValidator

logger = logging.getLogger(__name__)


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.
                       Relative file paths are resolved against the current
                       directory.

    Returns:
        Any: Parsed JSON data.

    Raises:
        ValidationError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = os.path.abspath(json_str[1:])
        if not os.path.exists(file_path):
            raise ValidationError(f"File not found: {file_path}")

        try:
            with open(file_path, "r") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in {file_path}: {e}") from e

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON input: {e}") from e


def build_graph(document: Any) -> UndirectedGraph:
    """Validate a graph document and build the graph it describes.

    Args:
        document: Decoded JSON document.

    Returns:
        UndirectedGraph: Graph holding every edge from the document.

    Raises:
        ValidationError: If the document does not match the schema.
    """
    result = SchemaValidator().validate_document(document)
    if not result.is_valid:
        raise ValidationError("; ".join(result.errors))
    for warning in result.warnings:
        logger.warning(warning)

    config = GraphConfig(
        allow_parallel_edges=document.get("allow_parallel_edges", True),
        default_weight=document.get("default_weight", 0),
    )
    graph = UndirectedGraph(config=config)
    added = graph.add_edges(tuple(edge) for edge in document["edges"])
    logger.info(f"Built graph with {graph.vertex_count()} vertices and {added} edges")
    return graph


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="undigraph", description="Undirected graph search CLI")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    show = subparsers.add_parser("show", help="Display vertices and their edges")
    show.add_argument("graph", help="JSON string or @filename containing the edge list")

    bfs = subparsers.add_parser("bfs", help="Breadth-first search from a source vertex")
    bfs.add_argument("graph", help="JSON string or @filename containing the edge list")
    bfs.add_argument("source", help="Label of the source vertex")

    dfs = subparsers.add_parser("dfs", help="Depth-first search of the graph")
    dfs.add_argument("graph", help="JSON string or @filename containing the edge list")
    dfs.add_argument("--source", default=None, help="Only search from this vertex")

    path = subparsers.add_parser("path", help="Shortest path between two vertices")
    path.add_argument("graph", help="JSON string or @filename containing the edge list")
    path.add_argument("source", help="Label of the start vertex")
    path.add_argument("target", help="Label of the destination vertex")

    return parser


def run(args: argparse.Namespace) -> str:
    """Execute a parsed command and return its output text."""
    graph = build_graph(parse_json_input(args.graph))

    if args.command == "show":
        return format_graph(graph)
    if args.command == "bfs":
        return format_bfs(graph, graph.breadth_first_search(args.source))
    if args.command == "dfs":
        return format_dfs(graph, graph.depth_first_search(args.source))
    if args.command == "path":
        try:
            found: Optional[List[str]] = graph.find_path(args.source, args.target)
        except NoPathError:
            found = None
        return format_path(found, args.source, args.target)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        int: Process exit status.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    try:
        setup_logging(args.log_level)
        print(run(args))
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
