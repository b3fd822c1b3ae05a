"""
Path reconstruction from breadth-first search parent pointers.

The parent pointers must form a tree rooted at the source, which is exactly
what a BFS from that source produces. DFS parents describe a different tree
and are not accepted by BFSResult.path_to.
"""

from typing import List, Mapping, Optional

from .exceptions import NoPathError, VertexNotFoundError


def reconstruct_path(
    parents: Mapping[str, Optional[str]], source: str, target: str
) -> Optional[List[str]]:
    """
    Walk parent pointers back from ``target`` to ``source``.

    Args:
        parents: Parent label of each vertex, None for roots and unreached vertices
        source: Label the search started from
        target: Label of the destination vertex

    Returns:
        Labels from source to target inclusive, ``[source]`` when both are
        the same vertex, or None when the target is not connected to the
        source through the parent pointers

    Raises:
        VertexNotFoundError: If either label is missing from ``parents``
    """
    for label in (source, target):
        if label not in parents:
            raise VertexNotFoundError(label)

    path = [target]
    current = target
    # A well-formed tree has at most len(parents) hops to its root
    for _ in range(len(parents)):
        if current == source:
            path.reverse()
            return path
        parent = parents[current]
        if parent is None:
            return None
        path.append(parent)
        current = parent
    return None


def path_or_raise(
    parents: Mapping[str, Optional[str]], source: Optional[str], target: str
) -> List[str]:
    """Same as reconstruct_path, but raise NoPathError instead of returning None."""
    if source is None:
        raise NoPathError("<none>", target)
    path = reconstruct_path(parents, source, target)
    if path is None:
        raise NoPathError(source, target)
    return path
