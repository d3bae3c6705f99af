"""Utilities for reconstructing and formatting paths from predecessor arrays."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .exceptions import AlgorithmError

VertexId = int

NO_PATH = "No path exists"
ARROW = " -> "


def reconstruct_path(
    predecessors: List[Optional[VertexId]],
    source: VertexId,
    target: VertexId,
) -> List[VertexId]:
    """Return the path from ``source`` to ``target`` using a predecessor array.

    Args:
        predecessors: Predecessor of each vertex or ``None`` if unreached or
            the root of the search.
        source: Source vertex identifier.
        target: Target vertex identifier.

    Returns:
        Vertices from source to target (inclusive). Returns an empty list if
        the chain from ``target`` ends at a root other than ``source``.

    Raises:
        ValueError: If ``source`` or ``target`` is out of range.
        AlgorithmError: If the predecessor chain contains a cycle.
    """
    n = len(predecessors)
    if not (0 <= source < n and 0 <= target < n):
        raise ValueError("source/target out of range.")
    if source == target:
        return [source]

    # Walk backwards from target to source
    chain: List[VertexId] = []
    cur: Optional[VertexId] = target
    seen = set()
    while cur is not None:
        if cur in seen:
            raise AlgorithmError(f"predecessor cycle through vertex {cur}")
        seen.add(cur)
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        cur = predecessors[cur]

    return []


def format_path(path: Iterable[VertexId]) -> str:
    """Join vertex ids with arrows, or return :data:`NO_PATH` for an empty path."""
    ids = [str(v) for v in path]
    if not ids:
        return NO_PATH
    return ARROW.join(ids)


__all__ = ["NO_PATH", "reconstruct_path", "format_path"]
