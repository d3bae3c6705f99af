"""Breadth-first and depth-first search."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Callable

from .state import Color, TraversalResult, VertexId, WorkState

if TYPE_CHECKING:  # pragma: no cover
    from .graph import Graph


def _scan(graph: "Graph", st: WorkState, u: VertexId, push: Callable[[VertexId], None]) -> None:
    # Discover every unvisited neighbor of u, then finish u.
    du = st.distances[u]
    for v in graph.vertices[u].adjacency:
        if st.colors[v] is Color.UNVISITED:
            st.colors[v] = Color.DISCOVERED
            st.distances[v] = du + 1
            st.predecessors[v] = u
            push(v)
    st.colors[u] = Color.FINISHED
    st.order.append(u)


def bfs(graph: "Graph", source: VertexId) -> TraversalResult:
    """Run breadth-first search from ``source``.

    Neighbors are discovered in adjacency insertion order. On return
    ``distances`` hold the minimum number of edges from ``source``; vertices
    that cannot be reached keep ``INF``.

    Raises:
        InvalidArgument: If ``source`` is not a vertex of ``graph``.
    """
    source = graph.check_vertex(source)
    st = WorkState.fresh(graph.n, source)
    st.colors[source] = Color.DISCOVERED

    queue = deque([source])
    while queue:
        _scan(graph, st, queue.popleft(), queue.append)

    graph.logger.debug("bfs", source=source, reached=len(st.order))
    return TraversalResult.from_state(source, st)


def dfs(graph: "Graph", source: VertexId) -> TraversalResult:
    """Run iterative depth-first search from ``source``.

    A vertex is marked discovered, and gets its depth and predecessor, when
    it is pushed on the stack. ``distances`` are therefore tree depths under
    this stack order, not the discovery times of recursive DFS.

    Raises:
        InvalidArgument: If ``source`` is not a vertex of ``graph``.
    """
    source = graph.check_vertex(source)
    st = WorkState.fresh(graph.n, source)
    st.colors[source] = Color.DISCOVERED

    stack = [source]
    while stack:
        _scan(graph, st, stack.pop(), stack.append)

    graph.logger.debug("dfs", source=source, reached=len(st.order))
    return TraversalResult.from_state(source, st)


__all__ = ["bfs", "dfs"]
