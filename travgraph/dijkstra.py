"""Dijkstra's single-source shortest paths over non-negative weights."""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING, List, Optional, Tuple

from .state import Distance, ShortestPathResult, VertexId, WorkState

if TYPE_CHECKING:  # pragma: no cover
    from .graph import Graph


def _run(graph: "Graph", source: VertexId, target: Optional[VertexId]) -> ShortestPathResult:
    st = WorkState.fresh(graph.n, source)
    dist = st.distances
    pred = st.predecessors
    done = st.visited

    pq: List[Tuple[Distance, VertexId]] = [(0, source)]
    relaxations = 0
    stale = 0

    while pq:
        _, u = heapq.heappop(pq)
        # No decrease-key: older entries for a finalized vertex are skipped.
        if done[u]:
            stale += 1
            continue
        done[u] = True
        st.order.append(u)
        if u == target:
            break

        du = dist[u]
        for v, w in graph.vertices[u].adjacency.items():
            if not done[v] and dist[v] > du + w:
                dist[v] = du + w
                pred[v] = u
                relaxations += 1
                heapq.heappush(pq, (dist[v], v))

    graph.logger.debug(
        "dijkstra",
        source=source,
        target=target,
        finalized=len(st.order),
        relaxations=relaxations,
        stale_pops=stale,
    )
    return ShortestPathResult.from_state(source, st, target=target)


def shortest_paths(graph: "Graph", source: VertexId) -> ShortestPathResult:
    """Finalize every vertex reachable from ``source``.

    Args:
        graph: Graph with non-negative edge weights.
        source: Source vertex identifier.

    Returns:
        Distances and predecessors for all vertices; unreachable vertices
        have distance ``INF``.

    Raises:
        InvalidArgument: If ``source`` is out of range.
    """
    source = graph.check_vertex(source)
    return _run(graph, source, None)


def shortest_path_to(graph: "Graph", source: VertexId, target: VertexId) -> ShortestPathResult:
    """Run Dijkstra from ``source`` until ``target`` is finalized.

    The search stops as soon as ``target`` is extracted from the queue, so
    only ``target`` and the vertices finalized before it carry final
    distances.

    Raises:
        InvalidArgument: If ``source`` or ``target`` is out of range.
    """
    source = graph.check_vertex(source)
    target = graph.check_vertex(target)
    return _run(graph, source, target)


__all__ = ["shortest_paths", "shortest_path_to"]
