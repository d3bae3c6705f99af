"""Fixed-size weighted graph with BFS, DFS and Dijkstra entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union, overload

import numpy as np
import numpy.typing as npt

from .dijkstra import shortest_path_to, shortest_paths
from .exceptions import InvalidArgument
from .logger import Logger, NoopLogger
from .matrix import adjacency_matrix
from .path import format_path
from .search import bfs, dfs
from .state import INF, Distance, TraversalResult, VertexId, vertex_index

Weight = int
Edge = Tuple[VertexId, VertexId, Weight]


@dataclass(eq=False)
class Vertex:
    """A vertex and its outgoing arcs.

    Attributes:
        id: Permanent index of the vertex in its graph.
        adjacency: Neighbor index to edge weight, in insertion order. Writing
            an existing neighbor overwrites its weight.
    """

    id: int
    adjacency: Dict[VertexId, Weight] = field(default_factory=dict)


@dataclass(eq=False)
class Graph:
    """Graph over the vertex set ``0 .. n-1`` with integer edge weights.

    The vertex set is fixed at construction. Edges may be directed or
    undirected (stored as two arcs) and adding an edge twice overwrites the
    weight. Algorithms keep their working state per call and hand back
    result objects, so the graph itself only ever holds topology.

    Weights must be non-negative for Dijkstra to be correct. This is not
    enforced; inserting a negative weight logs a ``negative_weight`` warning.

    Attributes:
        n: Number of vertices.
        logger: Event logger used by the algorithms.
        vertices: ``vertices[i].id == i`` for every ``i``.
    """

    n: int
    logger: Logger = field(default_factory=NoopLogger, repr=False)

    def __post_init__(self) -> None:
        """Validate the vertex count and allocate the vertices."""
        if isinstance(self.n, bool) or not isinstance(self.n, int) or self.n < 1:
            raise InvalidArgument(f"vertex count must be a positive integer, got {self.n!r}")
        self.vertices: List[Vertex] = [Vertex(i) for i in range(self.n)]
        self._edges = 0

    @classmethod
    def from_edges(
        cls,
        n: int,
        edges: Iterable[Edge],
        directed: bool = True,
        logger: Optional[Logger] = None,
    ) -> "Graph":
        """Create a graph from an iterable of ``(u, v, w)`` tuples.

        Args:
            n: Number of vertices.
            edges: Edges to insert, in order.
            directed: Insert each tuple as one arc, or as an undirected edge.
            logger: Optional event logger.

        Returns:
            A graph populated with the provided edges.
        """
        g = cls(n, logger=logger or NoopLogger())
        add = g.add_edge if directed else g.add_undirected_edge
        for u, v, w in edges:
            add(u, v, w)
        return g

    # ---------- validation ------------------------------------------------

    def check_vertex(self, v: VertexId) -> VertexId:
        """Return ``v`` as an ``int``; raise :class:`InvalidArgument` if not in ``[0, n)``."""
        return vertex_index(v, self.n)

    # ---------- mutation --------------------------------------------------

    def _put(self, u: VertexId, v: VertexId, w: Weight) -> None:
        if w < 0:
            self.logger.warning("negative_weight", u=u, v=v, w=w)
        self.vertices[u].adjacency[v] = w

    def add_edge(self, src: VertexId, dst: VertexId, weight: Weight) -> None:
        """Add or overwrite the directed arc ``src -> dst``.

        Raises:
            InvalidArgument: If ``src`` or ``dst`` is out of range.

        Examples:
            ```python
            >>> g = Graph(2)
            >>> g.add_edge(0, 1, 5)
            >>> g.weight(0, 1), g.weight(1, 0)
            (5, None)
            ```
        """
        src = self.check_vertex(src)
        dst = self.check_vertex(dst)
        self._put(src, dst, weight)
        self._edges += 1

    def add_undirected_edge(self, a: VertexId, b: VertexId, weight: Weight) -> None:
        """Add or overwrite the arcs ``a -> b`` and ``b -> a``.

        Counts as a single insertion in :meth:`edge_count`.

        Raises:
            InvalidArgument: If ``a`` or ``b`` is out of range.
        """
        a = self.check_vertex(a)
        b = self.check_vertex(b)
        self._put(a, b, weight)
        self._put(b, a, weight)
        self._edges += 1

    # ---------- accessors -------------------------------------------------

    def vertex_count(self) -> int:
        return self.n

    def edge_count(self) -> int:
        """Return the number of edge insertion calls made so far."""
        return self._edges

    def weight(self, u: VertexId, v: VertexId) -> Optional[Weight]:
        """Return ``w(u, v)`` or ``None`` if there is no arc."""
        u = self.check_vertex(u)
        v = self.check_vertex(v)
        return self.vertices[u].adjacency.get(v)

    def neighbors(self, u: VertexId) -> Iterator[Tuple[VertexId, Weight]]:
        """Return an iterator over the ``(v, w)`` arcs leaving ``u`` in insertion order.

        Raises:
            InvalidArgument: If ``u`` is out of range, when called.
        """
        u = self.check_vertex(u)
        return iter(list(self.vertices[u].adjacency.items()))

    def out_degree(self, u: VertexId) -> int:
        u = self.check_vertex(u)
        return len(self.vertices[u].adjacency)

    # ---------- algorithms ------------------------------------------------

    def bfs(self, source: VertexId) -> TraversalResult:
        """Breadth-first search; see :func:`travgraph.search.bfs`."""
        return bfs(self, source)

    def dfs(self, source: VertexId) -> TraversalResult:
        """Depth-first search; see :func:`travgraph.search.dfs`."""
        return dfs(self, source)

    @overload
    def dijkstra(self, source: VertexId) -> List[Distance]: ...

    @overload
    def dijkstra(self, source: VertexId, target: VertexId) -> Distance: ...

    def dijkstra(
        self, source: VertexId, target: Optional[VertexId] = None
    ) -> Union[List[Distance], Distance]:
        """Run Dijkstra's algorithm from ``source``.

        Args:
            source: Source vertex.
            target: If given, stop once ``target`` is finalized.

        Returns:
            Without ``target``, the distance to every vertex in index order.
            With ``target``, the distance to ``target``. Unreachable vertices
            have distance ``INF``.

        Raises:
            InvalidArgument: If ``source`` or ``target`` is out of range.
        """
        if target is None:
            return shortest_paths(self, source).distances
        return shortest_path_to(self, source, target).distance(target)

    def is_reachable(self, src: VertexId, dest: VertexId) -> Distance:
        """Return the shortest distance from ``src`` to ``dest``, or ``-1``.

        Reruns the single-target Dijkstra on every call.
        """
        d = self.dijkstra(src, dest)
        return -1 if d == INF else d

    def path(self, src: VertexId, dest: VertexId) -> List[VertexId]:
        """Return a shortest path from ``src`` to ``dest`` as vertex ids.

        Returns an empty list when ``dest`` is unreachable.
        """
        return shortest_path_to(self, src, dest).path_to(dest)

    def display_path(self, src: VertexId, dest: VertexId) -> str:
        """Return a shortest path formatted as ``"0 -> 1 -> 2"``.

        Returns ``"No path exists"`` when ``dest`` is unreachable.
        """
        return format_path(self.path(src, dest))

    # ---------- debug -----------------------------------------------------

    def adjacency_matrix(self) -> npt.NDArray[np.float64]:
        """Dense weight matrix; see :func:`travgraph.matrix.adjacency_matrix`."""
        return adjacency_matrix(self)

    def __str__(self) -> str:
        lines: List[str] = []
        for vertex in self.vertices:
            arcs = "".join(f"{v}({w})\t" for v, w in vertex.adjacency.items())
            lines.append(f"{vertex.id}\t:\t{arcs}\n")
        return "".join(lines)


__all__ = ["Graph", "Edge", "Weight"]
