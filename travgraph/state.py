"""Per-call traversal state and the result objects built from it.

Every algorithm run allocates a fresh :class:`WorkState` sized to the graph
and indexed by vertex id, so runs never share mutable fields and can be
executed concurrently on a graph whose edges are no longer changing.
"""

from __future__ import annotations

import enum
import math
import operator
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from .exceptions import InvalidArgument
from .path import reconstruct_path

VertexId = int
Distance = Union[int, float]

INF: float = math.inf


def vertex_index(v: object, n: int) -> VertexId:
    """Return ``v`` as a plain ``int`` in ``[0, n)``.

    Any integer type is accepted, NumPy integers included; ``bool`` is not.

    Raises:
        InvalidArgument: If ``v`` is not an integer or is out of range.
    """
    if isinstance(v, bool):
        raise InvalidArgument(f"vertex {v!r} is not an integer index")
    try:
        i = operator.index(v)  # type: ignore[arg-type]
    except TypeError as exc:
        raise InvalidArgument(f"vertex {v!r} is not an integer index") from exc
    if not (0 <= i < n):
        raise InvalidArgument(f"vertex {v!r} out of range [0, {n})")
    return i


class Color(enum.Enum):
    """Discovery state of a vertex during BFS/DFS."""

    UNVISITED = "unvisited"
    DISCOVERED = "discovered"
    FINISHED = "finished"


@dataclass
class WorkState:
    """Mutable working arrays for a single algorithm run.

    Attributes:
        colors: Discovery color per vertex (BFS/DFS).
        visited: Finalized flag per vertex (Dijkstra).
        distances: Best known distance per vertex, ``INF`` if unreached.
        predecessors: Index of the vertex each vertex was reached from.
        order: Vertices in the order they were finished or finalized.
    """

    colors: List[Color]
    visited: List[bool]
    distances: List[Distance]
    predecessors: List[Optional[VertexId]]
    order: List[VertexId] = field(default_factory=list)

    @classmethod
    def fresh(cls, n: int, source: VertexId) -> "WorkState":
        """Return state with every vertex reset and ``source`` at distance 0."""
        st = cls(
            colors=[Color.UNVISITED] * n,
            visited=[False] * n,
            distances=[INF] * n,
            predecessors=[None] * n,
        )
        st.distances[source] = 0
        return st


@dataclass(frozen=True)
class SearchResult:
    """Distances and predecessors left behind by one algorithm run."""

    source: VertexId
    distances: List[Distance]
    predecessors: List[Optional[VertexId]]
    order: List[VertexId]

    def _check(self, v: VertexId) -> VertexId:
        return vertex_index(v, len(self.distances))

    def distance(self, v: VertexId) -> Distance:
        """Return the distance recorded for ``v`` (``INF`` if unreached)."""
        v = self._check(v)
        return self.distances[v]

    def predecessor(self, v: VertexId) -> Optional[VertexId]:
        """Return the vertex ``v`` was reached from, or ``None``."""
        v = self._check(v)
        return self.predecessors[v]

    def is_reachable(self, v: VertexId) -> bool:
        v = self._check(v)
        return self.distances[v] != INF

    def path_to(self, v: VertexId) -> List[VertexId]:
        """Return the vertex ids from the source to ``v``.

        Returns an empty list when ``v`` was not reached.
        """
        v = self._check(v)
        if self.distances[v] == INF:
            return []
        return reconstruct_path(self.predecessors, self.source, v)


@dataclass(frozen=True)
class TraversalResult(SearchResult):
    """Outcome of a BFS or DFS run; ``distances`` count edges."""

    colors: List[Color] = field(default_factory=list)

    @classmethod
    def from_state(cls, source: VertexId, st: WorkState) -> "TraversalResult":
        return cls(
            source=source,
            distances=list(st.distances),
            predecessors=list(st.predecessors),
            order=list(st.order),
            colors=list(st.colors),
        )


@dataclass(frozen=True)
class ShortestPathResult(SearchResult):
    """Outcome of a Dijkstra run; ``distances`` are cumulative weights.

    When ``target`` is set the run stopped once ``target`` was finalized, so
    distances of vertices that are not ``finalized`` are only upper bounds.
    """

    target: Optional[VertexId] = None
    finalized: List[bool] = field(default_factory=list)

    @classmethod
    def from_state(
        cls, source: VertexId, st: WorkState, target: Optional[VertexId] = None
    ) -> "ShortestPathResult":
        return cls(
            source=source,
            distances=list(st.distances),
            predecessors=list(st.predecessors),
            order=list(st.order),
            target=target,
            finalized=list(st.visited),
        )

    def finalized_distances(self) -> Sequence[Distance]:
        """Distances of finalized vertices in extraction order."""
        return [self.distances[v] for v in self.order]


__all__ = [
    "INF",
    "Color",
    "Distance",
    "vertex_index",
    "WorkState",
    "SearchResult",
    "TraversalResult",
    "ShortestPathResult",
]
