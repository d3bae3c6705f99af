"""NumPy-backed dense views of a :class:`~travgraph.graph.Graph`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:  # pragma: no cover
    from .graph import Graph


def adjacency_matrix(graph: "Graph") -> npt.NDArray[np.float64]:
    """Return the ``n x n`` weight matrix of ``graph``.

    Entry ``[u, v]`` is the weight of arc ``u -> v`` or ``inf`` when there is
    no such arc. The diagonal is ``inf`` unless the vertex has a self-loop.
    Undirected edges appear in both triangles.

    Examples:
        ```python
        >>> g = Graph(2)
        >>> g.add_edge(0, 1, 3)
        >>> adjacency_matrix(g)
        array([[inf,  3.],
               [inf, inf]])
        ```
    """
    mat = np.full((graph.n, graph.n), np.inf, dtype=np.float64)
    for vertex in graph.vertices:
        for v, w in vertex.adjacency.items():
            mat[vertex.id, v] = float(w)
    return mat


def arc_count(graph: "Graph") -> int:
    """Return the number of distinct directed arcs, self-loops included."""
    return int(np.count_nonzero(np.isfinite(adjacency_matrix(graph))))


__all__ = ["adjacency_matrix", "arc_count"]
