"""Validated query configuration shared by the CLI and scripted callers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .exceptions import ConfigError
from .graph import Graph
from .state import INF, Distance

ALGORITHMS = ("bfs", "dfs", "dijkstra", "path", "reachable", "dump")
_NEEDS_TARGET = ("path", "reachable")


@dataclass(frozen=True)
class QueryConfig:
    """Which operation to run and with which arguments.

    Attributes:
        algo: One of :data:`ALGORITHMS`.
        source: Source vertex id.
        target: Target vertex id; required for ``path`` and ``reachable``,
            optional for ``dijkstra`` (single-target run) and ignored
            otherwise.
        directed: Whether edges handed to the graph builder are directed.
    """

    algo: str = "dijkstra"
    source: int = 0
    target: Optional[int] = None
    directed: bool = False

    def __post_init__(self) -> None:
        if self.algo not in ALGORITHMS:
            raise ConfigError(f"unknown algorithm '{self.algo}'")
        if self.source < 0:
            raise ConfigError("source must be non-negative")
        if self.target is not None and self.target < 0:
            raise ConfigError("target must be non-negative")
        if self.algo in _NEEDS_TARGET and self.target is None:
            raise ConfigError(f"'{self.algo}' requires a target")


def _json_distances(distances: List[Distance]) -> List[Optional[Distance]]:
    # JSON has no infinity; unreachable vertices become null.
    return [None if d == INF else d for d in distances]


def run_query(graph: Graph, cfg: QueryConfig) -> Dict[str, Any]:
    """Run the operation selected by ``cfg`` and return a JSON-ready dict.

    Raises:
        InvalidArgument: If ``cfg`` names vertices outside the graph.
    """
    out: Dict[str, Any] = {"algo": cfg.algo, "source": cfg.source}
    if cfg.algo in ("bfs", "dfs"):
        res = graph.bfs(cfg.source) if cfg.algo == "bfs" else graph.dfs(cfg.source)
        out["distances"] = _json_distances(res.distances)
        out["predecessors"] = res.predecessors
        out["order"] = res.order
    elif cfg.algo == "dijkstra":
        if cfg.target is None:
            out["distances"] = _json_distances(graph.dijkstra(cfg.source))
        else:
            d = graph.dijkstra(cfg.source, cfg.target)
            out["target"] = cfg.target
            out["distance"] = None if d == INF else d
    elif cfg.algo == "path":
        out["target"] = cfg.target
        out["path"] = graph.path(cfg.source, cfg.target)
        out["display"] = graph.display_path(cfg.source, cfg.target)
    elif cfg.algo == "reachable":
        out["target"] = cfg.target
        out["distance"] = graph.is_reachable(cfg.source, cfg.target)
    else:
        out["dump"] = str(graph)
    return out


__all__ = ["ALGORITHMS", "QueryConfig", "run_query"]
