"""Public package exports for :mod:`travgraph`."""

from __future__ import annotations

from .config import QueryConfig, run_query
from .dijkstra import shortest_path_to, shortest_paths
from .exceptions import AlgorithmError, ConfigError, InvalidArgument, TravGraphError
from .graph import Graph, Vertex
from .logger import Logger, NoopLogger, StdLogger
from .matrix import adjacency_matrix, arc_count
from .path import NO_PATH, format_path, reconstruct_path
from .search import bfs, dfs
from .state import INF, Color, ShortestPathResult, TraversalResult

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "Vertex",
    "INF",
    "Color",
    "TraversalResult",
    "ShortestPathResult",
    "bfs",
    "dfs",
    "shortest_paths",
    "shortest_path_to",
    "reconstruct_path",
    "format_path",
    "NO_PATH",
    "adjacency_matrix",
    "arc_count",
    "QueryConfig",
    "run_query",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "TravGraphError",
    "InvalidArgument",
    "ConfigError",
    "AlgorithmError",
]
