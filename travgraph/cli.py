"""Command-line interface for running graph queries."""

from __future__ import annotations

import argparse
import json
import sys
import traceback
from typing import List, Optional, Tuple

from .config import ALGORITHMS, QueryConfig, run_query
from .exceptions import ConfigError, InvalidArgument, TravGraphError
from .graph import Edge, Graph
from .logger import Logger, StdLogger

DEMO_N = 6
DEMO_EDGES: List[Edge] = [
    (0, 1, 1),
    (1, 2, 1),
    (2, 3, 1),
    (3, 0, 1),
    (1, 3, 1),
    (2, 4, 1),
    (4, 5, 1),
    (5, 5, 1),
]

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_INTERNAL = 70


def _parse_edge(spec: str) -> Tuple[int, int, int]:
    """Parse ``"u,v,w"`` into an edge tuple."""
    parts = spec.split(",")
    if len(parts) != 3:
        raise ConfigError(f"edge must look like u,v,w: {spec!r}")
    try:
        u, v, w = (int(p.strip()) for p in parts)
    except ValueError as exc:
        raise ConfigError(f"edge values must be integers: {spec!r}") from exc
    return u, v, w


def build_demo_graph(logger: Optional[Logger] = None) -> Graph:
    """Return the six-vertex sample graph with undirected unit weights."""
    return Graph.from_edges(DEMO_N, DEMO_EDGES, directed=False, logger=logger)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``travgraph`` command-line tool."""
    examples = (
        "Examples:\n"
        "  travgraph --demo --algo path --target 5\n"
        "  travgraph --n 3 --edge 0,1,2 --edge 1,2,2 --directed --algo bfs\n"
        "  travgraph --demo --algo dump\n"
    )
    p = argparse.ArgumentParser(
        prog="travgraph",
        description="BFS, DFS and Dijkstra queries on a small weighted graph",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=list(StdLogger.LEVELS),
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--demo", action="store_true", help="Use the built-in six-vertex graph")
    src.add_argument("--n", type=int, default=None, help="Number of vertices")
    p.add_argument(
        "--edge",
        action="append",
        default=[],
        metavar="U,V,W",
        help="Edge to add (repeatable)",
    )
    p.add_argument("--directed", action="store_true", help="Treat --edge values as arcs")
    p.add_argument("--algo", choices=ALGORITHMS, default="dijkstra")
    p.add_argument("--source", type=int, default=0, help="Source vertex id")
    p.add_argument("--target", type=int, default=None, help="Target vertex id")

    args = p.parse_args(argv)
    logger = StdLogger(level=args.log_level, json_fmt=args.log_json).bind(algo=args.algo)

    try:
        cfg = QueryConfig(
            algo=args.algo,
            source=args.source,
            target=args.target,
            directed=args.directed,
        )
        if args.demo:
            if args.edge or args.directed:
                raise ConfigError("--edge and --directed cannot be combined with --demo")
            G = build_demo_graph(logger)
        else:
            edges = [_parse_edge(e) for e in args.edge]
            G = Graph.from_edges(args.n, edges, directed=cfg.directed, logger=logger)

        logger.info("graph", n=G.vertex_count(), edges=G.edge_count(), directed=cfg.directed)
        out = run_query(G, cfg)
        if cfg.algo == "dump":
            sys.stdout.write(out["dump"])
        else:
            print(json.dumps(out))
        return EXIT_OK

    except (InvalidArgument, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_USAGE
    except TravGraphError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL
    except Exception as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL


if __name__ == "__main__":
    sys.exit(main())
