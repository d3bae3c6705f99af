"""
Pytest configuration and shared fixtures.
"""

import random
from typing import Callable, List, Tuple

import pytest

from travgraph import Graph
from travgraph.cli import build_demo_graph

Edges = List[Tuple[int, int, int]]


@pytest.fixture
def demo_graph() -> Graph:
    """Six vertices, undirected unit weights, self-loop on 5."""
    return build_demo_graph()


@pytest.fixture
def random_edges() -> Callable[[int, int, int], Edges]:
    """Return a factory producing seeded random edge lists with weights 0..9."""

    def make(n: int, m: int, seed: int) -> Edges:
        rnd = random.Random(seed)
        return [(rnd.randrange(n), rnd.randrange(n), rnd.randrange(10)) for _ in range(m)]

    return make
