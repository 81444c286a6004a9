"""Pytest configuration and shared fixtures for ewdigraph tests.

This module provides:
- Deterministic RNG fixtures for numpy
- The classic small edge-weighted digraphs (tinyEWDAG, tinyEWD, tinyEWDn,
  tinyEWDnc) used across the test suite
- Factories for building digraphs and random DAGs
"""

import os
from typing import Callable, Iterable, Tuple

import numpy as np
import pytest

from ewdigraph import DirectedEdge, EdgeWeightedDigraph
from ewdigraph.diagnostics import set_debug_enabled

Triple = Tuple[int, int, float]

TINY_EWDAG = [
    (5, 4, 0.35), (4, 7, 0.37), (5, 7, 0.28), (5, 1, 0.32), (4, 0, 0.38),
    (0, 2, 0.26), (3, 7, 0.39), (1, 3, 0.29), (7, 2, 0.34), (6, 2, 0.40),
    (3, 6, 0.52), (6, 0, 0.58), (6, 4, 0.93),
]

TINY_EWD = [
    (4, 5, 0.35), (5, 4, 0.35), (4, 7, 0.37), (5, 7, 0.28), (7, 5, 0.28),
    (5, 1, 0.32), (0, 4, 0.38), (0, 2, 0.26), (7, 3, 0.39), (1, 3, 0.29),
    (2, 7, 0.34), (6, 2, 0.40), (3, 6, 0.52), (6, 0, 0.58), (6, 4, 0.93),
]

TINY_EWDN = [
    (4, 5, 0.35), (5, 4, 0.35), (4, 7, 0.37), (5, 7, 0.28), (7, 5, 0.28),
    (5, 1, 0.32), (0, 4, 0.38), (0, 2, 0.26), (7, 3, 0.39), (1, 3, 0.29),
    (2, 7, 0.34), (6, 2, -1.20), (3, 6, 0.52), (6, 0, -1.40), (6, 4, -1.25),
]

TINY_EWDNC = [
    (4, 5, 0.35), (5, 4, -0.66), (4, 7, 0.37), (5, 7, 0.28), (7, 5, 0.28),
    (5, 1, 0.32), (0, 4, 0.38), (0, 2, 0.26), (7, 3, 0.39), (1, 3, 0.29),
    (2, 7, 0.34), (6, 2, 0.40), (3, 6, 0.52), (6, 0, 0.58), (6, 4, 0.93),
]


def build_digraph(V: int, triples: Iterable[Triple]) -> EdgeWeightedDigraph:
    G = EdgeWeightedDigraph(V)
    for v, w, weight in triples:
        G.add_edge(DirectedEdge(v, w, weight))
    return G


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_debug_mode() -> None:
    """Auto-use fixture so a test enabling debug mode cannot leak it."""
    yield
    set_debug_enabled(False)


@pytest.fixture
def make_digraph() -> Callable[[int, Iterable[Triple]], EdgeWeightedDigraph]:
    """Factory building a digraph from (from, to, weight) triples."""
    return build_digraph


@pytest.fixture
def tiny_ewdag() -> EdgeWeightedDigraph:
    return build_digraph(8, TINY_EWDAG)


@pytest.fixture
def tiny_ewd() -> EdgeWeightedDigraph:
    return build_digraph(8, TINY_EWD)


@pytest.fixture
def tiny_ewdn() -> EdgeWeightedDigraph:
    return build_digraph(8, TINY_EWDN)


@pytest.fixture
def tiny_ewdnc() -> EdgeWeightedDigraph:
    return build_digraph(8, TINY_EWDNC)


@pytest.fixture
def random_dag(rng: np.random.Generator) -> Callable[..., EdgeWeightedDigraph]:
    """Factory for random DAGs whose edges all point from lower to higher vertex."""

    def _build(V: int = 30, E: int = 90, low: float = 0.0, high: float = 1.0) -> EdgeWeightedDigraph:
        G = EdgeWeightedDigraph(V)
        for _ in range(E):
            v, w = sorted(int(x) for x in rng.choice(V, size=2, replace=False))
            G.add_edge(DirectedEdge(v, w, round(float(rng.uniform(low, high)), 2)))
        return G

    return _build


@pytest.fixture
def random_digraph(rng: np.random.Generator) -> Callable[..., EdgeWeightedDigraph]:
    """Factory for random digraphs (cycles and self-loops allowed)."""

    def _build(V: int = 30, E: int = 120, low: float = 0.0, high: float = 1.0) -> EdgeWeightedDigraph:
        G = EdgeWeightedDigraph(V)
        for _ in range(E):
            v, w = int(rng.integers(V)), int(rng.integers(V))
            G.add_edge(DirectedEdge(v, w, round(float(rng.uniform(low, high)), 2)))
        return G

    return _build
