"""
Shared state and queries of single-source path trees.

Every path algorithm fills two arrays indexed by vertex: dist_to[v], the
weight of the best path found from the source, and edge_to[v], the last edge
on that path. Paths are read back by following edge_to from v to the source.
"""

import math
from typing import List, Optional

import numpy as np

from ..core.containers import Stack
from ..core.digraph import Digraph
from ..core.edge import DirectedEdge
from ..diagnostics.core import check_optimality
from ..diagnostics.debug_mode import certify


class PathTree:
    """
    Base class for shortest- and longest-path trees rooted at a source.

    Subclasses call ``_init_tree`` before relaxing edges and ``_relax`` (or
    their own variant) while they run.

    Attributes:
        source: Root vertex of the tree.
        longest: True for longest-path trees (distances start at -inf).
    """

    longest = False

    def _init_tree(self, G: Digraph, source: int) -> None:
        if G is None:
            raise ValueError("Graph cannot be None")
        G.validate_vertex(source)

        self.source = source
        self._V = G.V()
        unreached = -math.inf if self.longest else math.inf
        self._dist_to = np.full(self._V, unreached, dtype=np.float64)
        self._edge_to: List[Optional[DirectedEdge]] = [None] * self._V
        self._dist_to[source] = 0.0

    def _relax(self, e: DirectedEdge) -> bool:
        """Relax e; return True if it improved dist_to[e.to]."""
        v, w = e.from_, e.to
        candidate = self._dist_to[v] + e.weight
        if self.longest:
            improved = candidate > self._dist_to[w]
        else:
            improved = candidate < self._dist_to[w]
        if improved:
            self._dist_to[w] = candidate
            self._edge_to[w] = e
        return bool(improved)

    def _certify(self, G: Digraph) -> None:
        certify(check_optimality, self, G, longest=self.longest)

    def _validate_vertex(self, v: int) -> None:
        if not 0 <= v < self._V:
            raise ValueError(f"Invalid vertex {v}: must be in [0, {self._V})")

    def dist_to(self, v: int) -> float:
        """
        Return the weight of the best path from the source to v.

        Unreachable vertices report +inf (shortest) or -inf (longest).

        Raises:
            ValueError: If v is not a vertex.
        """
        self._validate_vertex(v)
        return float(self._dist_to[v])

    def dist_to_array(self) -> np.ndarray:
        """Return a copy of all distances, indexed by vertex."""
        return self._dist_to.copy()

    def has_path_to(self, v: int) -> bool:
        """Return True if v is reachable from the source."""
        self._validate_vertex(v)
        return math.isfinite(self._dist_to[v])

    def edge_to(self, v: int) -> Optional[DirectedEdge]:
        """Return the last edge on the best path to v (None for the source)."""
        self._validate_vertex(v)
        return self._edge_to[v]

    def path_to(self, v: int) -> Optional[Stack[DirectedEdge]]:
        """
        Return the edges of the best path from the source to v, in walk order.

        Returns:
            An empty Stack when v is the source, None when v is unreachable.
        """
        if not self.has_path_to(v):
            return None
        path: Stack[DirectedEdge] = Stack()
        e = self._edge_to[v]
        while e is not None:
            path.push(e)
            e = self._edge_to[e.from_]
        return path
