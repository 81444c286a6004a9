"""
Queue-based Bellman-Ford with negative-cycle detection.

Only vertices whose distance changed in the previous pass can improve their
neighbours, so those vertices are kept in a FIFO queue instead of relaxing
every edge V times. A negative cycle reachable from the source would keep the
queue busy forever; to stop, the parent-edge graph (edge_to) is checked for a
cycle after every V successful relaxations. The check costs O(V) and runs at
most O(E) times, so the overall bound stays O(VE).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.1 (Bellman-Ford).
    - Sedgewick, Wayne. "Algorithms", 4th ed. Section 4.4 (queue-based
      Bellman-Ford).
"""

from typing import Optional

import numpy as np

from ..core.containers import Queue, Stack
from ..core.digraph import Digraph, EdgeWeightedDigraph
from ..core.edge import DirectedEdge
from ..logging import get_logger
from ..traversal.cycle import EdgeWeightedDirectedCycle
from .base import PathTree

logger = get_logger(__name__)


class BellmanFordSP(PathTree):
    """
    Shortest-paths tree for digraphs with arbitrary edge weights.

    Either every dist_to value is optimal, or a negative cycle reachable from
    the source was found and has_negative_cycle() is True. In the latter case
    distances are meaningless and path_to raises.

    Args:
        G: Edge-weighted digraph.
        source: Source vertex.

    Raises:
        ValueError: If G is None or source is not a vertex.

    Complexity: O(VE) worst case, typically O(E + V).

    Example:
        >>> sp = BellmanFordSP(G, 0)
        >>> if sp.has_negative_cycle():
        ...     print(list(sp.negative_cycle()))
    """

    def __init__(self, G: Digraph, source: int):
        self._init_tree(G, source)

        self._on_queue = np.zeros(G.V(), dtype=bool)
        self._queue: Queue[int] = Queue()
        self._relaxations = 0
        self._cycle: Optional[Stack[DirectedEdge]] = None

        self._queue.enqueue(source)
        self._on_queue[source] = True

        while not self._queue.is_empty() and not self.has_negative_cycle():
            v = self._queue.dequeue()
            self._on_queue[v] = False
            self._relax_vertex(G, v)

        if self._cycle is not None:
            logger.info(
                "BellmanFordSP from %d found a negative cycle of weight %s",
                source,
                sum(e.weight for e in self._cycle),
            )
        else:
            logger.debug("BellmanFordSP from %d converged after %d relaxations", source, self._relaxations)
            self._certify(G)

    def _relax_vertex(self, G: Digraph, v: int) -> None:
        for e in G.adj(v):
            if not self._relax(e):
                continue

            w = e.to
            if not self._on_queue[w]:
                self._queue.enqueue(w)
                self._on_queue[w] = True

            self._relaxations += 1
            if self._relaxations % G.V() == 0:
                self._find_negative_cycle()
                if self.has_negative_cycle():
                    return

    def _find_negative_cycle(self) -> None:
        # edge_to gives each vertex at most one incoming edge, so any cycle
        # in this graph is the unique cycle of its component
        spt = EdgeWeightedDigraph(self._V)
        for e in self._edge_to:
            if e is not None:
                spt.add_edge(e)

        finder = EdgeWeightedDirectedCycle(spt)
        if finder.has_cycle():
            self._cycle = finder.cycle()

    def has_negative_cycle(self) -> bool:
        """Return True if a negative cycle reachable from the source was found."""
        return self._cycle is not None

    def negative_cycle(self) -> Stack[DirectedEdge]:
        """
        Return a copy of the negative cycle edges in walk order.

        Raises:
            LookupError: If there is no negative cycle.
        """
        if self._cycle is None:
            raise LookupError("No negative cycle found")
        return self._cycle.copy()

    def path_to(self, v: int) -> Optional[Stack[DirectedEdge]]:
        """
        Return the shortest path from the source to v, or None if unreachable.

        Raises:
            RuntimeError: If a negative cycle was found.
        """
        self._validate_vertex(v)
        if self.has_negative_cycle():
            raise RuntimeError("Negative cycle exists; shortest paths are undefined")
        return super().path_to(v)
