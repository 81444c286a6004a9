"""
Directed cycle detection.

DirectedCycle reports a cycle as a vertex walk w, ..., v, w;
EdgeWeightedDirectedCycle reports the edges of such a walk, which is the
form Bellman-Ford needs to expose a negative cycle.
"""

from typing import Optional

from ..core.containers import Stack
from ..core.digraph import Digraph
from .dfs import EDGE_CYCLE, VERTEX_CYCLE, DepthFirstSearch


class DirectedCycle:
    """
    Finds a directed cycle (as vertices) if one exists.

    Example:
        >>> G = EdgeWeightedDigraph(2)
        >>> G.add_edge(DirectedEdge(0, 1))
        >>> G.add_edge(DirectedEdge(1, 0))
        >>> list(DirectedCycle(G).cycle())
        [0, 1, 0]
    """

    def __init__(self, G: Digraph):
        self._dfs = DepthFirstSearch(G, cycle_form=VERTEX_CYCLE, stop_at_cycle=True)

    def has_cycle(self) -> bool:
        return self._dfs.has_cycle()

    def cycle(self) -> Optional[Stack[int]]:
        """Return the cycle vertices in walk order (first == last), or None."""
        return self._dfs.cycle()


class EdgeWeightedDirectedCycle:
    """Finds a directed cycle (as edges) if one exists."""

    def __init__(self, G: Digraph):
        self._dfs = DepthFirstSearch(G, cycle_form=EDGE_CYCLE, stop_at_cycle=True)

    def has_cycle(self) -> bool:
        return self._dfs.has_cycle()

    def cycle(self) -> Optional[Stack]:
        """Return the cycle edges in walk order, or None."""
        return self._dfs.cycle()

    def weight(self) -> float:
        """Total weight of the cycle (0.0 when there is none)."""
        if self._dfs.cycle() is None:
            return 0.0
        return sum(e.weight for e in self._dfs.cycle())
