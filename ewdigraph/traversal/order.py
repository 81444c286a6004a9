"""
Depth-first orderings and topological sort.

Topological order of a DAG is the reverse postorder of a depth-first search:
every vertex finishes after all vertices reachable from it.
"""

from typing import Optional

from ..core.containers import Queue, Stack
from ..core.digraph import Digraph
from .dfs import DepthFirstSearch


class DepthFirstOrder:
    """
    Preorder, postorder and reverse postorder of a full DFS.

    Example:
        >>> G = EdgeWeightedDigraph(3)
        >>> G.add_edge(DirectedEdge(0, 1))
        >>> G.add_edge(DirectedEdge(1, 2))
        >>> list(DepthFirstOrder(G).reverse_post_order())
        [0, 1, 2]
    """

    def __init__(self, G: Digraph):
        self._dfs = DepthFirstSearch(G)

    def pre(self, v: int) -> int:
        """Return the preorder number of v."""
        return self._dfs.pre(v)

    def post(self, v: int) -> int:
        """Return the postorder number of v."""
        return self._dfs.post(v)

    def pre_order(self) -> Queue[int]:
        return self._dfs.pre_order()

    def post_order(self) -> Queue[int]:
        return self._dfs.post_order()

    def reverse_post_order(self) -> Stack[int]:
        return self._dfs.reverse_post_order()


class Topological:
    """
    Topological sort of a digraph, if it is a DAG.

    The search stops at the first directed cycle, so construction is
    O(V + E) whether or not an order exists.
    """

    def __init__(self, G: Digraph):
        self._dfs = DepthFirstSearch(G, stop_at_cycle=True)

    def has_order(self) -> bool:
        """Return True if the digraph is acyclic."""
        return not self._dfs.has_cycle()

    def is_dag(self) -> bool:
        return self.has_order()

    def order(self) -> Optional[Stack[int]]:
        """Return the vertices in topological order, or None for a cyclic digraph."""
        if not self.has_order():
            return None
        return self._dfs.reverse_post_order()
