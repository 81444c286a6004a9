"""
Shortest and longest paths in edge-weighted DAGs.

Relaxing the edges of each vertex in topological order settles every vertex
in one pass, so both variants run in O(V + E) and accept negative weights.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.2 (single-source shortest paths in DAGs).
"""

from ..core.digraph import Digraph
from ..logging import get_logger
from ..traversal.order import Topological
from .base import PathTree

logger = get_logger(__name__)


class AcyclicSP(PathTree):
    """
    Shortest-paths tree of a DAG.

    Args:
        G: Acyclic edge-weighted digraph (weights may be negative).
        source: Source vertex.

    Raises:
        ValueError: If G is None, source is not a vertex, or G has a cycle.

    Complexity: O(V + E).

    Example:
        >>> sp = AcyclicSP(G, 5)
        >>> sp.dist_to(6)
        1.13
    """

    def __init__(self, G: Digraph, source: int):
        self._init_tree(G, source)

        topological = Topological(G)
        if not topological.has_order():
            raise ValueError("Graph must be a DAG")

        for v in topological.order():
            for e in G.adj(v):
                self._relax(e)

        logger.debug("%s from %d over V=%d E=%d", type(self).__name__, source, G.V(), G.E())
        self._certify(G)


class AcyclicLP(AcyclicSP):
    """
    Longest-paths tree of a DAG.

    Same relaxation as AcyclicSP with the comparison reversed; unreachable
    vertices keep dist_to == -inf. The critical-path scheduler is built on it.
    """

    longest = True
