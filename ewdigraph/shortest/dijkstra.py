"""
Dijkstra's algorithm on an indexed 4-ary heap.

The priority of a queued vertex is its tentative distance from the source;
when a relaxation shortens that distance the vertex's key is changed in place
rather than pushed again.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from ..core.digraph import Digraph
from ..diagnostics.debug_mode import certify
from ..logging import get_logger
from ..pq.indexed import IndexedDAryMinPQ
from .base import PathTree

logger = get_logger(__name__)


def _require_non_negative(G: Digraph) -> None:
    for e in G.edges():
        if e.weight < 0:
            raise ValueError(f"Dijkstra requires non-negative weights. Found edge {e}")


DEFAULT_ARITY = 4


class DijkstraSP(PathTree):
    """
    Shortest-paths tree for digraphs with non-negative edge weights.

    Negative weights are not detected (results are undefined) unless debug
    mode is enabled, in which case they raise ValueError.

    Args:
        G: Edge-weighted digraph with non-negative weights.
        source: Source vertex.
        d: Arity of the heap backing the priority queue (2, 3 or 4).

    Raises:
        ValueError: If G is None or source is not a vertex.

    Complexity: O(E log_d V).

    Example:
        >>> sp = DijkstraSP(G, 0)
        >>> [str(e) for e in sp.path_to(6)]
        ['(0->2) 0.26', '(2->7) 0.34', '(7->3) 0.39', '(3->6) 0.52']
    """

    def __init__(self, G: Digraph, source: int, d: int = DEFAULT_ARITY):
        self._init_tree(G, source)

        certify(_require_non_negative, G)

        self._pq: IndexedDAryMinPQ[float] = IndexedDAryMinPQ(d, G.V())
        self._pq.insert(source, 0.0)
        settled = 0

        while not self._pq.is_empty():
            v = self._pq.del_min()
            settled += 1
            for e in G.adj(v):
                if self._relax(e):
                    w = e.to
                    distance = float(self._dist_to[w])
                    if w in self._pq:
                        self._pq.change_key(w, distance)
                    else:
                        self._pq.insert(w, distance)

        logger.debug("DijkstraSP from %d settled %d of %d vertices", source, settled, G.V())
        self._certify(G)
