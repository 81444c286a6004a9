"""
Breadth-first relaxation baseline.

Scans vertices in BFS discovery order and relaxes every edge it meets. Each
vertex is scanned once, so distances are only guaranteed optimal when the
digraph is acyclic with non-negative weights and every vertex is scanned
after all of its predecessors. Kept as a reference point for the other
engines rather than as a general solver.
"""

from ..core.containers import Queue
from ..core.digraph import Digraph
from ..logging import get_logger
from .base import PathTree

logger = get_logger(__name__)


class BFSRelaxerSP(PathTree):
    """
    Shortest-paths tree built by relaxing edges in BFS order.

    Args:
        G: Edge-weighted digraph.
        source: Source vertex.

    Complexity: O(V + E).
    """

    def __init__(self, G: Digraph, source: int):
        self._init_tree(G, source)

        discovered = [False] * G.V()
        discovered[source] = True
        queue: Queue[int] = Queue()
        queue.enqueue(source)

        while not queue.is_empty():
            v = queue.dequeue()
            for e in G.adj(v):
                if not discovered[e.to]:
                    discovered[e.to] = True
                    queue.enqueue(e.to)
                self._relax(e)

        logger.debug("BFSRelaxerSP from %d over V=%d E=%d", source, G.V(), G.E())
