"""
Depth-first search framework for edge-weighted digraphs.

One pass over every vertex (in increasing order) records which vertices were
reached, the tree edge into each vertex, pre/post/reverse-post orderings and
the first directed cycle met. Topological sort, the cycle finders and
DepthFirstOrder are thin views over this pass.

The traversal keeps an explicit stack of (vertex, edge iterator) frames
instead of recursing, so deep graphs do not hit the interpreter recursion
limit. Vertices are entered and left in exactly the order the recursive
formulation would use.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.3 (DFS) and 22.4 (topological sort).
"""

from typing import Iterator, List, Optional, Tuple

import numpy as np

from ..core.containers import Queue, Stack
from ..core.digraph import Digraph
from ..core.edge import DirectedEdge
from ..logging import get_logger

logger = get_logger(__name__)

VERTEX_CYCLE = "vertex"
EDGE_CYCLE = "edge"


class DepthFirstSearch:
    """
    Full depth-first search of a digraph.

    Args:
        G: Digraph to search.
        cycle_form: "vertex" to report the cycle as vertices w, ..., v, w or
            "edge" to report it as the edges of the same walk.
        stop_at_cycle: If True, abandon the search as soon as a cycle is
            found. Orderings are then incomplete.

    Complexity: O(V + E) time, O(V) extra space.
    """

    def __init__(self, G: Digraph, cycle_form: str = VERTEX_CYCLE, stop_at_cycle: bool = False):
        if G is None:
            raise ValueError("Graph cannot be None")
        if cycle_form not in (VERTEX_CYCLE, EDGE_CYCLE):
            raise ValueError(f"cycle_form must be {VERTEX_CYCLE!r} or {EDGE_CYCLE!r}, got {cycle_form!r}")

        V = G.V()
        self._V = V
        self._cycle_form = cycle_form
        self._marked = np.zeros(V, dtype=bool)
        self._on_stack = np.zeros(V, dtype=bool)
        self._edge_to: List[Optional[DirectedEdge]] = [None] * V
        self._pre = np.full(V, -1, dtype=np.int64)
        self._post = np.full(V, -1, dtype=np.int64)
        self._pre_order: Queue[int] = Queue()
        self._post_order: Queue[int] = Queue()
        self._reverse_post_order: Stack[int] = Stack()
        self._cycle: Optional[Stack] = None
        self._aborted = False

        for s in range(V):
            if self._aborted:
                break
            if not self._marked[s]:
                self._search(G, s, stop_at_cycle)

        logger.debug(
            "DFS over V=%d E=%d: cycle=%s aborted=%s",
            V,
            G.E(),
            self._cycle is not None,
            self._aborted,
        )

    def _enter(self, v: int) -> None:
        self._marked[v] = True
        self._on_stack[v] = True
        self._pre[v] = len(self._pre_order)
        self._pre_order.enqueue(v)

    def _leave(self, v: int) -> None:
        self._on_stack[v] = False
        self._post[v] = len(self._post_order)
        self._post_order.enqueue(v)
        self._reverse_post_order.push(v)

    def _search(self, G: Digraph, s: int, stop_at_cycle: bool) -> None:
        self._enter(s)
        frames: List[Tuple[int, Iterator[DirectedEdge]]] = [(s, iter(G.adj(s)))]

        while frames:
            v, edges = frames[-1]
            for e in edges:
                w = e.to
                if not self._marked[w]:
                    self._edge_to[w] = e
                    self._enter(w)
                    frames.append((w, iter(G.adj(w))))
                    break
                if self._on_stack[w] and self._cycle is None:
                    self._record_cycle(e)
                    if stop_at_cycle:
                        self._aborted = True
                        return
            else:
                frames.pop()
                self._leave(v)

    def _record_cycle(self, e: DirectedEdge) -> None:
        # e = v->w closes the cycle; walk tree edges back from v to w
        v, w = e.from_, e.to
        cycle: Stack = Stack()

        if self._cycle_form == EDGE_CYCLE:
            x = e
            cycle.push(x)
            while x.from_ != w:
                x = self._edge_to[x.from_]
                cycle.push(x)
        else:
            cycle.push(w)
            x = v
            while x != w:
                cycle.push(x)
                x = self._edge_to[x].from_
            cycle.push(w)

        self._cycle = cycle

    def _validate_vertex(self, v: int) -> None:
        if not 0 <= v < self._V:
            raise ValueError(f"Invalid vertex {v}: must be in [0, {self._V})")

    def marked(self, v: int) -> bool:
        self._validate_vertex(v)
        return bool(self._marked[v])

    def edge_to(self, v: int) -> Optional[DirectedEdge]:
        """Return the tree edge that discovered v (None for search roots)."""
        self._validate_vertex(v)
        return self._edge_to[v]

    def has_cycle(self) -> bool:
        return self._cycle is not None

    def cycle(self) -> Optional[Stack]:
        """Return a copy of the first cycle found, in walk order, or None."""
        return None if self._cycle is None else self._cycle.copy()

    def aborted(self) -> bool:
        """True if the search stopped early at a cycle."""
        return self._aborted

    def pre(self, v: int) -> int:
        self._validate_vertex(v)
        return int(self._pre[v])

    def post(self, v: int) -> int:
        self._validate_vertex(v)
        return int(self._post[v])

    def pre_order(self) -> Queue[int]:
        return self._pre_order.copy()

    def post_order(self) -> Queue[int]:
        return self._post_order.copy()

    def reverse_post_order(self) -> Stack[int]:
        return self._reverse_post_order.copy()
