"""Certification checks for path trees, heaps, orderings and cycles."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable, Sequence

from ..core.digraph import Digraph
from ..core.edge import DirectedEdge

if TYPE_CHECKING:
    from ..pq.indexed import IndexedDAryMinPQ
    from ..shortest.base import PathTree


def check_optimality(
    paths: "PathTree",
    G: Digraph,
    longest: bool = False,
    atol: float = 1e-9,
) -> None:
    """
    Certify that a path tree satisfies the optimality conditions.

    Checks that the source has distance 0 and no parent edge, that every
    tree edge is tight (dist_to[w] == dist_to[v] + weight) and that no edge
    can be relaxed further.

    Parameters
    ----------
    paths:
        A constructed shortest- or longest-path tree.
    G:
        The digraph it was built from.
    longest:
        True to check the longest-path conditions instead.
    atol:
        Absolute tolerance on distance comparisons.

    Raises
    ------
    ValueError
        If any condition fails.
    """
    s = paths.source
    if paths.dist_to(s) != 0.0 or paths.edge_to(s) is not None:
        raise ValueError(f"Source {s} must have distance 0 and no parent edge")

    unreached = -math.inf if longest else math.inf
    for v in range(G.V()):
        if v != s and paths.edge_to(v) is None and paths.dist_to(v) != unreached:
            raise ValueError(f"Vertex {v} has no parent edge but distance {paths.dist_to(v)}")

    for e in G.edges():
        dv, dw = paths.dist_to(e.from_), paths.dist_to(e.to)
        if not math.isfinite(dv):
            continue
        slack = dw - (dv + e.weight)
        if (longest and slack < -atol) or (not longest and slack > atol):
            raise ValueError(f"Edge {e} is not relaxed: dist_to[{e.to}] = {dw}, dist_to[{e.from_}] = {dv}")

    for w in range(G.V()):
        e = paths.edge_to(w)
        if e is None:
            continue
        if e.to != w:
            raise ValueError(f"Parent edge {e} of vertex {w} does not point to it")
        if abs(paths.dist_to(e.from_) + e.weight - paths.dist_to(w)) > atol:
            raise ValueError(f"Parent edge {e} of vertex {w} is not tight")


def assert_heap_invariants(pq: "IndexedDAryMinPQ") -> None:
    """
    Verify the index and heap-order invariants of an indexed d-ary heap.

    Raises
    ------
    ValueError
        If pq and qp are not inverse to each other, the size does not match
        the number of present indices, or a child key is smaller than its
        parent's.
    """
    n = pq.size()
    keys, heap, where = pq._keys, pq._pq, pq._qp

    for pos in range(n):
        if where[heap[pos]] != pos:
            raise ValueError(f"qp[pq[{pos}]] != {pos}")

    present = 0
    for i in range(pq.capacity):
        if where[i] != -1:
            present += 1
            if heap[where[i]] != i:
                raise ValueError(f"pq[qp[{i}]] != {i}")
    if present != n:
        raise ValueError(f"Size {n} does not match {present} present indices")

    for pos in range(1, n):
        parent = (pos - 1) // pq.d
        if keys[heap[parent]] > keys[heap[pos]]:
            raise ValueError(f"Heap order violated between positions {parent} and {pos}")


def is_topological_order(G: Digraph, order: Iterable[int]) -> bool:
    """
    Return True if order lists every vertex once with each edge u->v having
    u before v.
    """
    rank = {}
    for i, v in enumerate(order):
        if v in rank:
            return False
        rank[v] = i
    if len(rank) != G.V():
        return False
    return all(rank[e.from_] < rank[e.to] for e in G.edges())


def assert_cycle(G: Digraph, cycle: Sequence) -> None:
    """
    Check that cycle is a closed directed walk in G.

    Accepts either the vertex form (first vertex repeated at the end) or the
    edge form (consecutive edges share endpoints).

    Raises
    ------
    ValueError
        If the sequence is empty, not closed, or uses an edge G lacks.
    """
    cycle = list(cycle)
    if not cycle:
        raise ValueError("Cycle is empty")

    if isinstance(cycle[0], DirectedEdge):
        edge_set = set(G.edges())
        for e in cycle:
            if e not in edge_set:
                raise ValueError(f"Edge {e} is not in the graph")
        for a, b in zip(cycle, cycle[1:] + cycle[:1]):
            if a.to != b.from_:
                raise ValueError(f"Edges {a} and {b} are not consecutive")
        return

    if len(cycle) < 2 or cycle[0] != cycle[-1]:
        raise ValueError(f"Vertex cycle {cycle} is not closed")
    for u, v in zip(cycle, cycle[1:]):
        if not any(e.to == v for e in G.adj(u)):
            raise ValueError(f"No edge {u}->{v} in the graph")
