"""Tests for core diagnostic functions."""

import pytest

from ewdigraph import AcyclicLP, AcyclicSP, DirectedEdge, IndexedDAryMinPQ, Topological
from ewdigraph.diagnostics import (
    assert_cycle,
    assert_heap_invariants,
    check_optimality,
    is_topological_order,
)


def test_check_optimality_accepts_trees(tiny_ewdag) -> None:
    """Test that correct shortest and longest trees certify."""
    check_optimality(AcyclicSP(tiny_ewdag, 5), tiny_ewdag)
    check_optimality(AcyclicLP(tiny_ewdag, 5), tiny_ewdag, longest=True)


def test_check_optimality_wrong_direction(tiny_ewdag) -> None:
    """Test that a longest-path tree fails the shortest-path conditions."""
    with pytest.raises(ValueError, match="not relaxed"):
        check_optimality(AcyclicLP(tiny_ewdag, 5), tiny_ewdag)


def test_check_optimality_source_distance(tiny_ewdag) -> None:
    """Test that a nonzero source distance is rejected."""
    sp = AcyclicSP(tiny_ewdag, 5)
    sp._dist_to[5] = 0.1
    with pytest.raises(ValueError, match="Source 5"):
        check_optimality(sp, tiny_ewdag)


def test_check_optimality_loose_parent_edge(tiny_ewdag) -> None:
    """Test that a parent edge which is not tight is rejected."""
    sp = AcyclicSP(tiny_ewdag, 5)
    sp._edge_to[2] = DirectedEdge(6, 2, 0.40)
    with pytest.raises(ValueError, match="not tight"):
        check_optimality(sp, tiny_ewdag)


def test_assert_heap_invariants() -> None:
    """Test the heap checks on a valid and a corrupted queue."""
    pq = IndexedDAryMinPQ(3, 10)
    for i, key in enumerate([5.0, 3.0, 8.0, 1.0, 9.0, 2.0]):
        pq.insert(i, key)
    assert_heap_invariants(pq)

    pq._qp[7] = 0
    with pytest.raises(ValueError):
        assert_heap_invariants(pq)


def test_assert_heap_invariants_size_mismatch() -> None:
    """Test that a stale size is detected."""
    pq = IndexedDAryMinPQ(2, 4)
    pq.insert(0, 1.0)
    pq._n = 0
    with pytest.raises(ValueError, match="does not match"):
        assert_heap_invariants(pq)


def test_is_topological_order(tiny_ewdag) -> None:
    """Test orders that are and are not topological."""
    order = list(Topological(tiny_ewdag).order())
    assert is_topological_order(tiny_ewdag, order)
    assert not is_topological_order(tiny_ewdag, list(reversed(order)))
    assert not is_topological_order(tiny_ewdag, order[:-1])
    assert not is_topological_order(tiny_ewdag, order[:-1] + order[:1])


def test_assert_cycle_vertex_form(make_digraph) -> None:
    """Test closed and open vertex sequences."""
    G = make_digraph(3, [(0, 1, 1.0), (1, 2, 1.0), (2, 0, 1.0)])
    assert_cycle(G, [1, 2, 0, 1])
    with pytest.raises(ValueError, match="not closed"):
        assert_cycle(G, [0, 1, 2])
    with pytest.raises(ValueError, match="No edge 0->2"):
        assert_cycle(G, [0, 2, 0])


def test_assert_cycle_edge_form(make_digraph) -> None:
    """Test edge sequences."""
    G = make_digraph(3, [(0, 1, 1.0), (1, 2, 1.0), (2, 0, 1.0)])
    edges = [DirectedEdge(0, 1, 1.0), DirectedEdge(1, 2, 1.0), DirectedEdge(2, 0, 1.0)]
    assert_cycle(G, edges)
    with pytest.raises(ValueError, match="not consecutive"):
        assert_cycle(G, edges[:2])
    with pytest.raises(ValueError, match="not in the graph"):
        assert_cycle(G, [DirectedEdge(0, 0, 1.0)])
    with pytest.raises(ValueError, match="empty"):
        assert_cycle(G, [])
