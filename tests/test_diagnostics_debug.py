"""Tests for debug mode functionality."""

import importlib

import pytest

from ewdigraph import BellmanFordSP, DijkstraSP, IndexedDAryMinPQ
from ewdigraph.diagnostics import (
    certify,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from ewdigraph.diagnostics import debug_mode


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    set_debug_enabled(False)
    assert not is_debug_enabled()

    with debug_context(True):
        assert is_debug_enabled()

    assert not is_debug_enabled()

    set_debug_enabled(True)
    assert is_debug_enabled()

    with debug_context(False):
        assert not is_debug_enabled()

    assert is_debug_enabled()


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    set_debug_enabled(False)

    with debug_context(True):
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        assert is_debug_enabled()

    assert not is_debug_enabled()


def test_debug_context_restores_on_error() -> None:
    """Test that the previous state comes back when the body raises."""
    set_debug_enabled(False)
    with pytest.raises(KeyError):
        with debug_context(True):
            raise KeyError("boom")
    assert not is_debug_enabled()


@pytest.mark.parametrize("value, expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("no", False)])
def test_environment_variable(monkeypatch, value, expected) -> None:
    """Test that EWDIGRAPH_DEBUG sets the initial state."""
    monkeypatch.setenv("EWDIGRAPH_DEBUG", value)
    try:
        importlib.reload(debug_mode)
        assert is_debug_enabled() is expected
    finally:
        monkeypatch.delenv("EWDIGRAPH_DEBUG")
        importlib.reload(debug_mode)
    assert not is_debug_enabled()


def test_indexed_pq_checked_in_debug_mode() -> None:
    """Test that a corrupted heap is caught on the next update."""
    pq = IndexedDAryMinPQ(2, 4)
    pq.insert(0, 1.0)
    pq.insert(1, 2.0)
    # Corrupt the heap order behind the queue's back.
    pq._keys[1] = 0.5
    pq.insert(2, 3.0)

    with debug_context(True):
        with pytest.raises(ValueError, match="Heap order"):
            pq.insert(3, 4.0)


def test_dijkstra_rejects_negative_weights_in_debug_mode(make_digraph) -> None:
    """Test the debug-only negative weight check."""
    G = make_digraph(3, [(0, 1, 1.0), (1, 2, -0.5)])
    DijkstraSP(G, 0)
    with debug_context(True):
        with pytest.raises(ValueError, match="non-negative"):
            DijkstraSP(G, 0)


def test_certification_passes_in_debug_mode(tiny_ewdn, tiny_ewdnc) -> None:
    """Test that correct trees certify, and negative cycles skip certification."""
    with debug_context(True):
        assert not BellmanFordSP(tiny_ewdn, 0).has_negative_cycle()
        assert BellmanFordSP(tiny_ewdnc, 0).has_negative_cycle()


def test_set_debug_enabled_returns_previous_state() -> None:
    """Test that set_debug_enabled reports the state it replaced."""
    set_debug_enabled(False)
    assert set_debug_enabled(True) is False
    assert set_debug_enabled(True) is True
    assert set_debug_enabled(False) is True


def test_certify_runs_only_in_debug_mode() -> None:
    """Test that checks are skipped unless debug mode is on."""
    calls = []

    def check(*args, **kwargs):
        calls.append((args, kwargs))

    set_debug_enabled(False)
    assert certify(check, 1, atol=0.5) is False
    assert calls == []

    with debug_context(True):
        assert certify(check, 1, atol=0.5) is True
    assert calls == [((1,), {"atol": 0.5})]


def test_certify_propagates_failures() -> None:
    """Test that a failing check raises through certify."""

    def failing():
        raise ValueError("not optimal")

    with debug_context(True):
        with pytest.raises(ValueError, match="not optimal"):
            certify(failing)
