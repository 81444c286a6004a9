"""Tests for the DirectedEdge value type."""

import dataclasses

import pytest

from ewdigraph import DirectedEdge


class TestDirectedEdge:
    """Tests for DirectedEdge."""

    def test_fields(self):
        """Test endpoint and weight accessors."""
        e = DirectedEdge(5, 4, 0.35)
        assert e.from_ == 5
        assert e.to == 4
        assert e.weight == 0.35

    def test_default_weight(self):
        """Test that weight defaults to 0.0."""
        assert DirectedEdge(1, 2).weight == 0.0

    def test_str(self):
        """Test textual form."""
        assert str(DirectedEdge(5, 4, 0.35)) == "(5->4) 0.35"
        assert str(DirectedEdge(0, 0)) == "(0->0) 0.0"

    def test_structural_equality(self):
        """Test that equal triples compare and hash equal."""
        a = DirectedEdge(1, 2, 0.5)
        b = DirectedEdge(1, 2, 0.5)
        assert a == b
        assert hash(a) == hash(b)
        assert a != DirectedEdge(1, 2, 0.6)
        assert a != DirectedEdge(2, 1, 0.5)

    def test_immutable(self):
        """Test that edges cannot be modified."""
        e = DirectedEdge(1, 2, 0.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            e.weight = 1.0
