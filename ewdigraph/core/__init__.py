"""
Core data structures: weighted edges, digraphs and linked collections.
"""

from .containers import Bag, Queue, Stack
from .digraph import Digraph, EdgeWeightedDigraph
from .edge import DirectedEdge

__all__ = [
    "DirectedEdge",
    "Digraph",
    "EdgeWeightedDigraph",
    "Stack",
    "Queue",
    "Bag",
]
