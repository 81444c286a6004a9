"""
Depth-first traversal: orderings, topological sort and cycle detection.
"""

from .cycle import DirectedCycle, EdgeWeightedDirectedCycle
from .dfs import DepthFirstSearch
from .order import DepthFirstOrder, Topological

__all__ = [
    "DepthFirstSearch",
    "DepthFirstOrder",
    "Topological",
    "DirectedCycle",
    "EdgeWeightedDirectedCycle",
]
