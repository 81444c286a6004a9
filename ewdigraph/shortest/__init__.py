"""
Single-source shortest- and longest-path algorithms.

| Algorithm     | Weights          | Graph   | Time      |
|---------------|------------------|---------|-----------|
| AcyclicSP/LP  | any              | DAG     | O(V + E)  |
| DijkstraSP    | non-negative     | any     | O(E log V)|
| BellmanFordSP | any (detects neg.| any     | O(VE)     |
|               | cycles)          |         |           |
| BFSRelaxerSP  | non-negative     | DAG     | O(V + E)  |
"""

from .acyclic import AcyclicLP, AcyclicSP
from .base import PathTree
from .bellman_ford import BellmanFordSP
from .bfs import BFSRelaxerSP
from .dijkstra import DijkstraSP

__all__ = [
    "PathTree",
    "AcyclicSP",
    "AcyclicLP",
    "DijkstraSP",
    "BellmanFordSP",
    "BFSRelaxerSP",
]
