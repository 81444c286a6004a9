"""
Edge-weighted directed graph data structures.

Provides the abstract Digraph contract and EdgeWeightedDigraph, an
adjacency-list representation holding one Bag of outgoing edges per vertex.
Vertices are the integers 0..V-1.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from .containers import Bag
from .edge import DirectedEdge


class Digraph(ABC):
    """
    Capability set every algorithm in the package consumes.

    Implementations must enumerate the edges of a vertex in an order that is
    deterministic for a given instance, and must accept parallel edges and
    self-loops.
    """

    @abstractmethod
    def V(self) -> int:
        """Return the number of vertices."""

    @abstractmethod
    def E(self) -> int:
        """Return the number of edges."""

    @abstractmethod
    def add_edge(self, e: DirectedEdge) -> None:
        """Add a directed edge."""

    @abstractmethod
    def adj(self, v: int) -> Iterable[DirectedEdge]:
        """Return the edges leaving vertex v."""

    @abstractmethod
    def edges(self) -> Iterable[DirectedEdge]:
        """Return all edges."""

    def validate_vertex(self, v: int) -> None:
        """
        Raise ValueError unless v is a vertex of this graph.

        Args:
            v: Vertex to check.
        """
        if not 0 <= v < self.V():
            raise ValueError(f"Invalid vertex {v}: must be in [0, {self.V()})")


class EdgeWeightedDigraph(Digraph):
    """
    Edge-weighted digraph with adjacency-list representation.

    Each vertex owns a Bag of the edges leaving it, so the most recently
    added edge is enumerated first.

    Complexity:
        - add_edge: O(1)
        - adj: O(1) to obtain, O(outdeg(v)) to iterate
        - edges: O(V + E)
        - space: O(V + E)

    Example:
        >>> G = EdgeWeightedDigraph(3)
        >>> G.add_edge(DirectedEdge(0, 1, 0.5))
        >>> G.add_edge(DirectedEdge(0, 2, 1.5))
        >>> [str(e) for e in G.adj(0)]
        ['(0->2) 1.5', '(0->1) 0.5']
    """

    def __init__(self, V: int):
        """
        Initialize an empty digraph with V vertices.

        Args:
            V: Number of vertices.

        Raises:
            ValueError: If V is not positive.
        """
        if V <= 0:
            raise ValueError(f"Graph must have a positive number of vertices, got {V}")
        self._V = V
        self._E = 0
        self._adj: list[Bag[DirectedEdge]] = [Bag() for _ in range(V)]

    def V(self) -> int:
        return self._V

    def E(self) -> int:
        return self._E

    def add_edge(self, e: DirectedEdge) -> None:
        """
        Add edge e to the adjacency list of e.from_.

        Raises:
            ValueError: If e is None.
        """
        if e is None:
            raise ValueError("DirectedEdge argument is None")
        self._adj[e.from_].add(e)
        self._E += 1

    def adj(self, v: int) -> Bag[DirectedEdge]:
        """
        Return the edges leaving v, most recently added first.

        Raises:
            ValueError: If v is not a vertex of this graph.
        """
        self.validate_vertex(v)
        return self._adj[v]

    def outdegree(self, v: int) -> int:
        self.validate_vertex(v)
        return len(self._adj[v])

    def edges(self) -> Iterator[DirectedEdge]:
        """Yield every edge, adjacency lists concatenated in vertex order."""
        for bag in self._adj:
            yield from bag

    def reverse(self) -> "EdgeWeightedDigraph":
        """Return a new digraph with every edge flipped, weights unchanged."""
        R = EdgeWeightedDigraph(self._V)
        for e in self.edges():
            R.add_edge(DirectedEdge(e.to, e.from_, e.weight))
        return R

    def __str__(self) -> str:
        return "[" + ", ".join(f"({e})" for e in self.edges()) + "]"

    def __repr__(self) -> str:
        return f"EdgeWeightedDigraph(V={self._V}, E={self._E})"
