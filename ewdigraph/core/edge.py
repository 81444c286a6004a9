"""Weighted directed edge value type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectedEdge:
    """
    Immutable weighted edge ``from_ -> to``.

    Equality and hashing are structural, so two edges with the same
    endpoints and weight compare equal even when added to a graph twice.
    Vertex indices are not validated here; graphs and algorithms check them
    where a range is known.

    Attributes:
        from_: Tail vertex.
        to: Head vertex.
        weight: Edge weight (default 0.0).

    Example:
        >>> e = DirectedEdge(5, 4, 0.35)
        >>> str(e)
        '(5->4) 0.35'
    """

    from_: int
    to: int
    weight: float = 0.0

    def __str__(self) -> str:
        return f"({self.from_}->{self.to}) {self.weight}"
