"""Reading and writing edge-weighted digraphs in the plain-text edge format.

The format is whitespace separated::

    V
    E
    from to weight
    from to weight
    ...

E is informational only; edges are read until the end of input.
"""

from __future__ import annotations

from typing import List

from ..core.digraph import EdgeWeightedDigraph
from ..core.edge import DirectedEdge
from ..logging import get_logger

logger = get_logger(__name__)


def parse_digraph_string(text: str) -> EdgeWeightedDigraph:
    """
    Parse the edge format into an EdgeWeightedDigraph.

    Parameters
    ----------
    text : str
        Graph description.

    Returns
    -------
    EdgeWeightedDigraph
        Graph with edges added in file order (so each adjacency list
        enumerates them last line first).

    Raises
    ------
    ValueError
        If the header is missing, a token is not a number, an edge triple is
        incomplete, or a vertex is out of range.
    """
    tokens: List[str] = text.split()
    if len(tokens) < 2:
        raise ValueError("Graph text must start with the vertex and edge counts")

    try:
        V = int(tokens[0])
        declared = int(tokens[1])
    except ValueError:
        raise ValueError(f"Invalid graph header: {tokens[0]!r} {tokens[1]!r}")

    body = tokens[2:]
    if len(body) % 3 != 0:
        raise ValueError(f"Incomplete edge triple at end of input ({len(body) % 3} trailing tokens)")

    G = EdgeWeightedDigraph(V)
    for k in range(0, len(body), 3):
        try:
            v, w, weight = int(body[k]), int(body[k + 1]), float(body[k + 2])
        except ValueError:
            raise ValueError(f"Invalid edge {' '.join(body[k:k + 3])!r}")
        G.validate_vertex(v)
        G.validate_vertex(w)
        G.add_edge(DirectedEdge(v, w, weight))

    if declared != G.E():
        logger.warning("Header declares %d edges but %d were read", declared, G.E())
    return G


def load_digraph(path: str) -> EdgeWeightedDigraph:
    """
    Load a digraph from a file in the edge format.

    Parameters
    ----------
    path : str
        Path to the graph file.

    Returns
    -------
    EdgeWeightedDigraph
        Parsed graph.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file contents are malformed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Graph file not found: {path}")

    G = parse_digraph_string(content)
    logger.debug("Loaded %r from %s", G, path)
    return G


def format_digraph(G: EdgeWeightedDigraph) -> str:
    """
    Render G in the edge format.

    Edges are written in reverse adjacency order so that parsing the text
    back reproduces the same adjacency-list order.
    """
    lines = [str(G.V()), str(G.E())]
    for v in range(G.V()):
        for e in reversed(list(G.adj(v))):
            lines.append(f"{e.from_} {e.to} {e.weight!r}")
    return "\n".join(lines) + "\n"


def dump_digraph(G: EdgeWeightedDigraph, path: str) -> None:
    """
    Write G to a file in the edge format.

    Parameters
    ----------
    G : EdgeWeightedDigraph
        Graph to write.
    path : str
        Path to output file.
    """
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_digraph(G))
