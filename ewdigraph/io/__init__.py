"""Plain-text import/export of edge-weighted digraphs."""

from .loader import dump_digraph, format_digraph, load_digraph, parse_digraph_string

__all__ = [
    "parse_digraph_string",
    "load_digraph",
    "format_digraph",
    "dump_digraph",
]
