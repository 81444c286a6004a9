"""ewdigraph - shortest paths, longest paths and orderings on edge-weighted digraphs."""

__version__ = "0.1.0"

# Core data structures
from .core import Bag, Digraph, DirectedEdge, EdgeWeightedDigraph, Queue, Stack

# Diagnostics
from .diagnostics import (
    assert_cycle,
    assert_heap_invariants,
    certify,
    check_optimality,
    debug_context,
    is_debug_enabled,
    is_topological_order,
    set_debug_enabled,
)

# I/O
from .io import dump_digraph, format_digraph, load_digraph, parse_digraph_string

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Priority queues
from .pq import DAryMinHeap, IndexedDAryMinPQ

# Scheduling
from .scheduling import CriticalPathSchedule, Job, parse_jobs, schedule_from_string

# Path algorithms
from .shortest import AcyclicLP, AcyclicSP, BellmanFordSP, BFSRelaxerSP, DijkstraSP, PathTree

# Traversal
from .traversal import (
    DepthFirstOrder,
    DepthFirstSearch,
    DirectedCycle,
    EdgeWeightedDirectedCycle,
    Topological,
)

__all__ = [
    "__version__",
    # Core
    "DirectedEdge",
    "Digraph",
    "EdgeWeightedDigraph",
    "Stack",
    "Queue",
    "Bag",
    # Priority queues
    "IndexedDAryMinPQ",
    "DAryMinHeap",
    # Traversal
    "DepthFirstSearch",
    "DepthFirstOrder",
    "Topological",
    "DirectedCycle",
    "EdgeWeightedDirectedCycle",
    # Path algorithms
    "PathTree",
    "AcyclicSP",
    "AcyclicLP",
    "DijkstraSP",
    "BellmanFordSP",
    "BFSRelaxerSP",
    # Scheduling
    "Job",
    "parse_jobs",
    "CriticalPathSchedule",
    "schedule_from_string",
    # I/O
    "parse_digraph_string",
    "load_digraph",
    "format_digraph",
    "dump_digraph",
    # Diagnostics
    "check_optimality",
    "assert_heap_invariants",
    "is_topological_order",
    "assert_cycle",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "certify",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
