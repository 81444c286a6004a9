"""Diagnostics and debugging utilities for ewdigraph."""

from .core import (
    assert_cycle,
    assert_heap_invariants,
    check_optimality,
    is_topological_order,
)
from .debug_mode import (
    certify,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "check_optimality",
    "assert_heap_invariants",
    "is_topological_order",
    "assert_cycle",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "certify",
]
