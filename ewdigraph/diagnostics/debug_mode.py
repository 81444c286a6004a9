"""
Debug mode for ewdigraph.

With debug mode on, path trees are certified against the optimality
conditions as soon as they are built, indexed priority queues re-check their
heap invariants after every update and Dijkstra rejects negative weights up
front. All of these run through ``certify`` so that the checks cost nothing
when debug mode is off.

The initial state comes from the EWDIGRAPH_DEBUG environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from ..logging import get_logger

logger = get_logger(__name__)

_DEBUG_ENV_VAR = "EWDIGRAPH_DEBUG"
_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in _TRUE_VALUES


_debug_enabled: bool = _env_flag(_DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """
    Return whether results are being certified as they are built.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> bool:
    """
    Globally enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Whether to certify results from now on.

    Returns
    -------
    bool
        The previous state, so callers can restore it.
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    if previous != _debug_enabled:
        logger.debug("Debug mode %s", "enabled" if _debug_enabled else "disabled")
    return previous


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     sp = DijkstraSP(G, 0)  # certified on construction
    """
    previous = set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)


def certify(check: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
    """
    Run ``check(*args, **kwargs)`` only when debug mode is on.

    The check is expected to raise ValueError on failure; its exception
    propagates unchanged.

    Returns
    -------
    bool
        True if the check ran, False if debug mode is off.
    """
    if not _debug_enabled:
        return False
    check(*args, **kwargs)
    return True
