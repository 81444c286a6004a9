"""Logging utilities for ewdigraph.

Every module logs through a cached ``ewdigraph.<module>`` logger. All of them
share one configuration (level, format and stream): ``configure_logging``
rewires the loggers that already exist and is remembered for the ones
created later, so it may be called before or after the algorithms are
imported. Algorithms log construction summaries at DEBUG level, so nothing
is printed by default.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

_PACKAGE = "ewdigraph"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Shared configuration; a None stream means sys.stderr
_level = logging.WARNING
_format = _DEFAULT_FORMAT
_stream: Optional[IO[str]] = None

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _qualified(name: Optional[str]) -> str:
    if name is None or name == _PACKAGE:
        return _PACKAGE
    if name.startswith(_PACKAGE + "."):
        return name
    return f"{_PACKAGE}.{name}"


def _attach_handler(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(_stream if _stream is not None else sys.stderr)
    handler.setLevel(_level)
    handler.setFormatter(logging.Formatter(_format))
    logger.addHandler(handler)
    logger.setLevel(_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module; names outside the
    package are prefixed with ``ewdigraph.``.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from ewdigraph.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("relaxed %d edges", 12)
    """
    logger_name = _qualified(name)
    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        _attach_handler(logger)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all ewdigraph loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
    """
    global _level
    _level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Configure logging for ewdigraph.

    Replaces the handlers of every logger created so far; loggers created
    afterwards use the same settings.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> import logging
        >>> from ewdigraph.logging import configure_logging
        >>> configure_logging(level=logging.DEBUG)
    """
    global _level, _format, _stream
    _level = _coerce_level(level)
    _format = format_string or _DEFAULT_FORMAT
    _stream = stream

    for logger in _loggers.values():
        _attach_handler(logger)
