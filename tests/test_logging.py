"""Tests for logging utilities."""

import logging
from io import StringIO

from ewdigraph import AcyclicSP
from ewdigraph.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)

from conftest import TINY_EWDAG, build_digraph


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "ewdigraph.test_module"


def test_get_logger_package_names_unchanged():
    """Test that module names inside the package are not prefixed twice."""
    assert get_logger("ewdigraph.shortest.dijkstra").name == "ewdigraph.shortest.dijkstra"
    assert get_logger().name == "ewdigraph"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2
    assert len(logger1.handlers) == 1


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level():
    """Test that set_log_level updates logger levels."""
    logger = get_logger("test_module")

    set_log_level(logging.INFO)
    assert logger.level == logging.INFO
    assert all(h.level == logging.INFO for h in logger.handlers)

    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")

    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

    set_log_level("error")
    assert logger.level == logging.ERROR

    set_log_level(logging.WARNING)


def test_configure_logging():
    """Test configure_logging function."""
    logger = get_logger("test_module")
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger.debug("Debug message")
    finally:
        configure_logging(level=logging.WARNING)

    output = stream.getvalue()
    assert "Debug message" in output
    assert "ewdigraph.test_module" in output


def test_configure_logging_applies_to_new_loggers():
    """Test that loggers created after configure_logging use its settings."""
    stream = StringIO()
    try:
        configure_logging(level="INFO", format_string="%(levelname)s|%(message)s", stream=stream)
        logger = get_logger("created_after_configure")
        logger.info("late logger")
    finally:
        configure_logging(level=logging.WARNING)

    assert stream.getvalue() == "INFO|late logger\n"
    assert logger.level == logging.WARNING


def test_algorithms_log_at_debug():
    """Test that path engines report their construction at DEBUG level."""
    get_logger("ewdigraph.shortest.acyclic")
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream, format_string="%(name)s %(message)s")
        AcyclicSP(build_digraph(8, TINY_EWDAG), 5)
    finally:
        configure_logging(level=logging.WARNING)

    assert "ewdigraph.shortest.acyclic AcyclicSP from 5 over V=8 E=13" in stream.getvalue()


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False
