"""
Test that beacon_logging can be imported without circular import and logger works.
"""

from __future__ import annotations


def test_logging_import():
    """Import get_logger from beacon_logging and use the logger."""
    from beacon_analyzer.beacon_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    # Smoke test: call info (should not raise)
    logger.info("test_message", key="value")


def test_bind_connection():
    """bind_connection returns a logger usable with extra fields."""
    from beacon_analyzer.beacon_logging import bind_connection

    logger = bind_connection("10.0.0.5", "203.0.113.9")
    logger.info("test_connection_message", score=0.5)
