"""
Structured logging for Beacon Analyzer.

JSON logs with timestamp, event_type, and connection fields (src, dst).
Use get_logger() in all modules for aggregation-friendly output.
"""

from beacon_analyzer.beacon_logging.logger import bind_connection, get_logger

__all__ = ["bind_connection", "get_logger"]
