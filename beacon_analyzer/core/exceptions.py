"""
Application-level exceptions.

Malformed records are never raised; they are dropped by the scorer. Degenerate
quartiles are never raised; skew falls back to 0. What remains here is
configuration errors and misuse of the analyzer lifecycle.
"""

from __future__ import annotations


class BeaconAnalyzerError(Exception):
    """Base class for all beacon analyzer errors."""


class InvalidObservationWindowError(BeaconAnalyzerError, ValueError):
    """Observation window is empty or inverted (max_time <= min_time)."""

    def __init__(self, min_time: int, max_time: int) -> None:
        super().__init__(
            f"observation window must satisfy max_time > min_time "
            f"(got min_time={min_time}, max_time={max_time})"
        )
        self.min_time = min_time
        self.max_time = max_time


class AnalyzerStateError(BeaconAnalyzerError, RuntimeError):
    """Lifecycle call made in a state that does not allow it."""


class AnalyzerClosedError(AnalyzerStateError):
    """Submission, start, or close after close() has begun. Programming error."""
