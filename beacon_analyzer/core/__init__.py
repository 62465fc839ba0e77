"""
Core utilities — exceptions and cross-cutting concerns.

Shared by the analysis engine and the agent worker.
"""

from beacon_analyzer.core.exceptions import (
    AnalyzerClosedError,
    AnalyzerStateError,
    BeaconAnalyzerError,
    InvalidObservationWindowError,
)

__all__ = [
    "AnalyzerClosedError",
    "AnalyzerStateError",
    "BeaconAnalyzerError",
    "InvalidObservationWindowError",
]
