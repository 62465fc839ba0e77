"""
Application settings for the beacon analyzer.

The observation window is fixed for the lifetime of an analyzer; worker
count and queue size shape the dispatcher. Scoring cutoffs are constants
in analysis_engine.scorer and intentionally not configurable here.
"""

from __future__ import annotations

from dataclasses import dataclass

from beacon_analyzer.analysis_engine.models import ObservationWindow
from beacon_analyzer.config.env import get_int

DEFAULT_MIN_TIME = 0
DEFAULT_MAX_TIME = 86400
DEFAULT_WORKERS = 4
DEFAULT_QUEUE_SIZE = 1
DEFAULT_CONNECTION_THRESHOLD = 0
MIN_WORKERS = 1
MIN_QUEUE_SIZE = 1


@dataclass
class AnalyzerSettings:
    """
    Settings for one analyzer run.

    min_time / max_time: Observation window in epoch units.
    workers: Worker threads started by analyze_batch.
    queue_size: Capacity of the handoff queue; producers block when it is full.
    connection_threshold: Records with fewer connections are dropped unscored.
    """

    min_time: int = DEFAULT_MIN_TIME
    max_time: int = DEFAULT_MAX_TIME
    workers: int = DEFAULT_WORKERS
    queue_size: int = DEFAULT_QUEUE_SIZE
    connection_threshold: int = DEFAULT_CONNECTION_THRESHOLD

    def __post_init__(self) -> None:
        self.workers = max(MIN_WORKERS, int(self.workers))
        self.queue_size = max(MIN_QUEUE_SIZE, int(self.queue_size))
        self.connection_threshold = max(0, int(self.connection_threshold))

    def window(self) -> ObservationWindow:
        """Build the observation window; raises InvalidObservationWindowError if empty."""
        return ObservationWindow(min_time=self.min_time, max_time=self.max_time)


def get_settings() -> AnalyzerSettings:
    """Build AnalyzerSettings from environment (and .env) with defaults."""
    return AnalyzerSettings(
        min_time=get_int("BEACON_MIN_TIME", DEFAULT_MIN_TIME),
        max_time=get_int("BEACON_MAX_TIME", DEFAULT_MAX_TIME),
        workers=get_int("BEACON_WORKERS", DEFAULT_WORKERS),
        queue_size=get_int("BEACON_QUEUE_SIZE", DEFAULT_QUEUE_SIZE),
        connection_threshold=get_int(
            "BEACON_CONNECTION_THRESHOLD", DEFAULT_CONNECTION_THRESHOLD
        ),
    )
