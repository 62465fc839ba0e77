"""
Data models for analysis engine input and output.

AnalysisInput is what the producer hands over for one host pair; AnalysisOutput
is the scored, immutable result delivered to the sink exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from beacon_analyzer.core.exceptions import InvalidObservationWindowError


@dataclass(frozen=True)
class ObservationWindow:
    """Fixed [min_time, max_time] interval used to normalise connection duration."""

    min_time: int
    max_time: int

    def __post_init__(self) -> None:
        if self.max_time <= self.min_time:
            raise InvalidObservationWindowError(self.min_time, self.max_time)

    @property
    def span(self) -> int:
        return self.max_time - self.min_time


@dataclass
class AnalysisInput:
    """
    Raw connection data for one host pair over the observation window.

    Both sequences arrive unordered and may contain duplicates. A record with
    either sequence missing or empty is malformed and is never scored.
    """

    uconn_id: Any
    """Opaque id of the unique-connection group upstream."""
    src: str
    dst: str
    timestamps: list[int] | None = None
    """Connection start times (epoch units)."""
    byte_sizes: list[int] | None = None
    """Outbound bytes per connection."""
    connection_count: int = 0
    average_bytes: float = 0.0

    def is_well_formed(self) -> bool:
        return bool(self.timestamps) and bool(self.byte_sizes)


@dataclass(frozen=True)
class AnalysisOutput:
    """
    Beacon score and supporting statistics for one host pair.

    ts_* fields describe the sorted inter-arrival deltas (except ts_duration,
    which describes the timestamps themselves); ds_* fields describe the
    sorted byte sizes. Scores are nominally in [0, 1] but ts_duration is
    never clamped, so ts_score and score can leave that range.
    """

    uconn_id: Any
    src: str
    dst: str
    connection_count: int
    average_bytes: float

    ts_skew: float
    ts_dispersion: int
    ts_duration: float
    ts_range: int
    ts_mode: int
    ts_mode_count: int
    ts_intervals: tuple[int, ...]
    ts_interval_counts: tuple[int, ...]

    ds_skew: float
    ds_dispersion: int
    ds_range: int
    ds_mode: int
    ds_mode_count: int
    ds_sizes: tuple[int, ...]
    ds_size_counts: tuple[int, ...]

    ts_score: float
    ds_score: float
    score: float

    sub_scores: dict[str, float] = field(default_factory=dict, compare=False)
    """Individual sub-scores behind ts_score / ds_score, for review."""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable result; stable key order for downstream."""
        return {
            "uconn_id": self.uconn_id,
            "src": self.src,
            "dst": self.dst,
            "connection_count": self.connection_count,
            "average_bytes": self.average_bytes,
            "ts_skew": self.ts_skew,
            "ts_dispersion": self.ts_dispersion,
            "ts_duration": self.ts_duration,
            "ts_range": self.ts_range,
            "ts_mode": self.ts_mode,
            "ts_mode_count": self.ts_mode_count,
            "ts_intervals": list(self.ts_intervals),
            "ts_interval_counts": list(self.ts_interval_counts),
            "ds_skew": self.ds_skew,
            "ds_dispersion": self.ds_dispersion,
            "ds_range": self.ds_range,
            "ds_mode": self.ds_mode,
            "ds_mode_count": self.ds_mode_count,
            "ds_sizes": list(self.ds_sizes),
            "ds_size_counts": list(self.ds_size_counts),
            "ts_score": self.ts_score,
            "ds_score": self.ds_score,
            "score": self.score,
            "sub_scores": dict(self.sub_scores),
        }
