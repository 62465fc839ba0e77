"""
Analysis engine package — beacon scoring for a single host pair.

Consumes raw connection timestamps and byte sizes, computes robust order
statistics, and produces a beacon score with its supporting statistics.
"""

from beacon_analyzer.analysis_engine.models import (
    AnalysisInput,
    AnalysisOutput,
    ObservationWindow,
)
from beacon_analyzer.analysis_engine.scorer import (
    DS_DISPERSION_CUTOFF,
    DS_SIZE_CEILING,
    TS_DISPERSION_CUTOFF,
    score_connection,
)
from beacon_analyzer.analysis_engine.stats import (
    SequenceStats,
    bowley_skew,
    count_map,
    describe,
    median_absolute_deviation,
    quantile_rank,
    quartiles,
    value_range,
)

__all__ = [
    "AnalysisInput",
    "AnalysisOutput",
    "ObservationWindow",
    "DS_DISPERSION_CUTOFF",
    "DS_SIZE_CEILING",
    "TS_DISPERSION_CUTOFF",
    "score_connection",
    "SequenceStats",
    "bowley_skew",
    "count_map",
    "describe",
    "median_absolute_deviation",
    "quantile_rank",
    "quartiles",
    "value_range",
]
