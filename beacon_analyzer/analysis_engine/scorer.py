"""
Beacon score computation for one host pair.

Perfect beacons fire at a fixed interval for the whole observation window and
send small, constant payloads. Each of those traits becomes a sub-score:

- symmetric delta-time and size distributions (Bowley skew near 0)
- low dispersion around the median delta and size (MADM)
- connections spanning the observation window (duration)
- small payloads (mode size against 65535)

The time and size triads are averaged into ts_score / ds_score and the six
sub-scores into score. Pure and stateless: safe to call from any thread.
"""

from __future__ import annotations

import numpy as np

from beacon_analyzer.analysis_engine.models import (
    AnalysisInput,
    AnalysisOutput,
    ObservationWindow,
)
from beacon_analyzer.analysis_engine.stats import describe
from beacon_analyzer.beacon_logging import get_logger

logger = get_logger(__name__)

# Dispersion cutoffs: MADM at or above these scores 0
TS_DISPERSION_CUTOFF = 30.0
DS_DISPERSION_CUTOFF = 32.0
# Payload size that scores 0 on smallness
DS_SIZE_CEILING = 65535.0


def score_connection(
    data: AnalysisInput,
    window: ObservationWindow,
) -> AnalysisOutput | None:
    """
    Score one host pair for beaconing.

    Args:
        data: Raw timestamps and byte sizes; neither list is modified.
        window: Observation window used to normalise duration.

    Returns:
        AnalysisOutput, or None when timestamps or byte sizes are missing or
        empty. Malformed records are dropped without raising.
    """
    if not data.is_well_formed():
        logger.debug(
            "connection_skipped_malformed",
            uconn_id=data.uconn_id,
            src=data.src,
            dst=data.dst,
            has_timestamps=bool(data.timestamps),
            has_byte_sizes=bool(data.byte_sizes),
        )
        return None

    # arrival order carries no meaning
    ts = np.sort(np.asarray(data.timestamps, dtype=np.int64))
    sizes = np.sort(np.asarray(data.byte_sizes, dtype=np.int64))

    # perfect beacons should fill the observation period
    duration = float(ts[-1] - ts[0]) / float(window.span)

    deltas = np.sort(np.diff(ts))
    ts_stats = describe(deltas)
    ds_stats = describe(sizes)

    ts_skew_score = 1.0 - abs(ts_stats.skew)
    ds_skew_score = 1.0 - abs(ds_stats.skew)
    ts_madm_score = max(0.0, 1.0 - ts_stats.dispersion / TS_DISPERSION_CUTOFF)
    ds_madm_score = max(0.0, 1.0 - ds_stats.dispersion / DS_DISPERSION_CUTOFF)
    ts_duration_score = duration
    ds_smallness_score = max(0.0, 1.0 - ds_stats.mode / DS_SIZE_CEILING)

    ts_sum = ts_skew_score + ts_madm_score + ts_duration_score
    ds_sum = ds_skew_score + ds_madm_score + ds_smallness_score

    output = AnalysisOutput(
        uconn_id=data.uconn_id,
        src=data.src,
        dst=data.dst,
        connection_count=data.connection_count,
        average_bytes=data.average_bytes,
        ts_skew=ts_stats.skew,
        ts_dispersion=ts_stats.dispersion,
        ts_duration=duration,
        ts_range=ts_stats.value_range,
        ts_mode=ts_stats.mode,
        ts_mode_count=ts_stats.mode_count,
        ts_intervals=ts_stats.distinct,
        ts_interval_counts=ts_stats.counts,
        ds_skew=ds_stats.skew,
        ds_dispersion=ds_stats.dispersion,
        ds_range=ds_stats.value_range,
        ds_mode=ds_stats.mode,
        ds_mode_count=ds_stats.mode_count,
        ds_sizes=ds_stats.distinct,
        ds_size_counts=ds_stats.counts,
        ts_score=ts_sum / 3.0,
        ds_score=ds_sum / 3.0,
        score=(ts_sum + ds_sum) / 6.0,
        sub_scores={
            "ts_skew": ts_skew_score,
            "ts_dispersion": ts_madm_score,
            "ts_duration": ts_duration_score,
            "ds_skew": ds_skew_score,
            "ds_dispersion": ds_madm_score,
            "ds_smallness": ds_smallness_score,
        },
    )
    logger.debug(
        "connection_scored",
        uconn_id=data.uconn_id,
        src=data.src,
        dst=data.dst,
        score=output.score,
        ts_score=output.ts_score,
        ds_score=output.ds_score,
    )
    return output
