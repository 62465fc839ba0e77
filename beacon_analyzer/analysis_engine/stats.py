"""
Robust order statistics used by the beacon scorer.

Every helper expects a 1-D integer array already sorted ascending. Ranks are
picked with round-half-up (never numpy/Python banker's rounding) so quartile
positions are stable across platforms.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


def quantile_rank(q: float, length: int) -> int:
    """Index of the q-quantile in a sorted sequence of `length` items: floor(q*(length-1) + 0.5)."""
    return int(math.floor(q * (length - 1) + 0.5))


def quartiles(sorted_values: np.ndarray) -> tuple[int, int, int]:
    """Return (Q1, median, Q3) by rank; caller guarantees at least one value."""
    n = len(sorted_values)
    lo = int(sorted_values[quantile_rank(0.25, n)])
    mid = int(sorted_values[quantile_rank(0.5, n)])
    hi = int(sorted_values[quantile_rank(0.75, n)])
    return lo, mid, hi


def bowley_skew(lo: int, mid: int, hi: int) -> float:
    """
    Bowley's quartile skew (Q1 + Q3 - 2*Q2) / (Q3 - Q1).

    Bowley skew is unreliable if Q2 == Q1 or Q2 == Q3, so those cases (and
    a zero denominator) return 0.
    """
    den = hi - lo
    if den == 0 or mid == lo or mid == hi:
        return 0.0
    return float(lo + hi - 2 * mid) / float(den)


def median_absolute_deviation(sorted_values: np.ndarray, mid: int) -> int:
    """Median of |x - mid| over all values (MADM)."""
    devs = np.sort(np.abs(sorted_values - mid))
    return int(devs[quantile_rank(0.5, len(devs))])


def value_range(sorted_values: np.ndarray) -> int:
    if len(sorted_values) == 0:
        return 0
    return int(sorted_values[-1] - sorted_values[0])


def count_map(
    sorted_values: np.ndarray,
) -> tuple[tuple[int, ...], tuple[int, ...], int, int]:
    """
    Return (distinct values, count per distinct value, mode, mode count).

    Distinct values are ascending. On a tie the smallest value keeps the mode
    (np.argmax returns the first maximum). Empty input gives ((), (), 0, 0).
    """
    if len(sorted_values) == 0:
        return (), (), 0, 0
    distinct, counts = np.unique(sorted_values, return_counts=True)
    best = int(np.argmax(counts))
    return (
        tuple(int(v) for v in distinct),
        tuple(int(c) for c in counts),
        int(distinct[best]),
        int(counts[best]),
    )


@dataclass(frozen=True)
class SequenceStats:
    """Skew, dispersion, range and mode summary of one sorted sequence."""

    skew: float = 0.0
    dispersion: int = 0
    value_range: int = 0
    mode: int = 0
    mode_count: int = 0
    distinct: tuple[int, ...] = ()
    counts: tuple[int, ...] = ()


def describe(sorted_values: np.ndarray) -> SequenceStats:
    """
    Summarise a sorted sequence. An empty sequence (a single timestamp has no
    deltas) yields the all-zero SequenceStats instead of failing.
    """
    if len(sorted_values) == 0:
        return SequenceStats()
    lo, mid, hi = quartiles(sorted_values)
    distinct, counts, mode, mode_count = count_map(sorted_values)
    return SequenceStats(
        skew=bowley_skew(lo, mid, hi),
        dispersion=median_absolute_deviation(sorted_values, mid),
        value_range=value_range(sorted_values),
        mode=mode,
        mode_count=mode_count,
        distinct=distinct,
        counts=counts,
    )
