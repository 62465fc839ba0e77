"""
Tests for the order statistics behind the beacon score (analysis_engine.stats).
"""

from __future__ import annotations

import numpy as np
import pytest

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


def _arr(values):
    return np.array(sorted(values), dtype=np.int64)


def test_quantile_rank_rounds_half_up():
    """0.25 * (3 - 1) = 0.5 rounds up to 1, not to the even 0."""
    assert quantile_rank(0.25, 3) == 1
    assert quantile_rank(0.5, 4) == 2
    assert quantile_rank(0.75, 4) == 2
    assert quantile_rank(0.75, 3) == 2


def test_quantile_rank_single_item():
    """A one-item sequence maps every quantile to index 0."""
    assert quantile_rank(0.25, 1) == 0
    assert quantile_rank(0.5, 1) == 0
    assert quantile_rank(0.75, 1) == 0


def test_quartiles_odd_length():
    """[1..5] -> (2, 3, 4)."""
    assert quartiles(_arr([1, 2, 3, 4, 5])) == (2, 3, 4)


def test_quartiles_return_python_ints():
    """Quartiles come back as plain ints, not numpy scalars."""
    lo, mid, hi = quartiles(_arr([5, 1, 3]))
    assert (lo, mid, hi) == (3, 3, 5)
    assert all(type(v) is int for v in (lo, mid, hi))


def test_bowley_skew_symmetric_is_zero():
    """Evenly spaced quartiles -> skew 0."""
    assert bowley_skew(2, 3, 4) == 0.0


def test_bowley_skew_right_skewed():
    """Long upper tail -> positive skew."""
    assert bowley_skew(1, 2, 10) == pytest.approx(7 / 9)


def test_bowley_skew_left_skewed():
    """Long lower tail -> negative skew."""
    assert bowley_skew(1, 9, 10) == pytest.approx(-7 / 9)


@pytest.mark.parametrize(
    "lo,mid,hi",
    [(5, 5, 5), (1, 1, 5), (1, 5, 5)],
)
def test_bowley_skew_degenerate_quartiles_is_zero(lo, mid, hi):
    """Collapsed quartiles make Bowley skew unreliable; it is reported as 0."""
    assert bowley_skew(lo, mid, hi) == 0.0


def test_median_absolute_deviation():
    """MADM ignores the single outlier."""
    # deviations from 3: [2, 1, 0, 1, 97] -> sorted [0, 1, 1, 2, 97]
    assert median_absolute_deviation(_arr([1, 2, 3, 4, 100]), 3) == 1


def test_median_absolute_deviation_constant_sequence():
    """Constant sequence -> MADM 0."""
    assert median_absolute_deviation(_arr([7, 7, 7]), 7) == 0


def test_value_range():
    """Range is last minus first; empty input gives 0."""
    assert value_range(_arr([3, 9, 4])) == 6
    assert value_range(_arr([])) == 0


def test_count_map_counts_and_mode():
    """Distinct values ascending with counts; most frequent is the mode."""
    distinct, counts, mode, mode_count = count_map(_arr([3, 1, 2, 2, 3, 3]))
    assert distinct == (1, 2, 3)
    assert counts == (1, 2, 3)
    assert mode == 3
    assert mode_count == 3


def test_count_map_tie_first_value_wins():
    """[1, 1, 2, 2]: both values occur twice; the first in ascending order is the mode."""
    distinct, counts, mode, mode_count = count_map(_arr([2, 1, 2, 1]))
    assert distinct == (1, 2)
    assert counts == (2, 2)
    assert mode == 1
    assert mode_count == 2


def test_count_map_empty():
    """Empty input -> empty tuples and zero mode."""
    assert count_map(_arr([])) == ((), (), 0, 0)


def test_describe_all_equal():
    """All-equal sequence -> skew 0, dispersion 0, single distinct value."""
    stats = describe(_arr([7, 7, 7, 7]))
    assert stats.skew == 0.0
    assert stats.dispersion == 0
    assert stats.value_range == 0
    assert stats.mode == 7
    assert stats.mode_count == 4
    assert stats.distinct == (7,)
    assert stats.counts == (4,)


def test_describe_empty_uses_safe_defaults():
    """Empty sequence -> default SequenceStats instead of an IndexError."""
    assert describe(_arr([])) == SequenceStats()
