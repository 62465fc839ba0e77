"""
Pytest fixtures for beacon analyzer tests: a default observation window and
a record factory. Clears BEACON_* env so settings fall back to defaults.
"""

from __future__ import annotations

import pytest

from beacon_analyzer.analysis_engine.models import AnalysisInput, ObservationWindow

BEACON_ENV_VARS = (
    "BEACON_MIN_TIME",
    "BEACON_MAX_TIME",
    "BEACON_WORKERS",
    "BEACON_QUEUE_SIZE",
    "BEACON_CONNECTION_THRESHOLD",
)


@pytest.fixture(autouse=True)
def clean_beacon_env(monkeypatch):
    for name in BEACON_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def window():
    """One-hour window starting at epoch 0."""
    return ObservationWindow(min_time=0, max_time=3600)


@pytest.fixture
def make_record():
    """Factory for AnalysisInput; counts default to the sequence lengths."""

    def _make(
        uconn_id=1,
        timestamps=None,
        byte_sizes=None,
        *,
        src="10.0.0.5",
        dst="203.0.113.9",
        connection_count=None,
    ):
        if connection_count is None:
            connection_count = len(timestamps) if timestamps else 0
        avg = sum(byte_sizes) / len(byte_sizes) if byte_sizes else 0.0
        return AnalysisInput(
            uconn_id=uconn_id,
            src=src,
            dst=dst,
            timestamps=timestamps,
            byte_sizes=byte_sizes,
            connection_count=connection_count,
            average_bytes=avg,
        )

    return _make
