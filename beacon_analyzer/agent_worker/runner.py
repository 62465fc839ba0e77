"""
Batch runner: score a finite collection of records on a worker pool.

Wires a BeaconAnalyzer from AnalyzerSettings (env-driven by default), starts
settings.workers threads, submits every record, closes, and returns what the
sink collected. Results come back in completion order; callers that need a
ranking sort them themselves.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Iterable

from beacon_analyzer.agent_worker.dispatcher import BeaconAnalyzer
from beacon_analyzer.analysis_engine.models import AnalysisInput, AnalysisOutput
from beacon_analyzer.beacon_logging import get_logger
from beacon_analyzer.config.settings import AnalyzerSettings, get_settings

logger = get_logger(__name__)


def analyze_batch(
    records: Iterable[AnalysisInput],
    settings: AnalyzerSettings | None = None,
    *,
    on_scored: Callable[[AnalysisOutput], Any] | None = None,
) -> list[AnalysisOutput]:
    """
    Score every record and return the outputs.

    Args:
        records: Records to score; malformed ones are dropped.
        settings: Window and pool shape; None loads them from the environment.
        on_scored: Optional extra sink, called (serialised) for each result
            before it is collected.

    Returns:
        One AnalysisOutput per well-formed record, in completion order.
    """
    cfg = settings or get_settings()
    window = cfg.window()
    results: list[AnalysisOutput] = []
    sink_lock = threading.Lock()
    closed = threading.Event()

    def collect(output: AnalysisOutput) -> None:
        with sink_lock:
            if on_scored is not None:
                on_scored(output)
            results.append(output)

    analyzer = BeaconAnalyzer(
        window,
        collect,
        closed.set,
        queue_size=cfg.queue_size,
        connection_threshold=cfg.connection_threshold,
    )
    for _ in range(cfg.workers):
        analyzer.start()

    started = time.monotonic()
    logger.info(
        "analyzer_batch_started",
        workers=cfg.workers,
        queue_size=cfg.queue_size,
        min_time=window.min_time,
        max_time=window.max_time,
    )
    with analyzer:
        for record in records:
            analyzer.analyze(record)

    stats = analyzer.stats
    logger.info(
        "analyzer_batch_done",
        submitted=stats.submitted,
        scored=len(results),
        skipped=stats.skipped,
        errors=stats.errors,
        closed=closed.is_set(),
        duration_sec=round(time.monotonic() - started, 3),
    )
    return results
