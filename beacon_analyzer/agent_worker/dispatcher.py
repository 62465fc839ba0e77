"""
Concurrent beacon analyzer: bounded handoff queue → worker threads → scorer → callback.

Producers call analyze() and block while the queue is full, so they are
throttled by scoring throughput. Each start() adds one worker thread; workers
compete for records on the shared queue and call on_scored on their own
thread. close() stops intake, lets every worker drain what is already queued,
joins them, and only then calls on_closed, exactly once.

Lifecycle: created → running → closing → closed.
"""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from beacon_analyzer.analysis_engine.models import (
    AnalysisInput,
    AnalysisOutput,
    ObservationWindow,
)
from beacon_analyzer.analysis_engine.scorer import score_connection
from beacon_analyzer.beacon_logging import get_logger
from beacon_analyzer.config.settings import DEFAULT_QUEUE_SIZE
from beacon_analyzer.core.exceptions import AnalyzerClosedError

logger = get_logger(__name__)

# One per started worker; queued by close() behind all submitted records
_SENTINEL = object()


class AnalyzerState(str, Enum):
    CREATED = "created"
    RUNNING = "running"
    CLOSING = "closing"
    CLOSED = "closed"


@dataclass
class AnalyzerStats:
    """Counters for monitoring; a snapshot is returned by BeaconAnalyzer.stats."""

    submitted: int = 0
    scored: int = 0
    skipped: int = 0
    errors: int = 0


class BeaconAnalyzer:
    """
    Scores AnalysisInput records on worker threads and hands results to a sink.

    Args:
        window: Observation window shared read-only by all workers.
        on_scored: Called once per scored record, on the worker's thread.
            Callers needing cross-worker ordering must serialise inside it.
        on_closed: Called once, after close() has drained every worker.
        queue_size: Handoff queue capacity (at least 1).
        connection_threshold: Records whose connection_count is below this
            are dropped without scoring; 0 disables the filter.
    """

    def __init__(
        self,
        window: ObservationWindow,
        on_scored: Callable[[AnalysisOutput], Any],
        on_closed: Callable[[], Any],
        *,
        queue_size: int = DEFAULT_QUEUE_SIZE,
        connection_threshold: int = 0,
    ) -> None:
        self._window = window
        self._on_scored = on_scored
        self._on_closed = on_closed
        self._connection_threshold = max(0, int(connection_threshold))
        self._queue: queue.Queue[Any] = queue.Queue(maxsize=max(1, int(queue_size)))
        self._workers: list[threading.Thread] = []
        self._state = AnalyzerState.CREATED
        # _lock guards state, the worker list and _in_flight (producers inside queue.put)
        self._lock = threading.Lock()
        self._puts_done = threading.Condition(self._lock)
        self._in_flight = 0
        self._stats = AnalyzerStats()
        self._stats_lock = threading.Lock()

    @property
    def state(self) -> AnalyzerState:
        return self._state

    @property
    def window(self) -> ObservationWindow:
        return self._window

    @property
    def worker_count(self) -> int:
        return len(self._workers)

    @property
    def stats(self) -> AnalyzerStats:
        with self._stats_lock:
            return AnalyzerStats(
                submitted=self._stats.submitted,
                scored=self._stats.scored,
                skipped=self._stats.skipped,
                errors=self._stats.errors,
            )

    def start(self) -> None:
        """Start one more worker thread. Raises AnalyzerClosedError once close() has begun."""
        with self._lock:
            if self._state in (AnalyzerState.CLOSING, AnalyzerState.CLOSED):
                raise AnalyzerClosedError("cannot start a worker on a closed analyzer")
            self._spawn_worker()
            self._state = AnalyzerState.RUNNING

    def analyze(self, data: AnalysisInput) -> None:
        """
        Hand a record to the workers. Blocks while the queue is full.

        Raises AnalyzerClosedError if close() has begun; submitting after
        close is a programming error, not a recoverable condition.
        """
        with self._lock:
            if self._state in (AnalyzerState.CLOSING, AnalyzerState.CLOSED):
                raise AnalyzerClosedError("analyze() called after close()")
            self._in_flight += 1
        try:
            self._queue.put(data)
        finally:
            with self._lock:
                self._in_flight -= 1
                self._count("submitted")
                self._puts_done.notify_all()

    def close(self) -> None:
        """
        Stop accepting records, wait for workers to drain the queue, then call on_closed.

        Blocks until every record submitted before close() has been scored or
        dropped. Raises AnalyzerClosedError when called a second time.
        """
        with self._lock:
            if self._state in (AnalyzerState.CLOSING, AnalyzerState.CLOSED):
                raise AnalyzerClosedError("close() called twice")
            self._state = AnalyzerState.CLOSING
            # Records queued or mid-put before any start() still need a worker to drain them
            if not self._workers and (self._in_flight or not self._queue.empty()):
                self._spawn_worker()
            # Sentinels must land behind every record already being handed over
            self._puts_done.wait_for(lambda: self._in_flight == 0)
            workers = list(self._workers)

        for _ in workers:
            self._queue.put(_SENTINEL)
        for worker in workers:
            worker.join()

        with self._lock:
            self._state = AnalyzerState.CLOSED
        stats = self.stats
        logger.info(
            "analyzer_closed",
            workers=len(workers),
            submitted=stats.submitted,
            scored=stats.scored,
            skipped=stats.skipped,
            errors=stats.errors,
        )
        self._on_closed()

    def __enter__(self) -> BeaconAnalyzer:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        if self._state not in (AnalyzerState.CLOSING, AnalyzerState.CLOSED):
            self.close()

    def _spawn_worker(self) -> None:
        worker_id = len(self._workers)
        thread = threading.Thread(
            target=self._run_worker,
            args=(worker_id,),
            name=f"beacon-analyzer-{worker_id}",
            daemon=True,
        )
        self._workers.append(thread)
        thread.start()
        logger.info(
            "analyzer_worker_started",
            worker_id=worker_id,
            min_time=self._window.min_time,
            max_time=self._window.max_time,
        )

    def _run_worker(self, worker_id: int) -> None:
        processed = 0
        while True:
            item = self._queue.get()
            try:
                if item is _SENTINEL:
                    break
                self._process(item)
                processed += 1
            finally:
                self._queue.task_done()
        logger.info("analyzer_worker_stopped", worker_id=worker_id, processed=processed)

    def _process(self, data: AnalysisInput) -> None:
        """
        Score one record and deliver it. Malformed and below-threshold records
        are dropped. A failure is logged and counted so a single bad record
        cannot stall the queue or shutdown.
        """
        if data.connection_count < self._connection_threshold:
            logger.debug(
                "analyzer_record_skipped",
                reason="below_connection_threshold",
                uconn_id=data.uconn_id,
                connection_count=data.connection_count,
                threshold=self._connection_threshold,
            )
            self._count("skipped")
            return
        try:
            output = score_connection(data, self._window)
            if output is None:
                self._count("skipped")
                return
            self._on_scored(output)
        except Exception as e:
            self._count("errors")
            logger.exception(
                "analyzer_record_failed",
                uconn_id=getattr(data, "uconn_id", None),
                src=getattr(data, "src", None),
                dst=getattr(data, "dst", None),
                error=str(e),
            )
            return
        self._count("scored")

    def _count(self, name: str) -> None:
        with self._stats_lock:
            setattr(self._stats, name, getattr(self._stats, name) + 1)
