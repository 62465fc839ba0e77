"""
Agent worker package — concurrent beacon scoring.

Owns the handoff queue and worker threads that apply the analysis engine to
a stream of records, plus a batch runner for finite inputs.
"""

from beacon_analyzer.agent_worker.dispatcher import (
    AnalyzerState,
    AnalyzerStats,
    BeaconAnalyzer,
)
from beacon_analyzer.agent_worker.runner import analyze_batch

__all__ = ["AnalyzerState", "AnalyzerStats", "BeaconAnalyzer", "analyze_batch"]
