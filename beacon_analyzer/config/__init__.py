"""
Configuration management for Beacon Analyzer.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for the observation window and the
worker pool shape.
"""

from beacon_analyzer.config.settings import AnalyzerSettings, get_settings  # noqa: F401

__all__ = ["AnalyzerSettings", "get_settings"]
