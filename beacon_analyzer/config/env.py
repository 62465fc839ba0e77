"""
Environment variable loading for Beacon Analyzer.

- BEACON_MIN_TIME / BEACON_MAX_TIME: observation window bounds (epoch seconds)
- BEACON_WORKERS: worker threads started by the batch runner
- BEACON_QUEUE_SIZE: handoff queue capacity
- BEACON_CONNECTION_THRESHOLD: minimum connection_count for a record to be scored
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is beacon_analyzer/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"


def load_beacon_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    load_dotenv(_ENV_PATH, override=False)


def get_int(name: str, default: int) -> int:
    """
    Return env var `name` as int, or default when unset or blank.
    Raises ValueError on a non-integer value so misconfiguration is loud.
    """
    load_beacon_env()
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
