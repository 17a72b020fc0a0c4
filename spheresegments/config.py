"""Constants and environment-driven settings.

Everything tunable lives here so the calculation and console modules
never hardcode limits or formatting.

Environment:
    SPHERESEGMENTS_LOG_LEVEL: logging level name (default ``WARNING``).
    SPHERESEGMENTS_LOG_FILE: optional path for a copy of the log.
"""

from __future__ import annotations

import logging
import os

# ── Session limits ───────────────────────────────────────────────────────
MIN_SEGMENTS = 2
MAX_SEGMENTS = 10

# ── Output ───────────────────────────────────────────────────────────────
DISPLAY_DECIMALS = 2


def _level_from_env(name: str, default: int = logging.WARNING) -> int:
    raw = os.environ.get(name, "").strip().upper()
    if not raw:
        return default
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


LOG_LEVEL: int = _level_from_env("SPHERESEGMENTS_LOG_LEVEL")
LOG_FILE: str | None = os.environ.get("SPHERESEGMENTS_LOG_FILE") or None
