"""Environment-driven settings.

Environment-first, resolved on every call so tests and front ends can
override values with plain environment variables.
"""

from __future__ import annotations

import logging
import os

_FALSY = {"0", "false", "no", "off"}


def default_ascending() -> bool:
    """Initial move-list order. ``TTT_SORT_ORDER=desc`` lists newest first."""
    raw = os.getenv("TTT_SORT_ORDER", "asc").strip().lower()
    return raw not in ("desc", "descending")


def use_color() -> bool:
    raw = os.getenv("TTT_COLOR")
    if raw is None:
        return True
    return raw.strip().lower() not in _FALSY


def log_level() -> int:
    raw = os.getenv("TTT_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.INFO
