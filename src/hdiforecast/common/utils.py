"""
src/hdiforecast/common/utils.py

Small conversion helpers for loosely typed config values.
"""

from __future__ import annotations

from typing import Any


def safe_int(value: Any, default: int) -> int:
    """Best-effort int conversion with fallback."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def safe_float(value: Any, default: float) -> float:
    """Best-effort float conversion with fallback."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return default
