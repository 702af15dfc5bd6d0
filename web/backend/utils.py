#!/usr/bin/env python3
"""
Conversion helpers for building API responses from ORM rows.
"""

from typing import Optional, Any
from datetime import datetime


def safe_float(value: Optional[Any], default: float = 0.0) -> float:
    """
    Convert a numeric column value to float.

    Scores are stored as FLOAT but drivers may hand back Decimal or None.
    """
    if value is None:
        return default
    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def safe_int(value: Optional[Any], default: int = 0) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def safe_str(value: Optional[Any], default: str = "") -> str:
    return default if value is None else str(value)


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """ISO 8601 string of a timestamp column, or None when unset."""
    if dt is None:
        return None
    return dt.isoformat()
