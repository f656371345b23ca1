"""
Shared utilities for dataset loaders.

Cell conversion never invents a value: anything that is not a number
comes back as the caller's default (None unless told otherwise).
"""

import re

import pandas as pd

# 1,250 or -12,500.5; a lone comma (175,5) is not a thousands separator
_THOUSANDS = re.compile(r"-?\d{1,3}(,\d{3})+(\.\d+)?")


def find_column(df: pd.DataFrame, candidates: list[str]) -> str | None:
    """Find first matching column name from candidates."""
    for c in candidates:
        if c in df.columns:
            return c
    lowered = {str(col).strip().lower(): col for col in df.columns}
    for c in candidates:
        if c.lower() in lowered:
            return lowered[c.lower()]
    return None


def safe_int(val, default: int | None = None) -> int | None:
    """Convert value to int, returning default on failure.

    Non-integral numbers (2.5) are rejected rather than truncated.
    """
    f = safe_float(val)
    if f is None or not f.is_integer():
        return default
    return int(f)


def safe_float(val, default: float | None = None) -> float | None:
    """Convert value to float, returning default on failure."""
    if val is None or isinstance(val, bool):
        return default
    if isinstance(val, str):
        val = val.strip()
        if _THOUSANDS.fullmatch(val):
            val = val.replace(",", "")
        if not val:
            return default
    try:
        f = float(val)
    except (ValueError, TypeError):
        return default
    if pd.isna(f) or f in (float("inf"), float("-inf")):
        return default
    return f


def parse_win(val) -> int | None:
    """Parse an outcome cell into 0/1; None if it is neither."""
    if isinstance(val, bool):
        return int(val)
    if isinstance(val, str) and val.strip().lower() in ("true", "false"):
        return 1 if val.strip().lower() == "true" else 0
    f = safe_float(val)
    if f in (0.0, 1.0):
        return int(f)
    return None
