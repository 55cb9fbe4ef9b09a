from __future__ import annotations

import math
from typing import Any, Optional

from . import config


def parse_float(value: Any) -> Optional[float]:
    """Float from a user edit, or None when unparseable or non-finite."""
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        out = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(out):
        return None
    return out


def coerce_float(value: Any, default: float = 0.0) -> float:
    """
    Parse a user edit into a float. Unparseable input falls back to
    `default` so nothing invalid reaches the engine.
    """
    out = parse_float(value)
    return default if out is None else out


def coerce_weight(value: Any) -> int:
    """Allocation slider value: integer in [MIN_WEIGHT, MAX_WEIGHT]."""
    w = int(coerce_float(value))
    return max(config.MIN_WEIGHT, min(config.MAX_WEIGHT, w))


def clamp_percent(value: float) -> float:
    """Keep a percentage rate strictly above -100%."""
    return max(config.MIN_PERCENT, value)


def coerce_years(value: Any) -> float:
    """Holding period in years; negatives clamp to 0."""
    return max(0.0, coerce_float(value))


def format_return(value: float, decimals: int = config.PCT_DECIMALS) -> str:
    """0.0532 -> '5.32%'"""
    return f"{value * 100.0:.{decimals}f}%"


def is_loss(value: float) -> bool:
    return value < 0.0
