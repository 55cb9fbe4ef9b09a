from __future__ import annotations

from . import config


def market_real_rate(inflation: float) -> float:
    """
    Real rate (% over the inflation index) the market demands from
    long-duration paper in a given inflation scenario.

    Linear between two anchors, clamped outside them:
      inflation <= 3.33% -> 3.00%
      inflation >= 8.99% -> 9.00%

    Higher projected inflation implies a higher risk premium, which marks
    down already-issued long bonds carrying a lower contracted rate.
    """
    min_inf, max_inf = config.MARKET_MIN_INFLATION, config.MARKET_MAX_INFLATION
    min_rate, max_rate = config.MARKET_MIN_REAL_RATE, config.MARKET_MAX_REAL_RATE

    if inflation <= min_inf:
        return min_rate
    if inflation >= max_inf:
        return max_rate

    ratio = (inflation - min_inf) / (max_inf - min_inf)
    return min_rate + ratio * (max_rate - min_rate)


def market_fixed_rate(inflation: float) -> float:
    """Market-implied nominal fixed rate (decimal): inflation compounded with the required real rate."""
    return (1.0 + inflation / 100.0) * (1.0 + market_real_rate(inflation) / 100.0) - 1.0


def scenario_yield_label(inflation: float) -> str:
    return config.SCENARIO_YIELD_TEMPLATE.format(rate=market_real_rate(inflation))
