from __future__ import annotations

from typing import Optional

from .assets import Asset, AssetClass
from .market import market_fixed_rate, market_real_rate


def annual_rate(asset: Asset, inflation: float, baseline_real_rate: float) -> Optional[float]:
    """
    Per-year rate (decimal) for the accrual classes, which are held to or
    near maturity and never marked to market.

    Returns None for long classes; their return is not a single compounded rate.
    """
    inflation_dec = inflation / 100.0
    cls = asset.asset_class

    if cls is AssetClass.FIXED_SHORT:
        return asset.rate / 100.0
    if cls is AssetClass.INFLATION_SHORT:
        return (1.0 + inflation_dec) * (1.0 + asset.rate / 100.0) - 1.0
    if cls is AssetClass.FLOATING:
        index_rate = (1.0 + inflation_dec) * (1.0 + baseline_real_rate / 100.0) - 1.0
        return index_rate * (asset.rate / 100.0)
    return None


def nominal_return(asset: Asset, inflation: float, years: float, baseline_real_rate: float) -> float:
    """
    Accumulated nominal return (decimal, not annualized) over `years`.

    Short/floating classes compound their annual rate. Long classes are
    sold before maturity at the scenario's market rate:

      inflation_long: (1+i)^y * (1+c)^y * ((1+c)/(1+m))^r - 1
      fixed_long:     (1+c)^y * ((1+c)/(1+p))^r - 1

    c = contracted rate, m = market real rate, p = market fixed rate,
    r = max(0, maturity - y). This is a closed-form approximation of a
    mark-to-market, not a cashflow PV.
    """
    if years <= 0:
        return 0.0

    rate = annual_rate(asset, inflation, baseline_real_rate)
    if rate is not None:
        if rate <= -1.0:
            # non-positive growth base: total loss
            return -1.0
        return (1.0 + rate) ** years - 1.0

    contracted = asset.rate / 100.0
    remaining = max(0.0, asset.maturity_years - years)
    accrual = (1.0 + contracted) ** years

    if asset.asset_class is AssetClass.INFLATION_LONG:
        market = market_real_rate(inflation) / 100.0
        indexation = (1.0 + inflation / 100.0) ** years
        shock = ((1.0 + contracted) / (1.0 + market)) ** remaining
        return indexation * accrual * shock - 1.0

    if asset.asset_class is AssetClass.FIXED_LONG:
        market = market_fixed_rate(inflation)
        shock = ((1.0 + contracted) / (1.0 + market)) ** remaining
        return accrual * shock - 1.0

    raise ValueError(f"{asset.asset_id}: unsupported asset class {asset.asset_class!r}")


def accumulated_inflation(inflation: float, years: float) -> float:
    return (1.0 + inflation / 100.0) ** years - 1.0


def real_return(nominal: float, inflation: float, years: float) -> float:
    """Exact Fisher deflation of an accumulated nominal return (not nominal - inflation)."""
    return (1.0 + nominal) / (1.0 + accumulated_inflation(inflation, years)) - 1.0
