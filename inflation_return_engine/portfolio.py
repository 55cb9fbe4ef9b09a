from __future__ import annotations

from typing import Iterable, Mapping

import numpy as np

from .assets import Asset, SimulationParameters, ViewMode
from .returns import nominal_return, real_return


def total_allocation(allocation: Mapping[str, int]) -> int:
    return sum(allocation.values())


def weighted_nominal_return(
    assets: Iterable[Asset],
    allocation: Mapping[str, int],
    inflation: float,
    years: float,
    baseline_real_rate: float,
) -> float:
    """
    Allocation-weighted blend of per-asset nominal returns.

    Blending happens at the return level only. Assets missing from the
    allocation weigh 0. The denominator is the allocation's total weight,
    floored to 1 when it is 0 (the result is then 0, not a return).
    """
    assets = list(assets)
    denominator = total_allocation(allocation) or 1

    returns = np.array([nominal_return(a, inflation, years, baseline_real_rate) for a in assets], dtype=float)
    weights = np.array([allocation.get(a.asset_id, 0) for a in assets], dtype=float)

    return float(np.sum(returns * weights)) / denominator


def asset_return(asset: Asset, inflation: float, params: SimulationParameters) -> float:
    """Single grid cell in the requested view mode."""
    nominal = nominal_return(asset, inflation, params.years, params.baseline_real_rate)
    if params.view_mode is ViewMode.REAL:
        return real_return(nominal, inflation, params.years)
    return nominal


def portfolio_return(
    assets: Iterable[Asset],
    allocation: Mapping[str, int],
    inflation: float,
    params: SimulationParameters,
) -> float:
    """
    Portfolio return for one scenario. Real view deflates the blended
    nominal figure once; deflating per asset first is not equivalent under
    the zero-weight guard.
    """
    nominal = weighted_nominal_return(assets, allocation, inflation, params.years, params.baseline_real_rate)
    if params.view_mode is ViewMode.REAL:
        return real_return(nominal, inflation, params.years)
    return nominal
