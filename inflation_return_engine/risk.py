from __future__ import annotations

from typing import Sequence

import pandas as pd
from scipy.optimize import brentq

from . import config
from .assets import Asset
from .returns import nominal_return


def inflation_sensitivity(
    assets: Sequence[Asset],
    inflation: float,
    years: float,
    baseline_real_rate: float,
    bump_bp: float = config.INFLATION_BUMP_BP,
) -> pd.DataFrame:
    """
    Nominal return change per asset for a +bump_bp move in scenario inflation.

    Columns: asset_id, return_base, return_up, inflation_dv01 (decimal return
    per bump). Long classes pick up both the indexation and the market-rate
    repricing; fixed_short is flat.
    """
    bumped = inflation + bump_bp / 100.0

    rows = []
    for asset in assets:
        base = nominal_return(asset, inflation, years, baseline_real_rate)
        up = nominal_return(asset, bumped, years, baseline_real_rate)
        rows.append(
            {
                "asset_id": asset.asset_id,
                "return_base": base,
                "return_up": up,
                "inflation_dv01": up - base,
            }
        )

    return pd.DataFrame(rows, columns=["asset_id", "return_base", "return_up", "inflation_dv01"])


def breakeven_inflation(
    asset_a: Asset,
    asset_b: Asset,
    years: float,
    baseline_real_rate: float,
    lower: float = config.BREAKEVEN_LOWER,
    upper: float = config.BREAKEVEN_UPPER,
) -> float:
    """
    Scenario inflation (%) at which both assets earn the same nominal return
    over `years`, e.g. fixed vs inflation-linked break-even.

    1D root solve on the return difference. Raises ValueError when the
    difference does not change sign on [lower, upper] or is 0 at both ends.
    """

    def residual(inflation: float) -> float:
        ra = nominal_return(asset_a, inflation, years, baseline_real_rate)
        rb = nominal_return(asset_b, inflation, years, baseline_real_rate)
        return ra - rb

    fa, fb = residual(lower), residual(upper)
    if fa == 0.0 and fb == 0.0:
        raise ValueError(
            f"Returns of {asset_a.asset_id} and {asset_b.asset_id} are identical across "
            f"[{lower}, {upper}]; no break-even."
        )
    if fa == 0.0:
        return lower
    if fb == 0.0:
        return upper
    if fa * fb > 0:
        raise ValueError(
            f"Break-even not bracketed for {asset_a.asset_id} vs {asset_b.asset_id} "
            f"on [{lower}, {upper}]."
        )

    return float(brentq(residual, lower, upper, maxiter=300, xtol=config.BREAKEVEN_XTOL))
