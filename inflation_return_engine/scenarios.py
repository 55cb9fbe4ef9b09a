from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Mapping, Optional, Sequence

import pandas as pd

from . import config
from .assets import Asset, Scenario, SimulationParameters
from .market import market_real_rate, scenario_yield_label
from .portfolio import asset_return, portfolio_return
from .utils import format_return, is_loss


def build_return_table(
    assets: Sequence[Asset],
    scenarios: Sequence[Scenario],
    allocation: Mapping[str, int],
    params: SimulationParameters,
) -> pd.DataFrame:
    """
    Asset x scenario return grid (decimal) in params.view_mode.

    Index: asset_id, plus a final config.PORTFOLIO_ROW.
    Columns: scenario_id, in the order given.
    """
    rows = {}
    for asset in assets:
        rows[asset.asset_id] = [asset_return(asset, s.inflation, params) for s in scenarios]
    rows[config.PORTFOLIO_ROW] = [portfolio_return(assets, allocation, s.inflation, params) for s in scenarios]

    out = pd.DataFrame.from_dict(rows, orient="index", columns=[s.scenario_id for s in scenarios])
    out.index.name = "asset_id"
    out.columns.name = "scenario_id"
    return out


def scenario_summary(scenarios: Iterable[Scenario]) -> pd.DataFrame:
    """Scenario header info: inflation, market real rate and the advisory string."""
    return pd.DataFrame(
        [
            {
                "scenario_id": s.scenario_id,
                "label": s.label,
                "inflation": s.inflation,
                "market_real_rate": market_real_rate(s.inflation),
                "advisory": scenario_yield_label(s.inflation),
            }
            for s in scenarios
        ]
    )


def run_holding_period_grid(
    assets: Sequence[Asset],
    scenarios: Sequence[Scenario],
    allocation: Mapping[str, int],
    params: SimulationParameters,
    holding_periods: Optional[Iterable[float]] = None,
) -> pd.DataFrame:
    """
    Portfolio return for every (holding period, scenario), long format.

    Each period reuses params with only `years` replaced.
    """
    if holding_periods is None:
        holding_periods = config.HOLDING_PERIODS

    rows: List[dict] = []
    for years in holding_periods:
        p = replace(params, years=years)
        for s in scenarios:
            rows.append(
                {
                    "years": years,
                    "scenario_id": s.scenario_id,
                    "label": s.label,
                    "inflation": s.inflation,
                    "portfolio_return": portfolio_return(assets, allocation, s.inflation, p),
                }
            )

    out = pd.DataFrame(rows)
    return out.sort_values(["years", "scenario_id"]).reset_index(drop=True)


def format_return_table(table: pd.DataFrame) -> pd.DataFrame:
    """Render every cell as a 2-decimal percentage string."""
    return table.apply(lambda col: col.map(format_return))


def loss_mask(table: pd.DataFrame) -> pd.DataFrame:
    """True where a cell is negative (capital loss styling hint)."""
    return table.apply(lambda col: col.map(is_loss)).astype(bool)
