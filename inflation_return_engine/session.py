from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

import pandas as pd

from . import config
from .assets import (
    Asset,
    Scenario,
    SimulationParameters,
    ViewMode,
    default_allocation,
    default_assets,
    default_scenarios,
)
from .scenarios import build_return_table, run_holding_period_grid, scenario_summary
from .utils import clamp_percent, coerce_weight, coerce_years, parse_float

logger = logging.getLogger(__name__)


class SimulationSession:
    """
    Mutable, in-memory store for one simulation session.

    Edits arrive as raw user input and are coerced here; the engine only
    ever sees immutable snapshots (`assets`, `scenarios`, `allocation`,
    `params`) rebuilt on each recomputation.
    """

    def __init__(
        self,
        assets: Optional[List[Asset]] = None,
        scenarios: Optional[List[Scenario]] = None,
        allocation: Optional[Dict[str, int]] = None,
        params: Optional[SimulationParameters] = None,
    ):
        self._assets: Dict[str, Asset] = {a.asset_id: a for a in (assets if assets is not None else default_assets())}
        self._scenarios: Dict[int, Scenario] = {
            s.scenario_id: s for s in (scenarios if scenarios is not None else default_scenarios())
        }
        if allocation is None:
            allocation = default_allocation()
        self._allocation: Dict[str, int] = {aid: coerce_weight(allocation.get(aid, 0)) for aid in self._assets}
        self._params = params if params is not None else SimulationParameters()

    # ---------- snapshots ----------

    @property
    def assets(self) -> List[Asset]:
        return list(self._assets.values())

    @property
    def scenarios(self) -> List[Scenario]:
        return list(self._scenarios.values())

    @property
    def allocation(self) -> Dict[str, int]:
        return dict(self._allocation)

    @property
    def params(self) -> SimulationParameters:
        return self._params

    @property
    def total_allocation(self) -> int:
        return sum(self._allocation.values())

    # ---------- edits ----------

    @staticmethod
    def _percent_edit(value: Any, what: str) -> float:
        pct = parse_float(value)
        if pct is None:
            logger.warning("Unparseable %s %r, using 0.", what, value)
            return 0.0
        clamped = clamp_percent(pct)
        if clamped != pct:
            logger.warning("Out-of-range %s %r, using %s.", what, value, clamped)
        return clamped

    def set_rate(self, asset_id: str, value: Any) -> Asset:
        asset = self._assets[asset_id]
        rate = self._percent_edit(value, f"rate for {asset_id}")
        self._assets[asset_id] = asset.with_rate(rate)
        logger.debug("Rate %s: %s -> %s", asset_id, asset.rate, rate)
        return self._assets[asset_id]

    def set_inflation(self, scenario_id: int, value: Any) -> Scenario:
        scenario = self._scenarios[scenario_id]
        inflation = self._percent_edit(value, f"inflation for scenario {scenario_id}")
        self._scenarios[scenario_id] = scenario.with_inflation(inflation)
        logger.debug("Inflation %s: %s -> %s", scenario_id, scenario.inflation, inflation)
        return self._scenarios[scenario_id]

    def set_allocation(self, asset_id: str, value: Any) -> int:
        if asset_id not in self._assets:
            raise KeyError(asset_id)
        weight = coerce_weight(value)
        self._allocation[asset_id] = weight
        logger.debug("Allocation %s -> %d (total %d)", asset_id, weight, self.total_allocation)
        return weight

    def set_years(self, value: Any) -> SimulationParameters:
        self._params = replace(self._params, years=coerce_years(value))
        return self._params

    def set_baseline_real_rate(self, value: Any) -> SimulationParameters:
        self._params = replace(self._params, baseline_real_rate=self._percent_edit(value, "baseline real rate"))
        return self._params

    def set_view_mode(self, mode: Any) -> SimulationParameters:
        self._params = replace(self._params, view_mode=ViewMode(mode))
        return self._params

    # ---------- recomputation ----------

    def return_table(self) -> pd.DataFrame:
        return build_return_table(self.assets, self.scenarios, self.allocation, self._params)

    def holding_period_grid(self) -> pd.DataFrame:
        return run_holding_period_grid(self.assets, self.scenarios, self.allocation, self._params, config.HOLDING_PERIODS)

    def scenario_summary(self) -> pd.DataFrame:
        return scenario_summary(self.scenarios)
