from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List

from . import config


class AssetClass(str, Enum):
    """Duration/structure class. Drives how `rate` is interpreted."""

    FLOATING = "floating"                # rate = % of the reference index
    INFLATION_SHORT = "inflation_short"  # rate = real spread over inflation
    FIXED_SHORT = "fixed_short"          # rate = absolute annual rate
    INFLATION_LONG = "inflation_long"    # real spread, marked to market
    FIXED_LONG = "fixed_long"            # absolute rate, marked to market


class ViewMode(str, Enum):
    NOMINAL = "nominal"
    REAL = "real"


@dataclass(frozen=True)
class Asset:
    asset_id: str
    name: str
    asset_class: AssetClass
    rate: float
    maturity_years: float

    def __post_init__(self):
        # accept plain strings, reject anything outside the closed set
        object.__setattr__(self, "asset_class", AssetClass(self.asset_class))
        object.__setattr__(self, "rate", float(self.rate))
        object.__setattr__(self, "maturity_years", float(self.maturity_years))
        if not self.maturity_years > 0:
            raise ValueError(f"{self.asset_id}: maturity_years must be positive.")

    def with_rate(self, rate: float) -> "Asset":
        return replace(self, rate=rate)

    def rate_label(self) -> str:
        if self.asset_class is AssetClass.FLOATING:
            return f"{self.rate:g}% of index"
        if self.asset_class in (AssetClass.INFLATION_SHORT, AssetClass.INFLATION_LONG):
            return f"inflation + {self.rate:g}%"
        return f"{self.rate:g}% p.a."


@dataclass(frozen=True)
class Scenario:
    scenario_id: int
    label: str
    inflation: float  # annual %, held constant over the holding period

    def with_inflation(self, inflation: float) -> "Scenario":
        return replace(self, inflation=float(inflation))


@dataclass(frozen=True)
class SimulationParameters:
    """
    Immutable snapshot of the holding period, real-rate assumption and view
    mode for one recomputation.

    `years` may be any non-negative real even though the UI only offers
    config.HOLDING_PERIODS.
    """
    years: float = config.DEFAULT_HOLDING_PERIOD
    baseline_real_rate: float = config.DEFAULT_BASELINE_REAL_RATE
    view_mode: ViewMode = ViewMode.NOMINAL

    def __post_init__(self):
        object.__setattr__(self, "view_mode", ViewMode(self.view_mode))


def default_assets() -> List[Asset]:
    return [Asset(*row) for row in config.DEFAULT_ASSETS]


def default_scenarios() -> List[Scenario]:
    return [Scenario(*row) for row in config.DEFAULT_SCENARIOS]


def default_allocation() -> Dict[str, int]:
    return dict(config.DEFAULT_ALLOCATION)
