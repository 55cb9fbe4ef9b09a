"""
CLI entry point.  Usage:

    python -m inflation_return_engine table
    python -m inflation_return_engine table --years 5 --real
    python -m inflation_return_engine table --rate pre_lp=12.5 --alloc pos=40
    python -m inflation_return_engine sweep
    python -m inflation_return_engine sensitivity --scenario 1
    python -m inflation_return_engine breakeven pre_cp ipca_cp --years 3
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

import pandas as pd

from . import config
from .risk import breakeven_inflation, inflation_sensitivity
from .scenarios import format_return_table, loss_mask
from .session import SimulationSession
from .utils import format_return

logger = logging.getLogger(__name__)


def _key_value(text: str) -> Tuple[str, str]:
    if "=" not in text:
        raise argparse.ArgumentTypeError(f"expected ID=VALUE, got {text!r}")
    key, value = text.split("=", 1)
    return key.strip(), value.strip()


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="inflation-returns",
        description="Nominal/real returns of a fixed-income portfolio across inflation scenarios.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--years",
        type=float,
        default=config.DEFAULT_HOLDING_PERIOD,
        help=f"Holding period in years (UI choices: {', '.join(map(str, config.HOLDING_PERIODS))}).",
    )
    common.add_argument(
        "--baseline-real-rate",
        type=float,
        default=config.DEFAULT_BASELINE_REAL_RATE,
        help="Real rate over inflation assumed for the floating-rate index (%%).",
    )
    common.add_argument("--real", action="store_true", help="Show real (inflation-deflated) returns.")
    common.add_argument("--rate", type=_key_value, action="append", default=[], metavar="ID=VALUE",
                        help="Override an asset's contracted rate.")
    common.add_argument("--inflation", type=_key_value, action="append", default=[], metavar="ID=VALUE",
                        help="Override a scenario's inflation.")
    common.add_argument("--alloc", type=_key_value, action="append", default=[], metavar="ID=WEIGHT",
                        help="Set an allocation weight (0-100).")

    sub = p.add_subparsers(dest="command")

    sub.add_parser("table", parents=[common], help="Asset x scenario return table.")
    sub.add_parser("sweep", parents=[common], help="Portfolio return per holding period and scenario.")

    sens = sub.add_parser("sensitivity", parents=[common], help="Return change per +1bp inflation.")
    sens.add_argument("--scenario", type=int, default=config.DEFAULT_SCENARIOS[0][0], help="Scenario id.")

    be = sub.add_parser("breakeven", parents=[common], help="Inflation at which two assets earn the same.")
    be.add_argument("asset_a")
    be.add_argument("asset_b")

    return p


def _session_from_args(args: argparse.Namespace) -> SimulationSession:
    session = SimulationSession()
    session.set_years(args.years)
    session.set_baseline_real_rate(args.baseline_real_rate)
    session.set_view_mode("real" if args.real else "nominal")

    for asset_id, value in args.rate:
        session.set_rate(asset_id, value)
    for scenario_id, value in args.inflation:
        session.set_inflation(int(scenario_id), value)
    for asset_id, value in args.alloc:
        session.set_allocation(asset_id, value)

    if session.total_allocation != 100:
        logger.warning("Allocation totals %d%%, returns are normalised by the actual total.", session.total_allocation)
    return session


def _mark_losses(table: pd.DataFrame) -> pd.DataFrame:
    cells = format_return_table(table)
    return cells.where(~loss_mask(table), cells + config.LOSS_MARKER)


def _print_table(session: SimulationSession) -> None:
    table = session.return_table()
    labels = {s.scenario_id: f"{s.label} ({s.inflation:g}%)" for s in session.scenarios}
    names = {a.asset_id: f"{a.name} ({a.rate_label()})" for a in session.assets}
    names[config.PORTFOLIO_ROW] = "Portfolio"

    shown = _mark_losses(table).rename(columns=labels, index=names)
    mode = session.params.view_mode.value
    print(f"{mode.capitalize()} returns over {session.params.years:g} year(s), "
          f"allocation total {session.total_allocation}%")
    print(shown.to_string())
    print(f"  {config.LOSS_MARKER} capital loss")
    print()
    for _, row in session.scenario_summary().iterrows():
        print(f"  {row['label']:<10} {row['advisory']}")


def _print_sweep(session: SimulationSession) -> None:
    grid = session.holding_period_grid()
    pivot = grid.pivot(index="years", columns="scenario_id", values="portfolio_return")
    pivot = pivot[[s.scenario_id for s in session.scenarios]]
    print(_mark_losses(pivot).rename(columns={s.scenario_id: s.label for s in session.scenarios}).to_string())


def _print_sensitivity(session: SimulationSession, scenario_id: int) -> None:
    scenario = {s.scenario_id: s for s in session.scenarios}[scenario_id]
    params = session.params
    sens = inflation_sensitivity(session.assets, scenario.inflation, params.years, params.baseline_real_rate)
    sens["inflation_dv01_bp"] = sens["inflation_dv01"] * 10000.0
    with pd.option_context("display.float_format", "{:.6f}".format):
        print(f"Scenario {scenario.label} ({scenario.inflation:g}%), {params.years:g} year(s)")
        print(sens.to_string(index=False))


def _print_breakeven(session: SimulationSession, asset_a: str, asset_b: str) -> int:
    assets = {a.asset_id: a for a in session.assets}
    params = session.params
    a, b = assets[asset_a], assets[asset_b]
    try:
        be = breakeven_inflation(a, b, params.years, params.baseline_real_rate)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1
    print(f"Break-even inflation {asset_a} vs {asset_b} over {params.years:g} year(s): "
          f"{format_return(be / 100.0, 4)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        session = _session_from_args(args)
        if args.command == "table":
            _print_table(session)
        elif args.command == "sweep":
            _print_sweep(session)
        elif args.command == "sensitivity":
            _print_sensitivity(session, args.scenario)
        elif args.command == "breakeven":
            return _print_breakeven(session, args.asset_a, args.asset_b)
    except KeyError as e:
        print(f"Unknown id: {e.args[0]}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2
    return 0
