"""
Configuration constants for the inflation return engine.

Single source of truth for the market band, simulation defaults,
the default asset/scenario universe and CLI formatting.
"""

# ---------------------------------------------------------------------------
# Market model band (inflation % -> required real rate %)
# ---------------------------------------------------------------------------
MARKET_MIN_INFLATION = 3.33
MARKET_MAX_INFLATION = 8.99
MARKET_MIN_REAL_RATE = 3.0
MARKET_MAX_REAL_RATE = 9.0

SCENARIO_YIELD_TEMPLATE = "Market requires reference-index + {rate:.2f}%"

# ---------------------------------------------------------------------------
# Simulation defaults
# ---------------------------------------------------------------------------
DEFAULT_BASELINE_REAL_RATE = 4.0  # % over inflation, floating-rate index only
HOLDING_PERIODS = (1, 3, 5, 10)
DEFAULT_HOLDING_PERIOD = 1

MIN_WEIGHT = 0
MAX_WEIGHT = 100

# floor for rate, inflation and baseline real rate edits (> -100%)
MIN_PERCENT = -99.99

# ---------------------------------------------------------------------------
# Default universe
# ---------------------------------------------------------------------------
# (asset_id, name, asset_class, rate %, maturity years)
DEFAULT_ASSETS = [
    ("pos", "Floating (CDI)", "floating", 100.0, 2.0),
    ("ipca_2050", "IPCA+ 2050", "inflation_long", 6.2, 25.0),
    ("renda_2065", "Renda+ 2065", "inflation_long", 6.4, 40.0),
    ("ipca_cp", "IPCA+ Short", "inflation_short", 5.8, 2.0),
    ("pre_cp", "Fixed Short", "fixed_short", 10.5, 3.0),
    ("pre_lp", "Fixed Long", "fixed_long", 11.8, 10.0),
]

# (scenario_id, label, inflation %)
DEFAULT_SCENARIOS = [
    (1, "Worst", 8.99),
    (2, "Very bad", 8.28),
    (3, "Bad", 7.57),
    (4, "Unchanged", 6.87),
    (5, "Ok", 6.16),
    (6, "Good", 5.45),
    (7, "Very good", 4.74),
    (8, "Excellent", 4.03),
    (9, "Beach", 3.33),
]

DEFAULT_ALLOCATION = {
    "pos": 20,
    "ipca_2050": 10,
    "renda_2065": 10,
    "ipca_cp": 20,
    "pre_cp": 20,
    "pre_lp": 20,
}

# ---------------------------------------------------------------------------
# Sensitivities / root solve
# ---------------------------------------------------------------------------
INFLATION_BUMP_BP = 1.0
BREAKEVEN_LOWER = -50.0  # inflation % search bracket
BREAKEVEN_UPPER = 100.0
BREAKEVEN_XTOL = 1e-12

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------
PORTFOLIO_ROW = "PORTFOLIO"
PCT_DECIMALS = 2
LOSS_MARKER = "*"
