"""
Inflation Scenario Return Engine

Modules:
- assets: asset/scenario/parameter snapshots + default universe
- market: required real rate per inflation scenario (yield-curve proxy)
- returns: nominal return per asset class + exact Fisher deflation
- portfolio: allocation-weighted blending
- scenarios: asset x scenario tables, holding-period sweeps
- risk: inflation sensitivity + break-even inflation
- session: mutable session store producing immutable snapshots
- utils: input coercion + percentage formatting

Presentation layers should import from this package.
"""
