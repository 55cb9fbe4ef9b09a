import pytest

from inflation_return_engine.assets import Asset, AssetClass, default_assets
from inflation_return_engine.market import market_real_rate
from inflation_return_engine.returns import (
    accumulated_inflation,
    annual_rate,
    nominal_return,
    real_return,
)


BASELINE = 4.0


@pytest.fixture(scope="module")
def assets():
    return {a.asset_id: a for a in default_assets()}


@pytest.fixture(scope="module")
def ipca_2050():
    return Asset("ipca_2050", "IPCA+ 2050", "inflation_long", 6.2, 25)


@pytest.mark.parametrize("inflation", [0.0, 3.33, 6.87, 8.99, 15.0])
def test_zero_years_is_zero_return_for_every_class(assets, inflation):
    for asset in assets.values():
        assert nominal_return(asset, inflation, 0, BASELINE) == 0.0, asset.asset_id


def test_negative_years_treated_as_zero(assets):
    assert nominal_return(assets["pre_lp"], 6.0, -2, BASELINE) == 0.0


@pytest.mark.parametrize("inflation", [0.0, 3.33, 8.99, 25.0])
def test_fixed_short_ignores_inflation(inflation):
    asset = Asset("pre_cp", "Fixed Short", AssetClass.FIXED_SHORT, 10.5, 3)
    r = nominal_return(asset, inflation, 3, BASELINE)
    assert r == pytest.approx(1.105 ** 3 - 1.0, rel=1e-12)
    assert r == pytest.approx(0.34923, abs=1e-5)


def test_floating_tracks_index_times_percent():
    asset = Asset("pos", "Floating", "floating", 100.0, 2)
    assert nominal_return(asset, 0.0, 1, 4.0) == pytest.approx(0.04, rel=1e-12)

    half = asset.with_rate(50.0)
    index = 1.05 * 1.04 - 1.0
    assert nominal_return(half, 5.0, 2, 4.0) == pytest.approx((1.0 + index * 0.5) ** 2 - 1.0, rel=1e-12)


def test_inflation_short_fisher_compounding():
    asset = Asset("ipca_cp", "IPCA+ Short", "inflation_short", 5.8, 2)
    annual = 1.0687 * 1.058 - 1.0
    assert annual_rate(asset, 6.87, BASELINE) == pytest.approx(annual, rel=1e-12)
    assert nominal_return(asset, 6.87, 3, BASELINE) == pytest.approx((1.0 + annual) ** 3 - 1.0, rel=1e-12)


def test_annual_rate_none_for_long_classes(assets):
    assert annual_rate(assets["ipca_2050"], 5.0, BASELINE) is None
    assert annual_rate(assets["pre_lp"], 5.0, BASELINE) is None


@pytest.mark.parametrize("inflation", [3.33, 6.16, 8.99])
def test_inflation_long_to_maturity_is_pure_accrual(ipca_2050, inflation):
    r = nominal_return(ipca_2050, inflation, 25, BASELINE)
    expected = (1.0 + inflation / 100.0) ** 25 * 1.062 ** 25 - 1.0
    assert r == pytest.approx(expected, rel=1e-12)


def test_inflation_long_past_maturity_has_no_shock(ipca_2050):
    r = nominal_return(ipca_2050, 5.0, 30, BASELINE)
    assert r == pytest.approx(1.05 ** 30 * 1.062 ** 30 - 1.0, rel=1e-12)


def test_inflation_long_sold_early_marks_to_market(ipca_2050):
    high = nominal_return(ipca_2050, 8.99, 1, BASELINE)
    low = nominal_return(ipca_2050, 3.33, 1, BASELINE)
    accrual_high = 1.0899 * 1.062 - 1.0

    assert high < accrual_high, "Rising required yield should produce a capital loss"
    assert high < 0.0
    assert low > 1.0, "Falling required yield should produce a large capital gain on a 24y residual"
    assert high < low - 1.0


def test_inflation_long_formula(ipca_2050):
    inflation, years = 7.57, 3
    c = 0.062
    m = market_real_rate(inflation) / 100.0
    expected = (1.0757 ** years) * (1.0 + c) ** years * ((1.0 + c) / (1.0 + m)) ** (25 - years) - 1.0
    assert nominal_return(ipca_2050, inflation, years, BASELINE) == pytest.approx(expected, rel=1e-12)


def test_fixed_long_formula(assets):
    pre_lp = assets["pre_lp"]
    inflation, years = 6.87, 3
    c = 0.118
    p = 1.0687 * (1.0 + market_real_rate(inflation) / 100.0) - 1.0
    expected = (1.0 + c) ** years * ((1.0 + c) / (1.0 + p)) ** (10 - years) - 1.0
    assert nominal_return(pre_lp, inflation, years, BASELINE) == pytest.approx(expected, rel=1e-12)


def test_fixed_long_gains_when_market_rate_below_contract(assets):
    pre_lp = assets["pre_lp"]
    # market fixed rate at 3.33% inflation ~ 6.43% < 11.8% contracted
    r = nominal_return(pre_lp, 3.33, 1, BASELINE)
    assert r > 0.118


def test_baseline_rate_only_moves_floating(assets):
    for asset in assets.values():
        a = nominal_return(asset, 6.0, 3, 2.0)
        b = nominal_return(asset, 6.0, 3, 6.0)
        if asset.asset_class is AssetClass.FLOATING:
            assert b > a
        else:
            assert a == b, asset.asset_id


def test_unknown_asset_class_rejected():
    with pytest.raises(ValueError):
        Asset("x", "Mystery", "perpetual", 5.0, 10)


def test_non_positive_maturity_rejected():
    with pytest.raises(ValueError):
        Asset("x", "Bad", "fixed_short", 5.0, 0)


def test_real_return_zero_inflation_is_nominal():
    assert real_return(0.10, 0.0, 1) == pytest.approx(0.10, rel=1e-12)


def test_real_return_exact_fisher_not_linear():
    nominal = 1.10 ** 3 - 1.0
    r = real_return(nominal, 5.0, 3)
    assert r == pytest.approx((1.10 / 1.05) ** 3 - 1.0, rel=1e-12)
    assert r != pytest.approx(nominal - accumulated_inflation(5.0, 3))


def test_inflation_short_real_return_is_contracted_spread():
    asset = Asset("ipca_cp", "IPCA+ Short", "inflation_short", 5.8, 2)
    nominal = nominal_return(asset, 8.0, 5, BASELINE)
    assert real_return(nominal, 8.0, 5) == pytest.approx(1.058 ** 5 - 1.0, rel=1e-12)


def test_nominal_return_is_deterministic(assets):
    a = assets["renda_2065"]
    assert nominal_return(a, 7.0, 5, BASELINE) == nominal_return(a, 7.0, 5, BASELINE)


def test_floating_below_total_loss_is_floored():
    # 300% of an index below -100% p.a. has no real-valued compounding
    asset = Asset("pos", "Floating", "floating", 300.0, 2)
    assert annual_rate(asset, -99.99, BASELINE) < -1.0
    assert nominal_return(asset, -99.99, 2.5, BASELINE) == -1.0
    assert nominal_return(asset, -99.99, 0, BASELINE) == 0.0
