from dataclasses import replace

import pytest

from core import InvalidInput, ProjectionConfig, SNAPSHOT_COLUMNS
from data_prep import validate_input
from engine import (
    house_value_at,
    level_payment,
    monthly_housing_cost,
    project,
    project_all,
    projection_frame,
)
from scenarios import Scenario


def manual_payment(principal, annual_rate, years):
    r = annual_rate / 12
    n = years * 12
    return principal * (r * (1 + r) ** n) / ((1 + r) ** n - 1)


# --- cashflow helpers ---

def test_level_payment_matches_closed_form():
    assert level_payment(560_000, 0.025 / 12, 360) == pytest.approx(manual_payment(560_000, 0.025, 30))
    assert level_payment(560_000, 0.025 / 12, 360) == pytest.approx(2212.7, abs=2.0)


def test_level_payment_zero_rate_is_linear():
    assert level_payment(360_000, 0.0, 360) == pytest.approx(1_000.0)


def test_level_payment_zero_principal():
    assert level_payment(0.0, 0.03 / 12, 360) == 0.0


def test_housing_cost_per_scenario(example_input):
    assert monthly_housing_cost(example_input, Scenario.RENT) == 2_000
    assert monthly_housing_cost(example_input, Scenario.BUY5) == pytest.approx(
        manual_payment(665_000, 0.03, 30)
    )
    assert monthly_housing_cost(example_input, Scenario.BUY20) == pytest.approx(
        manual_payment(560_000, 0.025, 30)
    )


def test_taxes_and_fees_added_after_amortization(example_input):
    custom = replace(example_input, home_interest_rate=0.05, monthly_taxes_and_fees=300)
    assert monthly_housing_cost(custom, Scenario.BUY20) == pytest.approx(
        manual_payment(560_000, 0.05, 30) + 300
    )
    # fees never apply to renting
    assert monthly_housing_cost(custom, Scenario.RENT) == 2_000


def test_zero_rate_override(example_input):
    custom = replace(example_input, home_interest_rate=0.0)
    assert monthly_housing_cost(custom, Scenario.BUY20) == pytest.approx(560_000 / 360)


def test_house_value_policies(example_input, basic_config, extended_config):
    assert house_value_at(example_input, Scenario.BUY5, 0, basic_config) == 0.0
    assert house_value_at(example_input, Scenario.BUY5, 1, basic_config) == pytest.approx(700_000)
    assert house_value_at(example_input, Scenario.BUY5, 2, basic_config) == pytest.approx(721_000)
    assert house_value_at(example_input, Scenario.BUY5, 0, extended_config) == pytest.approx(700_000)
    assert house_value_at(example_input, Scenario.BUY5, 1, extended_config) == pytest.approx(721_000)
    assert house_value_at(example_input, Scenario.RENT, 5, extended_config) == 0.0


# --- runner ---

@pytest.mark.parametrize("scenario", list(Scenario))
def test_length_and_year_index(example_input, scenario):
    snapshots = project(example_input, scenario)
    assert len(snapshots) == 30
    assert [s.year for s in snapshots] == list(range(30))


@pytest.mark.parametrize("scenario", list(Scenario))
def test_inclusive_bounds_add_one_snapshot(example_input, extended_config, scenario):
    snapshots = project(example_input, scenario, extended_config)
    assert len(snapshots) == 31
    assert snapshots[-1].year == 30


def test_example_rent_year_zero(example_input):
    first = project(example_input, Scenario.RENT)[0]
    assert first.housing_cost == 2_000
    assert first.house_value == 0
    assert first.cash_balance == 138_000
    assert first.annual_housing_spend == 24_000
    assert first.monthly_income == 4_000
    assert first.annual_net_investment == 24_000
    assert first.net_worth == 138_000


def test_rent_cash_growth(example_input):
    snapshots = project(example_input, Scenario.RENT)
    assert snapshots[1].cash_balance == pytest.approx(138_000 * 1.07 + 24_000)
    assert snapshots[1].housing_cost == pytest.approx(2_060)


def test_rent_never_owns_a_house(example_input, extended_config):
    for cfg in (None, extended_config):
        assert all(s.house_value == 0 for s in project(example_input, Scenario.RENT, cfg))


def test_rent_cost_compounds_with_inflation(example_input):
    snapshots = project(example_input, Scenario.RENT)
    for s in snapshots:
        assert s.housing_cost == pytest.approx(2_000 * 1.03 ** s.year)
    costs = [s.housing_cost for s in snapshots]
    assert all(b > a for a, b in zip(costs, costs[1:]))


def test_example_buy20_year_zero(example_input):
    first = project(example_input, Scenario.BUY20)[0]
    assert first.cash_balance == 138_000
    assert first.housing_cost == pytest.approx(manual_payment(560_000, 0.025, 30))


@pytest.mark.parametrize("scenario", [Scenario.BUY5, Scenario.BUY20])
def test_mortgage_payment_is_flat(example_input, scenario):
    costs = {s.housing_cost for s in project(example_input, scenario)}
    assert len(costs) == 1


@pytest.mark.parametrize("scenario, upfront", [(Scenario.BUY5, 35_000), (Scenario.BUY20, 140_000)])
def test_down_payment_deducted_once_after_year_zero(example_input, scenario, upfront):
    s = project(example_input, scenario)
    assert s[0].cash_balance == 138_000
    assert s[1].cash_balance == pytest.approx((138_000 - upfront) * 1.07 + s[0].annual_net_investment)
    for prev, cur in zip(s[1:], s[2:]):
        assert cur.cash_balance == pytest.approx(prev.cash_balance * 1.07 + prev.annual_net_investment)


def test_buy_house_value_deferred(example_input):
    s = project(example_input, Scenario.BUY20)
    assert s[0].house_value == 0
    assert s[1].house_value == pytest.approx(700_000)
    assert s[29].house_value == pytest.approx(700_000 * 1.03 ** 28)


def test_buy_house_value_full_cost(example_input, extended_config):
    s = project(example_input, Scenario.BUY20, extended_config)
    assert s[0].house_value == pytest.approx(700_000)
    assert s[30].house_value == pytest.approx(700_000 * 1.03 ** 30)


def test_net_worth_uses_straight_line_equity_proxy(example_input, extended_config):
    s = project(example_input, Scenario.BUY5, extended_config)
    assert s[0].net_worth == pytest.approx(s[0].cash_balance)
    assert s[15].net_worth == pytest.approx(s[15].cash_balance + s[15].house_value * 0.5)
    assert s[30].net_worth == pytest.approx(s[30].cash_balance + s[30].house_value)


def test_projection_is_deterministic(example_input):
    assert project(example_input, Scenario.BUY5) == project(example_input, Scenario.BUY5)


def test_single_year_horizon(example_input):
    one_year = replace(example_input, years=1)
    for scenario, snapshots in project_all(one_year).items():
        assert len(snapshots) == 1
        assert snapshots[0].cash_balance == 138_000


@pytest.mark.parametrize(
    "changes", [{"years": 0}, {"years": -1}, {"starting_cash": -1}, {"expected_house_cost": -700_000}]
)
def test_invalid_input_raises(example_input, changes):
    with pytest.raises(InvalidInput):
        project(replace(example_input, **changes), Scenario.RENT)


def test_project_all_runs_every_scenario(example_input):
    projections = project_all(example_input)
    assert list(projections) == [Scenario.RENT, Scenario.BUY5, Scenario.BUY20]


def test_projection_frame(example_input):
    snapshots = project(example_input, Scenario.BUY5)
    frame = projection_frame(snapshots)
    assert list(frame.columns) == list(SNAPSHOT_COLUMNS)
    assert len(frame) == 30
    assert frame["year"].tolist() == list(range(30))
    assert frame.loc[0, "cash_balance"] == 138_000


def test_projection_frame_empty():
    frame = projection_frame([])
    assert frame.empty
    assert list(frame.columns) == list(SNAPSHOT_COLUMNS)


def test_full_cost_with_exclusive_bounds(example_input):
    cfg = ProjectionConfig(house_value_policy="full_cost")
    s = project(example_input, Scenario.BUY20, cfg)
    assert len(s) == 30
    assert s[0].house_value == pytest.approx(700_000)
    assert s[29].house_value == pytest.approx(700_000 * 1.03 ** 29)


def test_deferred_with_inclusive_bounds(example_input):
    cfg = ProjectionConfig(year_bounds="inclusive")
    s = project(example_input, Scenario.BUY20, cfg)
    assert len(s) == 31
    assert s[0].house_value == 0
    assert s[30].house_value == pytest.approx(700_000 * 1.03 ** 29)


def test_huge_rate_overflow_raises_invalid_input(example_input):
    steep = replace(example_input, home_interest_rate=100.0)
    # only a warning at validation time; the payment itself overflows
    assert validate_input(steep).is_valid
    with pytest.raises(InvalidInput):
        project(steep, Scenario.BUY5)


def test_overlong_horizon_raises_invalid_input(example_input):
    with pytest.raises(InvalidInput):
        project(replace(example_input, years=30_000), Scenario.BUY20)
