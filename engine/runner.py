"""
Projection runner: walks one scenario year by year.

Each iteration emits the state at the start of the year, then advances it:
  1. Down payment leaves cash once, after the year-0 snapshot
  2. House value moves to next year's appreciated value (buy scenarios only)
  3. Cash grows at the investment rate, then the year's net investment is added
  4. Rent grows with inflation; the mortgage payment stays flat

The result is an immutable tuple of YearSnapshot in chronological order.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Tuple

import pandas as pd

from core.config import ProjectionConfig
from core.errors import InvalidInput
from core.schema import SNAPSHOT_COLUMNS, InputData, YearSnapshot
from core.utils import equity_fraction
from data_prep.validators import require_valid_input
from scenarios import Scenario, down_payment

from .cashflow import house_value_at, monthly_housing_cost

logger = logging.getLogger(__name__)

Projection = Tuple[YearSnapshot, ...]


def project(
    input_data: InputData,
    scenario: Scenario,
    config: Optional[ProjectionConfig] = None,
) -> Projection:
    """
    Project one scenario over the input horizon.

    Parameters
    ----------
    input_data : InputData
        Household inputs; validated here, InvalidInput on violation
    scenario : Scenario
        Rent, buy with 5% down or buy with 20% down
    config : ProjectionConfig, optional
        Rates and variant flags; defaults to ProjectionConfig()

    Returns
    -------
    Tuple of YearSnapshot, length input.years (exclusive bounds)
    or input.years + 1 (inclusive bounds), year fields 0, 1, 2, ...
    """
    cfg = config or ProjectionConfig()
    require_valid_input(input_data)

    try:
        return _walk(input_data, scenario, cfg)
    except OverflowError as exc:
        raise InvalidInput(
            f"Projection of {scenario.name} overflows for these inputs: {exc}"
        ) from exc


def _walk(input_data: InputData, scenario: Scenario, cfg: ProjectionConfig) -> Projection:
    n_snapshots = cfg.snapshot_count(input_data.years)
    income = float(input_data.monthly_income)
    upfront = down_payment(input_data, scenario)
    growth_cash = 1.0 + cfg.investment_rate
    growth_rent = 1.0 + cfg.inflation_rate

    cash = float(input_data.starting_cash)
    house = house_value_at(input_data, scenario, 0, cfg)
    housing_cost = monthly_housing_cost(input_data, scenario)

    logger.debug(
        "Projecting %s over %d snapshots: down payment=%.2f, year-0 housing cost=%.2f",
        scenario.name, n_snapshots, upfront, housing_cost,
    )

    snapshots = []
    for year in range(n_snapshots):
        annual_spend = housing_cost * 12
        net_investment = income * 12 - annual_spend

        snapshots.append(
            YearSnapshot(
                year=year,
                cash_balance=cash,
                house_value=house,
                housing_cost=housing_cost,
                annual_housing_spend=annual_spend,
                monthly_income=income,
                annual_net_investment=net_investment,
                net_worth=cash + house * equity_fraction(year, cfg.equity_reference_years),
            )
        )

        # Deferred: the year-0 snapshot still shows pre-down-payment cash
        if year == 0:
            cash -= upfront

        house = house_value_at(input_data, scenario, year + 1, cfg)
        cash = cash * growth_cash + net_investment
        if not scenario.is_buy:
            housing_cost *= growth_rent

    return tuple(snapshots)


def project_all(
    input_data: InputData,
    config: Optional[ProjectionConfig] = None,
) -> Dict[Scenario, Projection]:
    """Run every scenario (in Scenario order) on the same inputs."""
    return {scenario: project(input_data, scenario, config) for scenario in Scenario}


def projection_frame(snapshots: Sequence[YearSnapshot]) -> pd.DataFrame:
    """One row per snapshot, columns in YearSnapshot field order, for tables and charts."""
    rows = [{col: getattr(s, col) for col in SNAPSHOT_COLUMNS} for s in snapshots]
    return pd.DataFrame(rows, columns=list(SNAPSHOT_COLUMNS))
