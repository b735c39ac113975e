"""
Deterministic housing-cost helpers.

  1. Mortgage payment is a full-precision level payment (PMT), fixed for the loan life
  2. Flat monthly taxes/fees are added after amortization, never folded into the rate
  3. Rent is the input's current rent; the runner grows it yearly
  4. No rounding anywhere; formatting belongs to the caller
"""

from __future__ import annotations

from core.config import ProjectionConfig
from core.schema import InputData
from core.utils import growth_factor
from scenarios import Scenario, down_payment, mortgage_rate


def level_payment(balance: float, monthly_rate: float, n_months: int) -> float:
    """Standard fully-amortizing level payment (PMT) with near-zero rate guard."""
    if n_months <= 0:
        return float(balance)
    if abs(monthly_rate) < 1e-12:
        return float(balance) / n_months
    return float(balance) * (monthly_rate * (1 + monthly_rate) ** n_months) / (
        (1 + monthly_rate) ** n_months - 1
    )


def mortgage_principal(input_data: InputData, scenario: Scenario) -> float:
    return input_data.expected_house_cost - down_payment(input_data, scenario)


def monthly_housing_cost(input_data: InputData, scenario: Scenario) -> float:
    """
    Year-0 monthly housing cost.

    Rent: current rent. Buy: level payment on (cost - down payment) at the
    scenario's annual rate over the projection horizon, plus flat monthly fees.
    """
    if not scenario.is_buy:
        return float(input_data.current_rent)

    payment = level_payment(
        mortgage_principal(input_data, scenario),
        mortgage_rate(input_data, scenario) / 12.0,
        int(input_data.years) * 12,
    )
    return payment + float(input_data.monthly_taxes_and_fees)


def house_value_at(
    input_data: InputData,
    scenario: Scenario,
    year: int,
    config: ProjectionConfig,
) -> float:
    """
    House value shown in the snapshot for `year`.

    deferred:  0 in year 0, then cost * (1+inflation)^(year-1)
    full_cost: cost * (1+inflation)^year
    """
    if not scenario.is_buy:
        return 0.0
    cost = float(input_data.expected_house_cost)
    if config.house_value_policy == "full_cost":
        return cost * growth_factor(config.inflation_rate, year)
    if year == 0:
        return 0.0
    return cost * growth_factor(config.inflation_rate, year - 1)


def projected_house_value(
    input_data: InputData,
    scenario: Scenario,
    years: int,
    config: ProjectionConfig,
) -> float:
    """Appreciated house value after `years` years; 0 when renting."""
    if not scenario.is_buy:
        return 0.0
    return float(input_data.expected_house_cost) * growth_factor(config.inflation_rate, years)
