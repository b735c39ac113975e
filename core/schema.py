"""
Record types shared by the engine and the comparator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

# Monetary fields of InputData that must be non-negative finite reals.
MONETARY_FIELDS: Tuple[str, ...] = (
    "starting_cash",
    "monthly_income",
    "current_rent",
    "expected_house_cost",
)

# Column order of a projection table (one row per YearSnapshot).
SNAPSHOT_COLUMNS: Tuple[str, ...] = (
    "year",
    "cash_balance",
    "house_value",
    "housing_cost",
    "annual_housing_spend",
    "monthly_income",
    "annual_net_investment",
    "net_worth",
)


@dataclass(frozen=True)
class InputData:
    """
    Household inputs for one projection run.

    home_interest_rate overrides the scenario's fixed mortgage rate (annual, decimal).
    monthly_taxes_and_fees is a flat monthly amount added on top of the mortgage payment.
    """

    starting_cash: float
    monthly_income: float
    current_rent: float
    expected_house_cost: float
    years: int
    home_interest_rate: Optional[float] = None
    monthly_taxes_and_fees: float = 0.0


@dataclass(frozen=True)
class YearSnapshot:
    """State at the start of one simulated year. housing_cost is monthly."""

    year: int
    cash_balance: float
    house_value: float
    housing_cost: float
    annual_housing_spend: float
    monthly_income: float
    annual_net_investment: float
    net_worth: float
