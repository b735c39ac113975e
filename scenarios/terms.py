"""
Scenario terms: one lookup table instead of repeated per-scenario branching.

Each scenario fixes a down-payment fraction and (for buying) the annual
mortgage rate used when the input record does not supply its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from core.errors import InvalidInput
from core.schema import InputData


class Scenario(Enum):
    RENT = "rent"
    BUY5 = "buy5"
    BUY20 = "buy20"

    @property
    def terms(self) -> "ScenarioTerms":
        return SCENARIO_TERMS[self]

    @property
    def is_buy(self) -> bool:
        return self.terms.mortgage_rate is not None


@dataclass(frozen=True)
class ScenarioTerms:
    down_payment_fraction: float
    mortgage_rate: Optional[float]  # annual; None means no mortgage
    label: str
    description: str  # completes "You will have more money if you ..."


SCENARIO_TERMS: Dict[Scenario, ScenarioTerms] = {
    Scenario.RENT: ScenarioTerms(
        down_payment_fraction=0.0,
        mortgage_rate=None,
        label="Rent",
        description="rent",
    ),
    Scenario.BUY5: ScenarioTerms(
        down_payment_fraction=0.05,
        mortgage_rate=0.03,
        label="Buy (5% down)",
        description="buy a house with 5% down payment",
    ),
    Scenario.BUY20: ScenarioTerms(
        down_payment_fraction=0.20,
        mortgage_rate=0.025,
        label="Buy (20% down)",
        description="buy a house with 20% down payment",
    ),
}


def down_payment(input_data: InputData, scenario: Scenario) -> float:
    return input_data.expected_house_cost * scenario.terms.down_payment_fraction


def mortgage_rate(input_data: InputData, scenario: Scenario) -> float:
    """Annual mortgage rate for a buy scenario; the input's own rate wins when given."""
    if not scenario.is_buy:
        raise InvalidInput(f"{scenario.name} has no mortgage.")
    if input_data.home_interest_rate is not None:
        return float(input_data.home_interest_rate)
    return float(scenario.terms.mortgage_rate)
