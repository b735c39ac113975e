"""
Scenarios: rent, buy with 5% down, buy with 20% down.
"""

from .terms import (
    SCENARIO_TERMS,
    Scenario,
    ScenarioTerms,
    down_payment,
    mortgage_rate,
)

__all__ = [
    "SCENARIO_TERMS",
    "Scenario",
    "ScenarioTerms",
    "down_payment",
    "mortgage_rate",
]
