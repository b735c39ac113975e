"""
Summary comparator: final net worth per scenario and the best-option ranking.

Answers the question the calculator is built for:
  "Which option leaves me with the most money at the horizon, and by how much?"

Final net worth = last snapshot cash + house value appreciated over the full
horizon (0 when renting). Every scenario matching the maximum is a tied winner.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from core.config import ProjectionConfig
from core.errors import InvalidInput
from core.schema import InputData, YearSnapshot
from core.utils import format_currency
from engine.cashflow import projected_house_value
from scenarios import Scenario

logger = logging.getLogger(__name__)

STATEMENT_PAIRS: Tuple[Tuple[Scenario, Scenario], ...] = (
    (Scenario.RENT, Scenario.BUY5),
    (Scenario.RENT, Scenario.BUY20),
    (Scenario.BUY5, Scenario.BUY20),
)


@dataclass(frozen=True)
class SummaryRow:
    scenario: Scenario
    final_cash: float
    home_value: float
    net_worth: float
    difference: float  # best net worth minus this one; 0 for every tied winner
    is_best: bool


@dataclass(frozen=True)
class ComparisonSummary:
    """Structured comparison output, one row per scenario in input order."""
    rows: Tuple[SummaryRow, ...]

    @property
    def best(self) -> Tuple[Scenario, ...]:
        return tuple(r.scenario for r in self.rows if r.is_best)

    @property
    def best_net_worth(self) -> float:
        return max(r.net_worth for r in self.rows)

    def row(self, scenario: Scenario) -> SummaryRow:
        for r in self.rows:
            if r.scenario is scenario:
                return r
        raise KeyError(scenario)

    def statements(self) -> List[str]:
        """Pairwise sentences for every pair of compared scenarios."""
        present = {r.scenario for r in self.rows}
        return [compare_pair(self, a, b) for a, b in STATEMENT_PAIRS if a in present and b in present]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        return pd.DataFrame([
            {
                "Scenario": r.scenario.terms.label,
                "Final Cash": format_currency(r.final_cash),
                "Home Value": format_currency(r.home_value),
                "Net Worth": format_currency(r.net_worth),
                "Difference": format_currency(r.difference),
                "Best": "yes" if r.is_best else "",
            }
            for r in self.rows
        ])


def summarize(
    projections: Mapping[Scenario, Sequence[YearSnapshot]],
    input_data: InputData,
    config: Optional[ProjectionConfig] = None,
    *,
    scenarios: Optional[Iterable[Scenario]] = None,
) -> ComparisonSummary:
    """
    Compare scenario projections at the horizon.

    Parameters
    ----------
    projections : Mapping[Scenario, Sequence[YearSnapshot]]
        Output of engine.project() per scenario (e.g. engine.project_all()).
    input_data : InputData
        The inputs shared by all projections.
    scenarios : iterable of Scenario, optional
        Scenarios to compare; defaults to all three.
    """
    cfg = config or ProjectionConfig()
    wanted = tuple(dict.fromkeys(scenarios)) if scenarios is not None else tuple(Scenario)

    missing = [s.name for s in wanted if s not in projections]
    if missing:
        raise InvalidInput(f"Missing projections for: {missing}")

    finals = []
    for scenario in wanted:
        snapshots = projections[scenario]
        if len(snapshots) == 0:
            raise InvalidInput(f"Projection for {scenario.name} is empty.")
        final_cash = snapshots[-1].cash_balance
        try:
            home_value = projected_house_value(input_data, scenario, input_data.years, cfg)
        except OverflowError as exc:
            raise InvalidInput(f"House value of {scenario.name} overflows: {exc}") from exc
        finals.append((scenario, final_cash, home_value, final_cash + home_value))

    net_worths = np.array([f[3] for f in finals], dtype=float)
    best = float(net_worths.max())

    rows = tuple(
        SummaryRow(
            scenario=scenario,
            final_cash=final_cash,
            home_value=home_value,
            net_worth=net_worth,
            difference=best - net_worth,
            is_best=net_worth == best,
        )
        for scenario, final_cash, home_value, net_worth in finals
    )
    summary = ComparisonSummary(rows=rows)
    logger.info(
        "Best option(s): %s at %s",
        ", ".join(s.name for s in summary.best), format_currency(best),
    )
    return summary


def compare_pair(summary: ComparisonSummary, first: Scenario, second: Scenario) -> str:
    """One-sentence comparison of two scenarios' final net worth."""
    a = summary.row(first)
    b = summary.row(second)
    a_text = first.terms.description
    b_text = second.terms.description

    if a.net_worth > b.net_worth:
        return (
            f"You will have more money if you {a_text} than if you {b_text}. "
            f"The difference is {format_currency(a.net_worth - b.net_worth)}."
        )
    if a.net_worth < b.net_worth:
        return (
            f"You will have more money if you {b_text} than if you {a_text}. "
            f"The difference is {format_currency(b.net_worth - a.net_worth)}."
        )
    return (
        f"You will have the same amount of money if you {a_text} or if you {b_text}. "
        f"The amount is {format_currency(a.net_worth)}."
    )
