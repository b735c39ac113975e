"""
Sensitivity analysis: how the ranking moves when one input changes.

sweep():          re-run all scenarios for each value of one InputData field
find_breakeven(): the value of one field at which two scenarios end level
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Iterable, Optional

import pandas as pd
from scipy.optimize import brentq

from core.config import ProjectionConfig
from core.errors import InvalidInput
from core.schema import InputData
from core.utils import require_fields
from engine.runner import project_all
from scenarios import Scenario
from summary.comparator import summarize

logger = logging.getLogger(__name__)


def _with_field(input_data: InputData, field: str, value) -> InputData:
    return dataclasses.replace(input_data, **{field: value})


def final_net_worths(
    input_data: InputData,
    config: Optional[ProjectionConfig] = None,
) -> Dict[Scenario, float]:
    summary = summarize(project_all(input_data, config), input_data, config)
    return {r.scenario: r.net_worth for r in summary.rows}


def sweep(
    input_data: InputData,
    field: str,
    values: Iterable,
    config: Optional[ProjectionConfig] = None,
) -> pd.DataFrame:
    """
    Final net worth of every scenario for each value of `field`.

    Returns
    -------
    DataFrame with one row per accepted value:
        <field>, net_worth_rent, net_worth_buy5, net_worth_buy20, best
    Values that make the input invalid are skipped.
    """
    require_fields(dataclasses.asdict(input_data), [field])

    rows = []
    for value in values:
        try:
            candidate = _with_field(input_data, field, value)
            summary = summarize(project_all(candidate, config), candidate, config)
        except InvalidInput as exc:
            logger.warning("Skipping %s=%r: %s", field, value, exc.errors)
            continue

        row = {field: value}
        for r in summary.rows:
            row[f"net_worth_{r.scenario.value}"] = r.net_worth
        row["best"] = ", ".join(s.name for s in summary.best)
        rows.append(row)

    columns = [field] + [f"net_worth_{s.value}" for s in Scenario] + ["best"]
    return pd.DataFrame(rows, columns=columns)


def find_breakeven(
    input_data: InputData,
    field: str,
    first: Scenario,
    second: Scenario,
    low: float,
    high: float,
    config: Optional[ProjectionConfig] = None,
    *,
    xtol: float = 1e-6,
) -> Optional[float]:
    """
    Value of `field` in [low, high] where `first` and `second` end with equal net worth.

    Returns None when the net worth gap has the same sign at both ends of the bracket.
    """
    if field == "years":
        raise InvalidInput("Break-even search needs a continuous field; years is an integer.")
    if low > high:
        raise InvalidInput(f"Empty bracket: low={low} > high={high}")
    require_fields(dataclasses.asdict(input_data), [field])

    def gap(value: float) -> float:
        worths = final_net_worths(_with_field(input_data, field, value), config)
        return worths[first] - worths[second]

    gap_low = gap(low)
    gap_high = gap(high)
    if gap_low == 0.0:
        return float(low)
    if gap_high == 0.0:
        return float(high)
    if (gap_low > 0) == (gap_high > 0):
        logger.info(
            "No break-even between %s and %s on %s in [%s, %s]",
            first.name, second.name, field, low, high,
        )
        return None

    return float(brentq(gap, low, high, xtol=xtol))
