from __future__ import annotations

from typing import Iterable, Mapping

from .errors import InvalidInput


def require_fields(record: Mapping, fields: Iterable[str]) -> None:
    missing = [f for f in fields if f not in record]
    if missing:
        raise InvalidInput(f"Missing required fields: {missing}")


def growth_factor(rate: float, periods: int) -> float:
    """Annual compounding factor (1 + rate)^periods."""
    return (1.0 + rate) ** periods


def equity_fraction(year: int, reference_years: int) -> float:
    """Straight-line share of the house counted as owned after `year` years, capped at 1."""
    return min(1.0, year / reference_years)


def format_currency(amount: float) -> str:
    """Two decimals with thousands separators, e.g. 1234.5 -> '$1,234.50'."""
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"
