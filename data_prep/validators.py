"""
Input validation before records enter the engine.

Catches problems early:
- Non-positive or non-integer horizon
- Negative or non-finite monetary fields
- Mortgage rates outside plausible bounds
- Starting cash that cannot cover a down payment (warning only)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import List

from core.config import MAX_YEARS
from core.errors import InvalidInput
from core.schema import MONETARY_FIELDS, InputData
from scenarios import Scenario, down_payment

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for an input record."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_input(input_data: InputData) -> ValidationResult:
    """
    Run all validation checks on an input record.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    # --- Horizon ---
    years = input_data.years
    if not isinstance(years, Integral) or isinstance(years, bool):
        result.errors.append(f"years must be an integer, got {years!r}.")
    elif years <= 0:
        result.errors.append(f"years must be at least 1, got {years}.")
    elif years > MAX_YEARS:
        result.errors.append(f"years must be at most {MAX_YEARS}, got {years}.")

    # --- Monetary fields ---
    for name in MONETARY_FIELDS + ("monthly_taxes_and_fees",):
        value = getattr(input_data, name)
        if not _is_number(value) or not math.isfinite(value):
            result.errors.append(f"{name} must be a finite number, got {value!r}.")
        elif value < 0:
            result.errors.append(f"{name} must not be negative, got {value}.")

    # --- Interest rate ---
    rate = input_data.home_interest_rate
    if rate is not None:
        if not _is_number(rate) or not math.isfinite(rate):
            result.errors.append(f"home_interest_rate must be a finite number, got {rate!r}.")
        elif rate < 0:
            result.errors.append(f"home_interest_rate must not be negative, got {rate}.")
        elif rate > 1.0:
            # Rates should be in decimal form (e.g. 0.05 not 5.0)
            result.warnings.append(
                f"home_interest_rate {rate} > 1.0; check if the rate is in "
                f"percent vs decimal form."
            )

    if not result.is_valid:
        return result  # the affordability check needs clean numbers

    # --- Affordability ---
    largest = down_payment(input_data, Scenario.BUY20)
    if input_data.starting_cash < largest:
        result.warnings.append(
            f"starting_cash ({input_data.starting_cash:,.0f}) is below the 20% down payment "
            f"({largest:,.0f}); cash goes negative in that scenario."
        )

    return result


def require_valid_input(input_data: InputData) -> InputData:
    """Validate and return the record unchanged, or raise InvalidInput listing every error."""
    result = validate_input(input_data)
    for warning in result.warnings:
        logger.warning("Input warning: %s", warning)
    if not result.is_valid:
        raise InvalidInput(result.summary(), errors=result.errors)
    return input_data
