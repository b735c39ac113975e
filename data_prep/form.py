"""
Form payload coercion.

The presentation layer collects raw field values (numbers or numeric strings,
camelCase names). FormPayload turns one submission into a validated InputData,
so every form event produces a fresh immutable record for the engine.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.config import DEFAULT_YEARS
from core.errors import InvalidInput
from core.schema import InputData

from .validators import require_valid_input

DEFAULT_FORM_VALUES: Dict[str, Any] = {
    "startingCash": 138_000,
    "monthlyIncome": 4_000,
    "currentRent": 2_000,
    "expectedHouseCost": 700_000,
    "years": DEFAULT_YEARS,
}


class FormPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    starting_cash: float = Field(..., alias="startingCash")
    monthly_income: float = Field(..., alias="monthlyIncome")
    current_rent: float = Field(..., alias="currentRent")
    expected_house_cost: float = Field(..., alias="expectedHouseCost")
    years: int = Field(..., alias="years")
    home_interest_rate: Optional[float] = Field(None, alias="homeInterestRate")
    monthly_taxes_and_fees: float = Field(0.0, alias="monthlyTaxesAndFees")

    def to_input(self) -> InputData:
        """Build the engine record; raises InvalidInput on constraint violations."""
        record = InputData(
            starting_cash=self.starting_cash,
            monthly_income=self.monthly_income,
            current_rent=self.current_rent,
            expected_house_cost=self.expected_house_cost,
            years=self.years,
            home_interest_rate=self.home_interest_rate,
            monthly_taxes_and_fees=self.monthly_taxes_and_fees,
        )
        return require_valid_input(record)


def input_from_form(values: Optional[Mapping[str, Any]] = None) -> InputData:
    """
    Coerce a raw form submission into InputData.
    Missing fields fall back to DEFAULT_FORM_VALUES.
    """
    aliases = {name: info.alias for name, info in FormPayload.model_fields.items()}
    merged: Dict[str, Any] = dict(DEFAULT_FORM_VALUES)
    for key, value in (values or {}).items():
        merged[aliases.get(key, key)] = value
    try:
        payload = FormPayload.model_validate(merged)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        ]
        raise InvalidInput(f"Invalid form values: {errors}", errors=errors) from exc
    return payload.to_input()
