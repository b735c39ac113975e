"""
Projection configuration.
Fixed market rates plus the flags that pick between the two observed
behaviours of the calculator (house value start, loop bounds, equity proxy).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .errors import InvalidInput

INFLATION_RATE = 0.03   # home appreciation and rent growth
INVESTMENT_RATE = 0.07  # annual return on uninvested cash
DEFAULT_YEARS = 30
MAX_YEARS = 100  # longest horizon accepted by the input validator
EQUITY_REFERENCE_YEARS = 30

HouseValuePolicy = Literal["deferred", "full_cost"]
YearBounds = Literal["exclusive", "inclusive"]


@dataclass(frozen=True)
class ProjectionConfig:
    inflation_rate: float = INFLATION_RATE
    investment_rate: float = INVESTMENT_RATE

    # "deferred": house value is 0 in year 0 and appreciates from the following year
    # "full_cost": house value starts at the purchase price in year 0
    house_value_policy: HouseValuePolicy = "deferred"

    # "exclusive": years snapshots (0..years-1); "inclusive": years + 1 snapshots
    year_bounds: YearBounds = "exclusive"

    # straight-line "percent paid off" proxy, independent of the loan term
    equity_reference_years: int = EQUITY_REFERENCE_YEARS

    def __post_init__(self) -> None:
        if self.house_value_policy not in ("deferred", "full_cost"):
            raise InvalidInput(f"Unknown house_value_policy: {self.house_value_policy!r}")
        if self.year_bounds not in ("exclusive", "inclusive"):
            raise InvalidInput(f"Unknown year_bounds: {self.year_bounds!r}")
        if self.equity_reference_years <= 0:
            raise InvalidInput("equity_reference_years must be positive.")

    @classmethod
    def extended(cls) -> "ProjectionConfig":
        """Later variant: house value at full cost from year 0, inclusive year loop."""
        return cls(house_value_policy="full_cost", year_bounds="inclusive")

    def snapshot_count(self, years: int) -> int:
        return years + 1 if self.year_bounds == "inclusive" else years
