"""
Core package: record types, configuration, errors and shared helpers.
No business logic lives here.
"""

from .config import (
    DEFAULT_YEARS,
    INFLATION_RATE,
    INVESTMENT_RATE,
    MAX_YEARS,
    ProjectionConfig,
)
from .errors import InvalidInput
from .schema import InputData, YearSnapshot, MONETARY_FIELDS, SNAPSHOT_COLUMNS
from .utils import equity_fraction, format_currency, growth_factor, require_fields

__all__ = [
    "DEFAULT_YEARS",
    "INFLATION_RATE",
    "INVESTMENT_RATE",
    "MAX_YEARS",
    "ProjectionConfig",
    "InvalidInput",
    "InputData",
    "YearSnapshot",
    "MONETARY_FIELDS",
    "SNAPSHOT_COLUMNS",
    "equity_fraction",
    "format_currency",
    "growth_factor",
    "require_fields",
]
