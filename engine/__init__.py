"""
Projection engine: deterministic yearly rent/buy simulation.
"""

from .cashflow import (
    house_value_at,
    level_payment,
    monthly_housing_cost,
    mortgage_principal,
    projected_house_value,
)
from .runner import Projection, project, project_all, projection_frame

__all__ = [
    "house_value_at",
    "level_payment",
    "monthly_housing_cost",
    "mortgage_principal",
    "projected_house_value",
    "Projection",
    "project",
    "project_all",
    "projection_frame",
]
