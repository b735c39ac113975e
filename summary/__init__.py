"""
Summary: final net worth comparison and best-option ranking across scenarios.
"""

from .comparator import (
    STATEMENT_PAIRS,
    ComparisonSummary,
    SummaryRow,
    compare_pair,
    summarize,
)

__all__ = [
    "STATEMENT_PAIRS",
    "ComparisonSummary",
    "SummaryRow",
    "compare_pair",
    "summarize",
]
