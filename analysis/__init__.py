"""
Analysis: sensitivity sweeps and break-even search on top of the engine.
"""

from .sensitivity import final_net_worths, find_breakeven, sweep

__all__ = [
    "final_net_worths",
    "find_breakeven",
    "sweep",
]
