"""
Projection engine — single-trajectory simulation + Monte Carlo runner.
"""

from .cancellation import CancellationToken
from .runner import run_profile, run_simulations
from .trajectory import advance_month, simulate_one_run

__all__ = [
    "CancellationToken",
    "run_profile",
    "run_simulations",
    "advance_month",
    "simulate_one_run",
]
