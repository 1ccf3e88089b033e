"""
Single-trajectory simulation — one possible future for the pot.

Each simulated month:
  1. years_to_retirement = (months - m) / 12
  2. target allocation at that horizon (glidepath)
  3. correlated monthly returns for every asset
  4. portfolio return = sum(weight * asset return)
  5. contribution = salary * contribution_rate / 12
  6. pot = (pot + contribution) * (1 + portfolio return)
  7. salary grows by (1 + salary_inflation)^(1/12)

The trajectory records the starting pot first, then the pot after every
month, so its length is months + 1.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from core.schema import AssetCatalog, Glidepath, UserInputs
from core.utils import annual_to_monthly_growth
from glidepath.resolver import allocation_schedule
from market.generator import CorrelatedReturnGenerator


def advance_month(
    pot: float,
    salary: float,
    *,
    contribution_rate: float,
    portfolio_return: float,
    salary_growth: float,
) -> Tuple[float, float]:
    """
    Apply one month's contribution and growth.

    Contributions go in at the start of the month and earn that month's return.
    No clamping: a pot can go negative under extreme draws.

    Returns
    -------
    (pot, salary) after the month
    """
    contribution = salary * contribution_rate / 12.0
    pot = (pot + contribution) * (1.0 + portfolio_return)
    salary = salary * salary_growth
    return pot, salary


def simulate_one_run(
    user: UserInputs,
    catalog: AssetCatalog,
    glidepath: Glidepath,
    *,
    rng: Optional[np.random.Generator] = None,
    schedule: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Simulate one pot trajectory from today to retirement.

    Parameters
    ----------
    user : UserInputs
        Age, salary, contribution and pot parameters
    catalog : AssetCatalog
        Asset classes to draw returns for
    glidepath : Glidepath
        Allocation profile
    rng : np.random.Generator, optional
        Source of randomness; a fresh entropy-seeded Generator when omitted
    schedule : np.ndarray, optional
        Precomputed allocation_schedule(user.months, glidepath, catalog.names).
        The runner passes one schedule to every run instead of rebuilding it.

    Returns
    -------
    np.ndarray of length user.months + 1
    """
    months = user.months
    if schedule is None:
        schedule = allocation_schedule(months, glidepath, catalog.names)
    if schedule.shape != (months, len(catalog)):
        raise ValueError(
            f"Allocation schedule has shape {schedule.shape}, "
            f"expected {(months, len(catalog))}."
        )

    asset_returns = CorrelatedReturnGenerator(catalog, rng).generate(months)
    portfolio_returns = (schedule * asset_returns).sum(axis=1)

    salary_growth = annual_to_monthly_growth(user.salary_inflation)
    pot = float(user.existing_pot)
    salary = float(user.starting_salary)

    trajectory = np.empty(months + 1, dtype=float)
    trajectory[0] = pot
    for m in range(months):
        pot, salary = advance_month(
            pot,
            salary,
            contribution_rate=user.contribution_rate,
            portfolio_return=float(portfolio_returns[m]),
            salary_growth=salary_growth,
        )
        trajectory[m + 1] = pot

    return trajectory
