from __future__ import annotations

from typing import Union

import numpy as np
import pandas as pd
from dateutil.relativedelta import relativedelta

ArrayLike = Union[float, np.ndarray]


def annual_to_monthly_return(annual_return: ArrayLike) -> ArrayLike:
    """Geometric monthly equivalent of an annual return: (1+r)^(1/12) - 1."""
    return np.power(1.0 + np.asarray(annual_return, dtype=float), 1.0 / 12.0) - 1.0


def annual_to_monthly_volatility(annual_vol: ArrayLike) -> ArrayLike:
    """Square-root-of-time scaling: sigma / sqrt(12)."""
    return np.asarray(annual_vol, dtype=float) / np.sqrt(12.0)


def annual_to_monthly_growth(annual_rate: float) -> float:
    """Monthly multiplier for a value that grows by annual_rate per year."""
    return float((1.0 + annual_rate) ** (1.0 / 12.0))


def simulation_months(age: int, retirement_age: int) -> int:
    """Number of simulated months, counting the starting month."""
    return (retirement_age - age) * 12 + 1


def ages_for_months(age: float, n_points: int) -> np.ndarray:
    """Age at each trajectory index (index 0 = today)."""
    return age + np.arange(n_points, dtype=float) / 12.0


def month_dates(start_date: pd.Timestamp, n_points: int) -> pd.DatetimeIndex:
    """
    Calendar date for each trajectory index, stepping whole months from start_date.
    Days past the end of a shorter month are clipped to its last day.
    """
    base = pd.Timestamp(start_date).normalize()
    return pd.DatetimeIndex([base + relativedelta(months=k) for k in range(n_points)])
