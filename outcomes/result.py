"""
SimulationResult — the read-only mapping handed back to callers.

    result[50]            -> median trajectory (np.ndarray, read-only)
    result.final_values() -> {5: 81234.5, 50: 212345.6, ...}
    result.to_dataframe() -> one row per month, a P<p> column per percentile
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Iterator, Optional, Tuple

import numpy as np
import pandas as pd

from core.utils import ages_for_months, month_dates


class SimulationResult(Mapping):
    """Percentile -> trajectory of percentile-interpolated pot values."""

    def __init__(
        self,
        trajectories: Dict[int, np.ndarray],
        *,
        start_age: float,
        summary: Optional[pd.DataFrame] = None,
    ):
        frozen: Dict[int, np.ndarray] = {}
        for p, values in trajectories.items():
            arr = np.array(values, dtype=float)
            arr.setflags(write=False)
            frozen[int(p)] = arr
        lengths = {len(a) for a in frozen.values()}
        if len(lengths) > 1:
            raise ValueError(f"Percentile trajectories differ in length: {sorted(lengths)}")

        self._trajectories = frozen
        self._start_age = float(start_age)
        self._summary = summary

    def __getitem__(self, percentile: int) -> np.ndarray:
        return self._trajectories[percentile]

    def __iter__(self) -> Iterator[int]:
        return iter(self._trajectories)

    def __len__(self) -> int:
        return len(self._trajectories)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if list(self.keys()) != list(other.keys()):
            return False
        return all(np.array_equal(self[p], other[p]) for p in self)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"SimulationResult(percentiles={list(self.percentiles)}, "
            f"n_points={self.n_points}, start_age={self._start_age})"
        )

    @property
    def percentiles(self) -> Tuple[int, ...]:
        return tuple(self._trajectories)

    @property
    def n_points(self) -> int:
        for arr in self._trajectories.values():
            return len(arr)
        return 0

    @property
    def ages(self) -> np.ndarray:
        return ages_for_months(self._start_age, self.n_points)

    @property
    def summary(self) -> Optional[pd.DataFrame]:
        """Terminal pot distribution summary (see outcomes.metrics)."""
        return None if self._summary is None else self._summary.copy()

    def final_values(self) -> Dict[int, float]:
        return {p: float(arr[-1]) for p, arr in self._trajectories.items()}

    def to_dataframe(self, start_date: Optional[pd.Timestamp] = None) -> pd.DataFrame:
        """
        Month-by-month table.

        Columns: month, age, [date,] P<p> for each percentile in request order.
        """
        n = self.n_points
        df = pd.DataFrame({"month": np.arange(n), "age": self.ages})
        if start_date is not None:
            df["date"] = month_dates(start_date, n)
        for p, arr in self._trajectories.items():
            df[f"P{p}"] = arr
        return df
