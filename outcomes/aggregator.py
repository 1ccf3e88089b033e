"""
Aggregate an ensemble of trajectories into percentile trajectories.

For every month index each requested percentile p is taken across all runs
with numpy's default linear method, i.e. interpolation between the two
closest ranks of the sorted values:

  rank   = p / 100 * (n - 1)
  value  = sorted[floor(rank)] + (sorted[ceil(rank)] - sorted[floor(rank)]) * (rank - floor(rank))

Exact at p=0 (minimum) and p=100 (maximum); with a single run every
percentile is that run.
"""

from __future__ import annotations

from typing import Dict, Sequence

import numpy as np


def percentile_trajectories(
    trajectories: np.ndarray,
    percentiles: Sequence[int],
) -> Dict[int, np.ndarray]:
    """
    Parameters
    ----------
    trajectories : np.ndarray
        Shape (n_runs, n_points), one row per simulated run
    percentiles : sequence of int
        Percentiles in [0, 100]; output keys keep this order

    Returns
    -------
    Dict mapping each percentile to an (n_points,) array
    """
    values = np.asarray(trajectories, dtype=float)
    if values.ndim != 2 or values.shape[0] == 0:
        raise ValueError(
            f"Expected a non-empty (n_runs, n_points) array, got shape {values.shape}."
        )

    requested = list(percentiles)
    # one row per requested percentile, one column per month
    bands = np.percentile(values, requested, axis=0)
    return {p: bands[i] for i, p in enumerate(requested)}
