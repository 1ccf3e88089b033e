"""
Distribution summary of the pot at retirement.

Percentile trajectories answer "what does the path look like?"; this table
answers "how wide is the spread of outcomes at the end?".
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd


def summarize_final_pots(
    trajectories: np.ndarray,
    *,
    percentiles: Sequence[int] = (5, 25, 50, 75, 95),
) -> pd.DataFrame:
    """
    One-row summary of terminal pot values across all runs.

    Columns: Metric, Runs, Mean, Std Dev, Min, P<p>..., Max, Share Negative
    """
    final = np.asarray(trajectories, dtype=float)[:, -1]
    if len(final) == 0:
        raise ValueError("No trajectories to summarize.")

    row = {
        "Metric": "Pot at retirement",
        "Runs": int(len(final)),
        "Mean": float(np.mean(final)),
        "Std Dev": float(np.std(final)),
        "Min": float(np.min(final)),
    }
    for p in percentiles:
        row[f"P{int(p):02d}"] = float(np.percentile(final, p))
    row["Max"] = float(np.max(final))
    # negative pots are legitimate outcomes under adverse draws
    row["Share Negative"] = float(np.mean(final < 0))
    return pd.DataFrame([row])
