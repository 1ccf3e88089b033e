"""
Allocation resolver — target portfolio weights as a function of years to retirement.

The glidepath has three phases and two breakpoints:

  years > growth_end                       growth weights, unchanged
  pre_retirement_end < years <= growth_end growth -> pre_retirement, linear
  years <= pre_retirement_end              pre_retirement -> at_retirement, linear

Breakpoints are validated on Glidepath construction, so neither segment can
have zero length here.
"""

from __future__ import annotations

from typing import Dict, Mapping, Sequence

import numpy as np

from core.errors import InvalidConfigurationError
from core.schema import Glidepath


def interpolate_allocations(
    start: Mapping[str, float],
    end: Mapping[str, float],
    progress: float,
) -> Dict[str, float]:
    """Per-asset linear blend; an asset missing from one side counts as weight 0 there."""
    names = list(start) + [k for k in end if k not in start]
    result: Dict[str, float] = {}
    for asset in names:
        a = start.get(asset, 0.0)
        b = end.get(asset, 0.0)
        result[asset] = a + progress * (b - a)
    return result


def resolve_allocation(years_to_retirement: float, glidepath: Glidepath) -> Dict[str, float]:
    """Target weights at the given horizon."""
    growth_end = glidepath.growth_end
    pre_end = glidepath.pre_retirement_end

    if years_to_retirement > growth_end:
        return dict(glidepath.growth.weights)

    if years_to_retirement > pre_end:
        progress = (growth_end - years_to_retirement) / (growth_end - pre_end)
        return interpolate_allocations(
            glidepath.growth.weights, glidepath.pre_retirement.weights, progress
        )

    progress = (pre_end - years_to_retirement) / pre_end
    return interpolate_allocations(
        glidepath.pre_retirement.weights, glidepath.at_retirement.weights, progress
    )


def allocation_schedule(
    months: int,
    glidepath: Glidepath,
    asset_names: Sequence[str],
) -> np.ndarray:
    """
    Weights for every simulated month, shape (months, len(asset_names)).

    Row m uses horizon (months - m) / 12. Assets the glidepath never names
    get weight 0. The schedule does not depend on any random draw, so one
    schedule serves every run of an ensemble.
    """
    schedule = np.zeros((months, len(asset_names)), dtype=float)
    column = {name: j for j, name in enumerate(asset_names)}
    for m in range(months):
        weights = resolve_allocation((months - m) / 12.0, glidepath)
        for name, w in weights.items():
            if name not in column:
                raise InvalidConfigurationError(
                    f"Glidepath allocates to '{name}', which is not in the asset catalog."
                )
            schedule[m, column[name]] = w
    return schedule
