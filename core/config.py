"""
Engine configuration.

SimulationConfig holds engine-level settings that are not part of a user's
profile. Per-user parameters live in core.schema.UserInputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

# Largest number of percentile bands one projection can request.
MAX_PERCENTILES = 5


@dataclass(frozen=True)
class SimulationConfig:
    # None = seed from OS entropy (not reproducible)
    seed: Optional[int] = None

    max_percentiles: int = MAX_PERCENTILES

    # tolerance for the "phase weights should sum to 1" warning
    weight_tolerance: float = 1e-6

    # log a progress line every N runs (DEBUG level)
    progress_every: int = 500


DEFAULT_USER_INPUTS: Dict[str, Any] = {
    "age": 22,
    "starting_salary": 25_000.0,
    "salary_inflation": 0.0,
    "contribution_rate": 0.12,
    "existing_pot": 5_000.0,
    "retirement_age": 67,
    "num_simulations": 2_000,
    "percentiles": (5, 25, 50, 75, 95),
    "profile_name": "SMA",
}
