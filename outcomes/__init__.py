"""
Outcomes — percentile aggregation across the ensemble, summary metrics, and the result object.
"""

from .aggregator import percentile_trajectories
from .metrics import summarize_final_pots
from .result import SimulationResult

__all__ = [
    "percentile_trajectories",
    "summarize_final_pots",
    "SimulationResult",
]
