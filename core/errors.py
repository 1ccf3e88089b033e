"""
Error types raised by the projection engine.

Field-level problems in UserInputs surface as pydantic.ValidationError.
Everything structural (catalogs, glidepaths, cross-object consistency) is an
InvalidConfigurationError, raised before any simulation work starts.
"""

from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """Inputs that cannot produce a meaningful projection."""


class SimulationCancelled(RuntimeError):
    """Raised when a CancellationToken is set while an ensemble is running."""

    def __init__(self, completed_runs: int, requested_runs: int):
        self.completed_runs = completed_runs
        self.requested_runs = requested_runs
        super().__init__(
            f"Simulation cancelled after {completed_runs} of {requested_runs} runs."
        )
