"""
Core package — data model, configuration, error types, and unit conversions.
No simulation logic lives here.
"""

from .config import DEFAULT_USER_INPUTS, MAX_PERCENTILES, SimulationConfig
from .errors import InvalidConfigurationError, SimulationCancelled
from .schema import AssetCatalog, AssetClass, Glidepath, LifestylePhase, UserInputs
from .utils import (
    annual_to_monthly_growth,
    annual_to_monthly_return,
    annual_to_monthly_volatility,
    simulation_months,
)

__all__ = [
    "DEFAULT_USER_INPUTS",
    "MAX_PERCENTILES",
    "SimulationConfig",
    "InvalidConfigurationError",
    "SimulationCancelled",
    "AssetCatalog",
    "AssetClass",
    "Glidepath",
    "LifestylePhase",
    "UserInputs",
    "annual_to_monthly_growth",
    "annual_to_monthly_return",
    "annual_to_monthly_volatility",
    "simulation_months",
]
