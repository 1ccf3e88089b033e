"""
Market package — asset-class assumptions and correlated monthly return draws.

  1. catalog.py      — default capital-market assumptions
  2. correlation.py  — correlation structure implied by the single-factor model
  3. generator.py    — Box-Muller shocks -> correlated monthly returns
"""

from .catalog import DEFAULT_ASSET_CLASSES, REFERENCE_ASSET, get_asset_catalog
from .correlation import (
    correlation_matrix_to_dataframe,
    factor_loadings,
    implied_correlation_matrix,
)
from .generator import CorrelatedReturnGenerator, generate_monthly_returns, standard_normal

__all__ = [
    "DEFAULT_ASSET_CLASSES",
    "REFERENCE_ASSET",
    "get_asset_catalog",
    "correlation_matrix_to_dataframe",
    "factor_loadings",
    "implied_correlation_matrix",
    "CorrelatedReturnGenerator",
    "generate_monthly_returns",
    "standard_normal",
]
