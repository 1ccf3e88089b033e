"""
Correlation structure implied by the single-factor return model.

Each non-reference asset's shock is  z1 * rho_i + z_i * sqrt(1 - rho_i^2),
with z1 the reference asset's shock. That gives:
  corr(reference, i) = rho_i
  corr(i, j)         = rho_i * rho_j      (i != j, both non-reference)

Only correlations to the reference are configurable; cross-correlations
between other assets follow from them.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from core.schema import AssetCatalog


def factor_loadings(catalog: AssetCatalog) -> np.ndarray:
    """Correlation of each asset to the reference shock (1.0 for the reference itself)."""
    rho = np.array([a.correlation_to_reference for a in catalog], dtype=float)
    rho[catalog.reference_index] = 1.0
    return rho


def implied_correlation_matrix(catalog: AssetCatalog) -> np.ndarray:
    """n x n correlation matrix implied by the single-factor construction."""
    rho = factor_loadings(catalog)
    matrix = np.outer(rho, rho)
    np.fill_diagonal(matrix, 1.0)
    return matrix


def correlation_matrix_to_dataframe(
    matrix: np.ndarray,
    labels: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """Convert correlation matrix to a labeled DataFrame for display."""
    if labels is None:
        labels = [f"Asset {i}" for i in range(matrix.shape[0])]
    return pd.DataFrame(matrix, index=list(labels), columns=list(labels))
