"""
Correlated monthly return generator.

Input:  Asset catalog (annual expected return, volatility, correlation to the reference asset)
Output: Simulated monthly return per asset

Method:
  1. Draw standard normal shocks with a Box-Muller transform of two uniforms
  2. The reference asset keeps its shock z1 unchanged; it defines the factor
  3. Every other asset mixes z1 with its own independent shock:
       shock_i = z1 * rho_i + z_i * sqrt(1 - rho_i^2)
  4. Convert annual assumptions to monthly terms and apply the shock:
       return_i = ((1 + r_i)^(1/12) - 1) + (sigma_i / sqrt(12)) * shock_i

All randomness comes from the injected numpy Generator, so a seeded
Generator reproduces the same draws.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

import numpy as np

from core.schema import AssetCatalog
from core.utils import annual_to_monthly_return, annual_to_monthly_volatility

from .correlation import factor_loadings


def standard_normal(
    rng: np.random.Generator,
    size: Union[int, Tuple[int, ...], None] = None,
) -> Union[float, np.ndarray]:
    """
    Box-Muller standard normal draws from two independent uniforms.

    1 - U keeps the log argument in (0, 1], so log(0) never happens.
    """
    u = 1.0 - rng.random(size)
    v = 1.0 - rng.random(size)
    return np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)


class CorrelatedReturnGenerator:
    """
    Draws monthly returns for every asset in a catalog.

    Usage:
        gen = CorrelatedReturnGenerator(catalog, rng=np.random.default_rng(42))
        block = gen.generate(337)   # (337, n_assets), columns in catalog order
        one = gen.draw_month()      # {"Global Equity": 0.013, ...}
    """

    def __init__(
        self,
        catalog: AssetCatalog,
        rng: Optional[np.random.Generator] = None,
    ):
        self.catalog = catalog
        self.rng = rng if rng is not None else np.random.default_rng()

        self._reference = catalog.reference_index
        self._monthly_mean = annual_to_monthly_return([a.expected_return for a in catalog])
        self._monthly_vol = annual_to_monthly_volatility([a.volatility for a in catalog])

        # reference loading is 1 and its idiosyncratic weight 0, so its shock is z1 exactly
        self._loading = factor_loadings(catalog)
        self._idiosyncratic = np.sqrt(1.0 - self._loading ** 2)

    def shocks(self, n_months: int) -> np.ndarray:
        """(n_months, n_assets) correlated standard normal shocks."""
        z = standard_normal(self.rng, (n_months, len(self.catalog)))
        z1 = z[:, [self._reference]]
        return z1 * self._loading + z * self._idiosyncratic

    def generate(self, n_months: int) -> np.ndarray:
        """(n_months, n_assets) monthly returns, columns in catalog order."""
        return self._monthly_mean + self._monthly_vol * self.shocks(n_months)

    def draw_month(self) -> Dict[str, float]:
        """One month of returns keyed by asset name."""
        row = self.generate(1)[0]
        return {name: float(r) for name, r in zip(self.catalog.names, row)}


def generate_monthly_returns(
    catalog: AssetCatalog,
    rng: Optional[np.random.Generator] = None,
) -> Dict[str, float]:
    """Draw one month of correlated returns for every asset in the catalog."""
    return CorrelatedReturnGenerator(catalog, rng).draw_month()
