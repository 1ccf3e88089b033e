"""
Capital-market assumptions for the asset classes a pension default fund invests in.

Annual expected returns and volatilities, plus each asset's correlation to
Global Equity, which acts as the single factor every other asset loads on.
"""

from __future__ import annotations

from typing import Dict, List

from core.errors import InvalidConfigurationError
from core.schema import AssetCatalog, AssetClass

REFERENCE_ASSET = "Global Equity"

DEFAULT_ASSET_CLASSES = (
    AssetClass("Global Equity", expected_return=0.0743, volatility=0.1344, correlation_to_reference=1.0),
    AssetClass("Private Assets", expected_return=0.0892, volatility=0.0986, correlation_to_reference=0.42),
    AssetClass("Listed Alts", expected_return=0.0815, volatility=0.1455, correlation_to_reference=0.69),
    AssetClass("UK Property", expected_return=0.0834, volatility=0.1306, correlation_to_reference=0.26),
    AssetClass("Fixed Income - EMD", expected_return=0.0689, volatility=0.0795, correlation_to_reference=0.50),
    AssetClass("Fixed Income - Developed Markets", expected_return=0.0335, volatility=0.0328, correlation_to_reference=0.02),
    AssetClass("Money Markets", expected_return=0.0289, volatility=0.016, correlation_to_reference=0.0),
)

ASSET_CATALOGS: Dict[str, AssetCatalog] = {
    "default": AssetCatalog(assets=DEFAULT_ASSET_CLASSES, reference=REFERENCE_ASSET),
}


def available_catalogs() -> List[str]:
    return list(ASSET_CATALOGS)


def get_asset_catalog(name: str = "default") -> AssetCatalog:
    """
    Return a named asset catalog.

    Catalogs are immutable, so the shared instance is returned as-is.
    """
    if name not in ASSET_CATALOGS:
        raise InvalidConfigurationError(
            f"Unknown asset catalog '{name}'. "
            f"Available: {available_catalogs()}"
        )
    return ASSET_CATALOGS[name]
