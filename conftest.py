"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from core.config import DEFAULT_USER_INPUTS
from core.schema import AssetCatalog, AssetClass, Glidepath, LifestylePhase, UserInputs
from glidepath.profiles import get_glidepath
from market.catalog import get_asset_catalog


@pytest.fixture
def catalog() -> AssetCatalog:
    return get_asset_catalog()


@pytest.fixture
def sma() -> Glidepath:
    return get_glidepath("SMA")


@pytest.fixture
def balanced_glidepath() -> Glidepath:
    """Three-asset glidepath whose phases each sum to exactly 1."""
    return Glidepath(
        growth=LifestylePhase("growth", {"Equity": 0.8, "Bonds": 0.15, "Cash": 0.05}),
        pre_retirement=LifestylePhase("pre_retirement", {"Equity": 0.5, "Bonds": 0.4, "Cash": 0.1}),
        at_retirement=LifestylePhase("at_retirement", {"Equity": 0.25, "Bonds": 0.5, "Cash": 0.25}),
        growth_end=15,
        pre_retirement_end=10,
    )


@pytest.fixture
def three_asset_catalog() -> AssetCatalog:
    return AssetCatalog(
        assets=(
            AssetClass("Equity", expected_return=0.07, volatility=0.15, correlation_to_reference=1.0),
            AssetClass("Bonds", expected_return=0.03, volatility=0.05, correlation_to_reference=0.3),
            AssetClass("Cash", expected_return=0.02, volatility=0.01, correlation_to_reference=0.0),
        ),
        reference="Equity",
    )


@pytest.fixture
def cash_only_catalog() -> AssetCatalog:
    """Single zero-volatility asset: trajectories are deterministic."""
    return AssetCatalog(
        assets=(AssetClass("Cash", expected_return=0.05, volatility=0.0),),
        reference="Cash",
    )


@pytest.fixture
def cash_only_glidepath() -> Glidepath:
    all_cash = {"Cash": 1.0}
    return Glidepath(
        growth=LifestylePhase("growth", all_cash),
        pre_retirement=LifestylePhase("pre_retirement", all_cash),
        at_retirement=LifestylePhase("at_retirement", all_cash),
        growth_end=15,
        pre_retirement_end=10,
    )


@pytest.fixture
def make_user():
    """Factory: UserInputs from the application defaults plus overrides."""
    def _make(**overrides) -> UserInputs:
        return UserInputs(**{**DEFAULT_USER_INPUTS, **overrides})
    return _make
