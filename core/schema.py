"""
Shared data model for the projection engine.

Everything here is immutable: a simulation call always runs against a stable
snapshot of the catalog, the glidepath and the user's inputs, so edits made
elsewhere while an ensemble is running can never leak into it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import MAX_PERCENTILES
from .errors import InvalidConfigurationError
from .utils import simulation_months


@dataclass(frozen=True)
class AssetClass:
    """One entry of the capital-market assumptions catalog (annual terms)."""
    name: str
    expected_return: float
    volatility: float
    correlation_to_reference: float = 0.0

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidConfigurationError("Asset class name must be non-empty.")
        if self.expected_return <= -1.0:
            raise InvalidConfigurationError(
                f"Asset class '{self.name}' expected return {self.expected_return} "
                f"must be greater than -1 (a total loss every year)."
            )
        if self.volatility < 0:
            raise InvalidConfigurationError(
                f"Asset class '{self.name}' has negative volatility {self.volatility}."
            )
        if not -1.0 <= self.correlation_to_reference <= 1.0:
            raise InvalidConfigurationError(
                f"Asset class '{self.name}' correlation {self.correlation_to_reference} "
                f"is outside [-1, 1]."
            )


@dataclass(frozen=True)
class AssetCatalog:
    """
    Ordered, non-empty set of asset classes plus the reference asset that
    anchors the single-factor correlation model.

    The reference asset's own correlation field is ignored: it defines the factor.
    """
    assets: Tuple[AssetClass, ...]
    reference: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "assets", tuple(self.assets))
        if not self.assets:
            raise InvalidConfigurationError("Asset catalog is empty.")
        names = [a.name for a in self.assets]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise InvalidConfigurationError(f"Duplicate asset class names: {dupes}")
        if self.reference not in names:
            raise InvalidConfigurationError(
                f"Reference asset '{self.reference}' is not in the catalog. "
                f"Available: {names}"
            )

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(a.name for a in self.assets)

    @property
    def reference_index(self) -> int:
        return self.names.index(self.reference)

    @property
    def reference_asset(self) -> AssetClass:
        return self.assets[self.reference_index]

    def get(self, name: str) -> AssetClass:
        for asset in self.assets:
            if asset.name == name:
                return asset
        raise KeyError(f"Unknown asset class '{name}'. Available: {list(self.names)}")

    def __iter__(self) -> Iterator[AssetClass]:
        return iter(self.assets)

    def __len__(self) -> int:
        return len(self.assets)

    def to_dataframe(self) -> pd.DataFrame:
        """Catalog as a display table, one row per asset class."""
        return pd.DataFrame([
            {
                "Asset Class": a.name,
                "Expected Return": a.expected_return,
                "Volatility": a.volatility,
                "Correlation": a.correlation_to_reference,
                "Reference": a.name == self.reference,
            }
            for a in self.assets
        ])


@dataclass(frozen=True)
class LifestylePhase:
    """Named target allocation: asset-class name -> weight."""
    name: str
    weights: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = MappingProxyType({str(k): float(v) for k, v in dict(self.weights).items()})
        object.__setattr__(self, "weights", frozen)

    @property
    def total_weight(self) -> float:
        return float(sum(self.weights.values()))


@dataclass(frozen=True)
class Glidepath:
    """
    Three lifestyle phases and the two years-to-retirement breakpoints between them.

    growth_end > pre_retirement_end > 0. A zero pre_retirement_end would leave
    the final de-risking segment with zero length, so it is rejected here.
    """
    growth: LifestylePhase
    pre_retirement: LifestylePhase
    at_retirement: LifestylePhase
    growth_end: float
    pre_retirement_end: float

    def __post_init__(self) -> None:
        if self.pre_retirement_end <= 0:
            raise InvalidConfigurationError(
                f"pre_retirement_end must be > 0 years (got {self.pre_retirement_end})."
            )
        if self.growth_end <= self.pre_retirement_end:
            raise InvalidConfigurationError(
                f"growth_end ({self.growth_end}) must exceed "
                f"pre_retirement_end ({self.pre_retirement_end})."
            )

    @property
    def phases(self) -> Tuple[LifestylePhase, LifestylePhase, LifestylePhase]:
        return (self.growth, self.pre_retirement, self.at_retirement)

    def asset_names(self) -> Tuple[str, ...]:
        """Every asset named by any phase, in first-seen order."""
        seen: Dict[str, None] = {}
        for phase in self.phases:
            for name in phase.weights:
                seen.setdefault(name, None)
        return tuple(seen)


class UserInputs(BaseModel):
    """Per-projection parameters supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    age: int = Field(..., gt=0)
    starting_salary: float = Field(..., ge=0)
    salary_inflation: float = Field(0.0, gt=-1)
    contribution_rate: float = Field(..., ge=0, le=1)
    existing_pot: float = Field(0.0, ge=0)
    retirement_age: int
    num_simulations: int = Field(..., gt=0)
    percentiles: Tuple[int, ...] = Field(..., min_length=1, max_length=MAX_PERCENTILES)
    profile_name: str = "SMA"

    @field_validator("percentiles")
    @classmethod
    def _check_percentiles(cls, value: Tuple[int, ...]) -> Tuple[int, ...]:
        out_of_range = [p for p in value if not 0 <= p <= 100]
        if out_of_range:
            raise ValueError(f"Percentiles must lie in [0, 100]; got {out_of_range}")
        if len(set(value)) != len(value):
            raise ValueError(f"Duplicate percentiles requested: {list(value)}")
        return value

    @model_validator(mode="after")
    def _check_horizon(self) -> "UserInputs":
        if self.retirement_age <= self.age:
            raise ValueError(
                f"retirement_age ({self.retirement_age}) must exceed age ({self.age})."
            )
        return self

    @property
    def months(self) -> int:
        return simulation_months(self.age, self.retirement_age)

    @property
    def trajectory_length(self) -> int:
        # initial pot + one value per simulated month
        return self.months + 1
