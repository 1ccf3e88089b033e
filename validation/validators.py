"""
Input validation before any simulation work starts.

Catches problems early:
- Glidepath phases allocating to assets that are not in the catalog
- Phase weights that do not sum to 1
- More percentile bands than the engine is configured to produce
- Assumptions that are legal but probably a units mistake

Construction of the data model already rejects structurally invalid objects
(empty catalogs, bad breakpoints, retirement age <= age); these checks cover
the cross-object consistency that no single object can see.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from core.config import SimulationConfig
from core.errors import InvalidConfigurationError
from core.schema import AssetCatalog, Glidepath, UserInputs

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for one simulation request."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def extend(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)

    def raise_if_invalid(self) -> None:
        """Log warnings; raise InvalidConfigurationError if there are any errors."""
        for w in self.warnings:
            logger.warning(w)
        if not self.is_valid:
            raise InvalidConfigurationError(self.summary())


def validate_catalog(catalog: AssetCatalog) -> ValidationResult:
    result = ValidationResult()

    for asset in catalog:
        if asset.name == catalog.reference:
            continue
        if asset.correlation_to_reference < 0:
            result.warnings.append(
                f"'{asset.name}' has negative correlation to '{catalog.reference}' "
                f"({asset.correlation_to_reference})."
            )

    # Returns should be in decimal form (0.07 not 7.0)
    for asset in catalog:
        if abs(asset.expected_return) > 1.0:
            result.warnings.append(
                f"'{asset.name}' expected return {asset.expected_return} exceeds 100% — "
                f"check if returns are in percent vs decimal form."
            )
        if asset.volatility > 1.0:
            result.warnings.append(
                f"'{asset.name}' volatility {asset.volatility} exceeds 100% — verify units."
            )

    return result


def validate_glidepath(
    glidepath: Glidepath,
    catalog: AssetCatalog,
    *,
    weight_tolerance: float = 1e-6,
) -> ValidationResult:
    result = ValidationResult()
    known = set(catalog.names)

    for phase in glidepath.phases:
        unknown = [name for name in phase.weights if name not in known]
        if unknown:
            result.errors.append(
                f"Phase '{phase.name}' allocates to assets not in the catalog: {unknown}"
            )

        n_neg = sum(1 for w in phase.weights.values() if w < 0)
        if n_neg > 0:
            result.warnings.append(f"Phase '{phase.name}' has {n_neg} negative weight(s).")

        total = phase.total_weight
        if abs(total - 1.0) > weight_tolerance:
            result.warnings.append(
                f"Phase '{phase.name}' weights sum to {total:.6f}, not 1.0."
            )

    unused = [name for name in catalog.names if name not in glidepath.asset_names()]
    if unused:
        result.warnings.append(f"Catalog assets never allocated by the glidepath: {unused}")

    return result


def validate_user_inputs(
    user: UserInputs,
    config: Optional[SimulationConfig] = None,
) -> ValidationResult:
    cfg = config or SimulationConfig()
    result = ValidationResult()

    if len(user.percentiles) > cfg.max_percentiles:
        result.errors.append(
            f"{len(user.percentiles)} percentiles requested; at most "
            f"{cfg.max_percentiles} are supported."
        )

    if abs(user.salary_inflation) > 0.5:
        result.warnings.append(
            f"Salary inflation {user.salary_inflation} exceeds 50% a year — check if it "
            f"is in percent vs decimal form."
        )

    if user.starting_salary == 0 and user.existing_pot == 0:
        result.warnings.append("No salary and no existing pot: every trajectory stays at 0.")
    elif user.contribution_rate == 0 and user.existing_pot == 0:
        result.warnings.append(
            "No contributions and no existing pot: every trajectory stays at 0."
        )

    return result


def validate_simulation_inputs(
    user: UserInputs,
    catalog: AssetCatalog,
    glidepath: Glidepath,
    config: Optional[SimulationConfig] = None,
) -> ValidationResult:
    """
    Run all validation checks for one projection request.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    cfg = config or SimulationConfig()
    result = ValidationResult()
    result.extend(validate_catalog(catalog))
    result.extend(validate_glidepath(glidepath, catalog, weight_tolerance=cfg.weight_tolerance))
    result.extend(validate_user_inputs(user, cfg))
    return result
