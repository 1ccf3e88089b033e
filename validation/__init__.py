"""
Validation — consistency checks across catalog, glidepath and user inputs.
"""

from .validators import (
    ValidationResult,
    validate_catalog,
    validate_glidepath,
    validate_simulation_inputs,
    validate_user_inputs,
)

__all__ = [
    "ValidationResult",
    "validate_catalog",
    "validate_glidepath",
    "validate_simulation_inputs",
    "validate_user_inputs",
]
