"""
Glidepath package — lifestyle profiles and the allocation resolver.
"""

from .profiles import GLIDEPATHS, available_profiles, get_glidepath
from .resolver import allocation_schedule, interpolate_allocations, resolve_allocation

__all__ = [
    "GLIDEPATHS",
    "available_profiles",
    "get_glidepath",
    "allocation_schedule",
    "interpolate_allocations",
    "resolve_allocation",
]
