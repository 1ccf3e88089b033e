"""
Named glidepath profiles.

SMA            — standard lifestyle default: ~80% equity in growth, de-risking
                 from 15 years out, 35% equity at retirement.
SMAHighGrowth  — higher-equity growth phase (~93%), same end state.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from core.errors import InvalidConfigurationError
from core.schema import Glidepath, LifestylePhase

_AT_RETIREMENT = {
    "Global Equity": 0.35,
    "Private Assets": 0.0,
    "Listed Alts": 0.01,
    "UK Property": 0.02,
    "Fixed Income - EMD": 0.12,
    "Fixed Income - Developed Markets": 0.49,
    "Money Markets": 0.01,
}

GLIDEPATHS: Dict[str, Glidepath] = {
    "SMA": Glidepath(
        growth=LifestylePhase("growth", {
            "Global Equity": 0.793,
            "Private Assets": 0.0,
            "Listed Alts": 0.039,
            "UK Property": 0.023,
            "Fixed Income - EMD": 0.046,
            "Fixed Income - Developed Markets": 0.099,
            "Money Markets": 0.0,
        }),
        pre_retirement=LifestylePhase("pre_retirement", {
            "Global Equity": 0.572,
            "Private Assets": 0.0,
            "Listed Alts": 0.025,
            "UK Property": 0.022,
            "Fixed Income - EMD": 0.083,
            "Fixed Income - Developed Markets": 0.295,
            "Money Markets": 0.005,
        }),
        at_retirement=LifestylePhase("at_retirement", _AT_RETIREMENT),
        growth_end=15,
        pre_retirement_end=10,
    ),
    "SMAHighGrowth": Glidepath(
        growth=LifestylePhase("growth", {
            "Global Equity": 0.927,
            "Private Assets": 0.0,
            "Listed Alts": 0.05,
            "UK Property": 0.023,
            "Fixed Income - EMD": 0.0,
            "Fixed Income - Developed Markets": 0.0,
            "Money Markets": 0.0,
        }),
        pre_retirement=LifestylePhase("pre_retirement", {
            "Global Equity": 0.639,
            "Private Assets": 0.0,
            "Listed Alts": 0.03,
            "UK Property": 0.022,
            "Fixed Income - EMD": 0.06,
            "Fixed Income - Developed Markets": 0.245,
            "Money Markets": 0.005,
        }),
        at_retirement=LifestylePhase("at_retirement", _AT_RETIREMENT),
        growth_end=15,
        pre_retirement_end=10,
    ),
}


def available_profiles(profiles: Optional[Mapping[str, Glidepath]] = None) -> List[str]:
    return list(GLIDEPATHS if profiles is None else profiles)


def get_glidepath(
    name: str,
    profiles: Optional[Mapping[str, Glidepath]] = None,
) -> Glidepath:
    """
    Look up a glidepath profile by name.

    Parameters
    ----------
    name : str
        Profile key, e.g. "SMA" or "SMAHighGrowth"
    profiles : mapping, optional
        Alternative profile catalog; defaults to GLIDEPATHS
    """
    catalog = GLIDEPATHS if profiles is None else profiles
    if name not in catalog:
        raise InvalidConfigurationError(
            f"Unknown glidepath profile '{name}'. "
            f"Available: {list(catalog)}"
        )
    return catalog[name]
