"""Flood risk tiering shared by the park list and the flood zone overlay.

Park records carry a numeric flood_risk rank (1 = low, 2 = moderate,
3+ = high). FEMA polygons carry a FLD_ZONE designation, which is ranked first
and then folded onto the same three tiers.
"""

import math
from enum import Enum
from typing import Any


class FloodTier(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


TIER_COLORS: dict[FloodTier, str] = {
    FloodTier.GREEN: "#22c55e",
    FloodTier.YELLOW: "#eab308",
    FloodTier.RED: "#ef4444",
}

# Flood zone risk ordering (higher = worse)
FLOOD_ZONE_RISK: dict[str, int] = {
    "V": 5,    # Coastal high hazard
    "VE": 5,
    "A": 4,    # 100-year floodplain
    "AE": 4,
    "AH": 4,
    "AO": 4,
    "AR": 4,
    "A99": 3,
    "X500": 2,  # 500-year floodplain (moderate risk)
    "B": 2,     # Older designation for 500-year
    "X": 1,     # Minimal risk
    "C": 1,     # Older designation for minimal
    "D": 1,     # Undetermined
}


def flood_tier(flood_risk: Any) -> FloodTier:
    """Map a numeric flood_risk rank onto a tier.

    Missing or unparseable values are treated conservatively as yellow.
    """
    try:
        r = float(flood_risk)
    except (TypeError, ValueError):
        return FloodTier.YELLOW
    if not math.isfinite(r):
        return FloodTier.YELLOW
    if r >= 3:
        return FloodTier.RED
    if r >= 2:
        return FloodTier.YELLOW
    return FloodTier.GREEN


def tier_color(tier: Any) -> str:
    try:
        return TIER_COLORS[FloodTier(tier)]
    except ValueError:
        return TIER_COLORS[FloodTier.YELLOW]


def zone_risk(fld_zone: str | None) -> int | None:
    """Rank a FEMA flood zone designation (e.g. 'AE', 'X'). None if unknown."""
    if not fld_zone:
        return None
    return FLOOD_ZONE_RISK.get(fld_zone.strip().upper().replace(" ", ""))


def zone_tier(fld_zone: str | None) -> FloodTier:
    """Tier for a FEMA zone: A/V families red, A99/500-year yellow, X/C/D green."""
    rank = zone_risk(fld_zone)
    if rank is None:
        return FloodTier.YELLOW
    if rank >= 4:
        return FloodTier.RED
    if rank >= 2:
        return FloodTier.YELLOW
    return FloodTier.GREEN


def feature_flood_zone(feature: dict | None) -> str | None:
    """FLD_ZONE attribute of an NFHL GeoJSON feature, if present.

    NFHL marks the 0.2% annual chance floodplain as X with ZONE_SUBTY
    '0.2 PCT ANNUAL CHANCE FLOOD HAZARD'; that is reported as X500.
    """
    if not isinstance(feature, dict):
        return None
    props = feature.get("properties") or {}
    zone = props.get("FLD_ZONE")
    if not isinstance(zone, str) or not zone.strip():
        return None
    zone = zone.strip().upper()
    subtype = props.get("ZONE_SUBTY")
    if zone == "X" and isinstance(subtype, str) and "0.2" in subtype:
        return "X500"
    return zone
