"""Shared enums used across features.

This module provides a single source of truth for enums used in both the
Riot API DTOs and the ranking feature.
"""

from enum import Enum


class Tier(str, Enum):
    """League of Legends rank tiers, UNRANKED included."""

    UNRANKED = "UNRANKED"
    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def order(self) -> int:
        """Position of the tier, UNRANKED lowest."""
        return TIER_ORDER[self]

    @property
    def has_divisions(self) -> bool:
        """Whether divisions are meaningful for this tier."""
        return self not in DIVISIONLESS_TIERS


class Division(str, Enum):
    """League of Legends rank divisions (I is the highest)."""

    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"

    @property
    def order(self) -> int:
        """Position of the division, IV lowest."""
        return DIVISION_ORDER[self]


TIER_ORDER = {tier: position for position, tier in enumerate(Tier, start=1)}

DIVISION_ORDER = {
    Division.I: 4,
    Division.II: 3,
    Division.III: 2,
    Division.IV: 1,
}

DIVISIONLESS_TIERS = frozenset(
    {Tier.UNRANKED, Tier.MASTER, Tier.GRANDMASTER, Tier.CHALLENGER}
)
