"""Riot API constants and enum definitions."""

from enum import Enum


class Region(str, Enum):
    """Riot API regions for regional (account) routing."""

    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"


class Platform(str, Enum):
    """Riot API platforms (shards) for platform routing."""

    BR1 = "br1"
    EUN1 = "eun1"
    EUW1 = "euw1"
    JP1 = "jp1"
    KR = "kr"
    LA1 = "la1"
    LA2 = "la2"
    NA1 = "na1"
    OC1 = "oc1"
    PH2 = "ph2"
    RU = "ru"
    SG2 = "sg2"
    TH2 = "th2"
    TR1 = "tr1"
    TW2 = "tw2"
    VN2 = "vn2"


DEFAULT_SHARD = Platform.BR1.value

# League queue type string reported by league-v4 entries
RANKED_SOLO_QUEUE = "RANKED_SOLO_5x5"
