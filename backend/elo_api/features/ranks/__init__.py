"""Ranks feature module.

Looks up solo queue ranks for roster accounts, sorts them and renders the
pt-BR summary line.
"""

from .models import PlayerRankRecord, RankTuple, UNRANKED
from .formatting import (
    NO_ACCOUNTS_MESSAGE,
    TIER_LABELS,
    render_record,
    render_summary,
    sort_records,
)
from .gateway import RankGateway
from .service import RankAggregator

__all__ = [
    "PlayerRankRecord",
    "RankTuple",
    "UNRANKED",
    "NO_ACCOUNTS_MESSAGE",
    "TIER_LABELS",
    "render_record",
    "render_summary",
    "sort_records",
    "RankGateway",
    "RankAggregator",
]
