"""Rank value types."""

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional

from elo_api.core.enums import Division, Tier
from elo_api.core.riot_api.constants import RANKED_SOLO_QUEUE
from elo_api.core.riot_api.models import LeagueEntryDTO
from elo_api.features.accounts.models import PlayerReference


class RankTuple(NamedTuple):
    """Tier, division and LP of one queue entry."""

    tier: Tier
    division: Division
    league_points: int

    @classmethod
    def from_league_entry(cls, entry: LeagueEntryDTO) -> "RankTuple":
        return cls(entry.tier, entry.rank, entry.league_points)

    @classmethod
    def from_entries(
        cls, entries: Iterable[LeagueEntryDTO], queue_type: str = RANKED_SOLO_QUEUE
    ) -> "RankTuple":
        """Pick the entry for ``queue_type``; no entry means unranked."""
        entry: Optional[LeagueEntryDTO] = next(
            (e for e in entries if e.queue_type == queue_type), None
        )
        if entry is None:
            return UNRANKED
        return cls.from_league_entry(entry)


UNRANKED = RankTuple(Tier.UNRANKED, Division.I, 0)


@dataclass(frozen=True)
class PlayerRankRecord:
    """One roster line before formatting."""

    display_name: str
    rank: RankTuple
    reference: Optional[PlayerReference] = None

    @property
    def tier(self) -> Tier:
        return self.rank.tier

    @property
    def division(self) -> Division:
        return self.rank.division

    @property
    def league_points(self) -> int:
        return self.rank.league_points
