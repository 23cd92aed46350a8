"""Pydantic models for Riot API response data.

The client validates every response against these models, so code past the
client boundary never touches raw JSON.
"""

from pydantic import BaseModel, Field, ConfigDict

from ..enums import Division, Tier


class AccountDTO(BaseModel):
    """Riot Account information."""

    puuid: str = Field(..., min_length=1)
    game_name: str = Field(..., alias="gameName", min_length=1)
    tag_line: str = Field(..., alias="tagLine", min_length=1)

    model_config = ConfigDict(populate_by_name=True)

    @property
    def riot_id(self) -> str:
        """Display form ``GameName#TagLine``."""
        return f"{self.game_name}#{self.tag_line}"


class LeagueEntryDTO(BaseModel):
    """League entry information from league-v4 ``entries/by-puuid``."""

    queue_type: str = Field(..., alias="queueType")
    tier: Tier
    rank: Division
    league_points: int = Field(..., alias="leaguePoints", ge=0)

    model_config = ConfigDict(populate_by_name=True)
