"""Riot API endpoint definitions and routing information."""

from typing import Union
from urllib.parse import quote

from .constants import Region, Platform


def _host(value: Union[Region, Platform, str]) -> str:
    """Host prefix for a region or platform, enum or plain string."""
    code = value.value if isinstance(value, (Region, Platform)) else value
    return f"https://{code.lower()}.api.riotgames.com"


class RiotAPIEndpoints:
    """Riot API endpoint definitions and routing."""

    # Account endpoints (Regional)
    @staticmethod
    def account_by_riot_id(
        game_name: str, tag_line: str, region: Union[Region, str]
    ) -> str:
        """Get account by Riot ID endpoint."""
        return (
            f"{_host(region)}/riot/account/v1/accounts/by-riot-id/"
            f"{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        )

    @staticmethod
    def account_by_puuid(puuid: str, region: Union[Region, str]) -> str:
        """Get account by PUUID endpoint."""
        return f"{_host(region)}/riot/account/v1/accounts/by-puuid/{quote(puuid, safe='')}"

    # League endpoints (Platform)
    @staticmethod
    def league_entries_by_puuid(puuid: str, platform: Union[Platform, str]) -> str:
        """Get league entries by PUUID endpoint."""
        return f"{_host(platform)}/lol/league/v4/entries/by-puuid/{quote(puuid, safe='')}"
