"""Dependencies for the accounts feature."""

from typing import Annotated

from fastapi import Depends

from elo_api.core.dependencies import RiotClientDep, SettingsDep
from .service import AccountResolver


async def get_account_resolver(
    riot_client: RiotClientDep,
    settings: SettingsDep,
) -> AccountResolver:
    """Get account resolver instance.

    :param riot_client: Riot API client
    :param settings: Application settings (default shard)
    :returns: Account resolver bound to the request's client
    """
    return AccountResolver(riot_client, default_shard=settings.default_shard)


# Type alias for dependency injection
AccountResolverDep = Annotated[AccountResolver, Depends(get_account_resolver)]

__all__ = ["get_account_resolver", "AccountResolverDep"]
