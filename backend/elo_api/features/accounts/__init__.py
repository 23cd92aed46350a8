"""Accounts feature module.

Parses ``GameName#Tag(shard)`` strings and resolves them to shard-qualified
player references through the Riot account-v1 API.
"""

from .models import PlayerReference, ParsedAccount, ResolvedAccount
from .parsing import parse_account_string
from .service import AccountResolver

__all__ = [
    "PlayerReference",
    "ParsedAccount",
    "ResolvedAccount",
    "parse_account_string",
    "AccountResolver",
]
