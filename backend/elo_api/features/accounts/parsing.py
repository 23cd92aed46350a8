"""Parsing of ``GameName#Tag(shard)`` account strings."""

import re
from typing import Optional

from elo_api.core.exceptions import MalformedAccountInputError
from elo_api.core.riot_api.constants import DEFAULT_SHARD

from .models import ParsedAccount

# Shards end up in a hostname
_SHARD_PATTERN = re.compile(r"^[a-z0-9]+$")


def split_shard(value: str, default_shard: str = DEFAULT_SHARD) -> tuple[str, str]:
    """Split ``account(shard)`` into ``(shard, account)``.

    A missing or empty shard suffix yields ``default_shard``.
    """
    account, _, rest = value.partition("(")
    shard = rest.replace(")", "").strip().lower()
    return shard or default_shard, account


def parse_account_string(
    value: Optional[str], default_shard: str = DEFAULT_SHARD
) -> ParsedAccount:
    """Parse user input into shard, game name and tag line.

    :param value: Input such as ``"Player#NA1(na1)"`` or ``"Player#BR1"``
    :param default_shard: Shard used when the input has no suffix
    :raises MalformedAccountInputError: If the input does not match the grammar
    """
    if not value or not value.strip():
        raise MalformedAccountInputError(value)

    shard, account = split_shard(value, default_shard)

    if not _SHARD_PATTERN.match(shard):
        raise MalformedAccountInputError(value)

    parts = [part.strip() for part in account.split("#")]
    if len(parts) != 2:
        raise MalformedAccountInputError(value)

    game_name, tag_line = parts
    if not game_name or not tag_line:
        raise MalformedAccountInputError(value)

    return ParsedAccount(shard=shard, game_name=game_name, tag_line=tag_line)
