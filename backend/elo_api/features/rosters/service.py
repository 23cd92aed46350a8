"""Roster management service and chat command parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog

if TYPE_CHECKING:
    from elo_api.features.accounts.service import AccountResolver
    from .repository import RosterRepositoryInterface

logger = structlog.get_logger(__name__)

ADD_COMMANDS = frozenset({"set", "add"})
REMOVE_COMMANDS = frozenset({"remove", "del", "delete"})


def parse_command(command: Optional[str]) -> tuple[str, str]:
    """Split a chat command into ``(subcommand, arguments)``.

    ``+`` is read as a space and the subcommand is lower-cased. Inner
    spacing of the arguments is kept as typed.
    """
    if not command:
        return "", ""
    subcommand, _, args = command.replace("+", " ").strip().partition(" ")
    return subcommand.lower(), args.strip()


class RosterService:
    """Add and remove accounts from a channel roster."""

    def __init__(
        self,
        repository: "RosterRepositoryInterface",
        resolver: "AccountResolver",
    ):
        """
        :param repository: Roster repository
        :param resolver: Account resolver
        """
        self.repository = repository
        self.resolver = resolver

    async def add_account(self, identifier: str, value: str) -> str:
        """Resolve an account and add it to the roster.

        :returns: Confirmation message
        :raises MalformedAccountInputError: If the input is malformed
        :raises RemoteLookupError: If the Riot API lookup fails
        """
        account = await self.resolver.resolve_account(value)
        await self.repository.add_reference(identifier, account.reference)
        return f"A conta {account.label} foi adicionada!"

    async def remove_account(self, identifier: str, value: str) -> str:
        """Resolve an account and remove it from the roster.

        Removing an account that is not in the roster still succeeds.
        """
        account = await self.resolver.resolve_account(value)
        await self.repository.remove_reference(identifier, account.reference)
        return f"A conta {account.label} foi removida!"
