"""Channel endpoints: rank summary and roster commands.

Responses are plain text so chat bots can relay them verbatim. Errors are
converted to responses by the exception handlers registered in ``main``.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
import structlog

from elo_api.features.ranks.dependencies import RankAggregatorDep
from .dependencies import RosterServiceDep
from .service import ADD_COMMANDS, REMOVE_COMMANDS, parse_command

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["rosters"], default_response_class=PlainTextResponse)


@router.get("/{identifier}")
async def get_rank_summary(identifier: str, aggregator: RankAggregatorDep) -> str:
    """Rank summary of every account registered for ``identifier``."""
    return await aggregator.render_rank_summary(identifier)


@router.get("/{identifier}/{command}")
async def run_command(
    identifier: str,
    command: str,
    aggregator: RankAggregatorDep,
    roster_service: RosterServiceDep,
) -> str:
    """
    Run a chat command for ``identifier``.

    ``set``/``add`` and ``remove``/``del``/``delete`` followed by an
    account string edit the roster; anything else renders the summary.
    """
    subcommand, args = parse_command(command)

    if args and subcommand in ADD_COMMANDS:
        logger.info("roster_command", identifier=identifier, command=subcommand)
        return await roster_service.add_account(identifier, args)

    if args and subcommand in REMOVE_COMMANDS:
        logger.info("roster_command", identifier=identifier, command=subcommand)
        return await roster_service.remove_account(identifier, args)

    return await aggregator.render_rank_summary(identifier)
