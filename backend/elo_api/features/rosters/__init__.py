"""Rosters feature module.

Stores which accounts belong to each channel identifier and exposes the
chat-facing endpoints.
"""

from .router import router as rosters_router
from .service import RosterService, parse_command
from .repository import RosterRepositoryInterface, SQLAlchemyRosterRepository
from .orm_models import RosterORM, RosterAccountORM

__all__ = [
    "rosters_router",
    "RosterService",
    "parse_command",
    "RosterRepositoryInterface",
    "SQLAlchemyRosterRepository",
    "RosterORM",
    "RosterAccountORM",
]
