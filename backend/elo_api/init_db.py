"""Database initialization using SQLAlchemy create_all().

Creates the roster tables; safe to run repeatedly.
"""

import asyncio
import sys
from typing import Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from elo_api.core import Base, get_db_manager, get_global_settings
from elo_api.core.logging import setup_logging

# Register ORM models on Base.metadata
from elo_api.features.rosters import orm_models  # noqa: F401

logger = structlog.get_logger(__name__)


async def init_db(engine: Optional[AsyncEngine] = None) -> None:
    """Create all tables defined in the ORM models.

    :param engine: Engine to use, defaults to the global database manager's
    :raises SQLAlchemyError: If connection or table creation fails
    """
    engine = engine or get_db_manager().engine

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as e:
        logger.error(
            "Database initialization failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise

    logger.info("Database tables ready", tables=sorted(Base.metadata.tables))


async def _main() -> None:
    try:
        await init_db()
    finally:
        await get_db_manager().close()


if __name__ == "__main__":
    setup_logging(get_global_settings().log_level)
    try:
        asyncio.run(_main())
    except SQLAlchemyError:
        sys.exit(1)
