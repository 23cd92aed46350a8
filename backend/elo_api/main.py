"""Main FastAPI application for the Elo API."""

from contextlib import asynccontextmanager
from typing import Dict, Any

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
import structlog

from elo_api import __version__
from elo_api.core import (
    MalformedAccountInputError,
    get_db_manager,
    get_global_settings,
)
from elo_api.core.dependencies import get_riot_cache
from elo_api.core.logging import setup_logging
from elo_api.core.riot_api.errors import MissingAPIKeyError, RemoteLookupError
from elo_api.features.rosters import rosters_router
from elo_api.init_db import init_db

LIVENESS_MESSAGE = "Elo API está ON!"

settings = get_global_settings()
setup_logging(settings.log_level)
logger = structlog.get_logger(__name__)


def _validate_api_key_configuration() -> None:
    """Log the Riot API key configuration status."""
    if not settings.riot_api_key:
        logger.warning(
            "RIOT_API_KEY not configured, rank lookups will fail",
            hint="Get your key from https://developer.riotgames.com",
        )
    elif settings.riot_api_key.startswith("RGAPI-"):
        logger.info("Riot API key configured")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting up Elo API application")
    _validate_api_key_configuration()
    if settings.create_tables_on_startup:
        await init_db()
    yield
    logger.info("Shutting down Elo API application")
    await get_db_manager().close()


app = FastAPI(
    title="Elo API",
    description="Solo queue rank summaries for streamer account rosters.",
    version=__version__,
    lifespan=lifespan,
    debug=settings.debug,
)


@app.exception_handler(MalformedAccountInputError)
async def malformed_account_handler(
    request: Request, exc: MalformedAccountInputError
) -> PlainTextResponse:
    logger.info("Malformed account input", path=request.url.path, **exc.context)
    return PlainTextResponse(exc.message, status_code=400)


@app.exception_handler(RemoteLookupError)
async def remote_lookup_handler(
    request: Request, exc: RemoteLookupError
) -> PlainTextResponse:
    if isinstance(exc, MissingAPIKeyError):
        status_code = 503
    elif exc.is_not_found():
        status_code = 404
    elif exc.is_rate_limit():
        status_code = 429
    else:
        status_code = 502

    logger.warning(
        "Riot API lookup failed",
        path=request.url.path,
        status_code=exc.status_code,
        status_text=exc.status_text,
        error_type=type(exc).__name__,
    )
    headers = {"Retry-After": str(int(exc.retry_after))} if exc.retry_after else None
    return PlainTextResponse(exc.message, status_code=status_code, headers=headers)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> PlainTextResponse:
    logger.error(
        "Database error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return PlainTextResponse("Database error", status_code=500)


@app.get("/", response_class=PlainTextResponse, tags=["health"])
async def liveness() -> str:
    """Liveness probe used by chat bot integrations."""
    return LIVENESS_MESSAGE


@app.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint.

    Returns the application version and the shared cache statistics. A
    channel named ``health`` is served through its command route, for
    example ``/health/elo``.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "debug": settings.debug,
        "cache": get_riot_cache().get_stats(),
    }


# Catch-all channel routes go last so they do not shadow the routes above
app.include_router(rosters_router)
