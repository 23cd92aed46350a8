"""Riot API HTTP client with error normalization and explicit credentials."""

import asyncio
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional, Any, List, Union

import httpx
import structlog
from pydantic import ValidationError

from .errors import (
    MissingAPIKeyError,
    RemoteLookupError,
    ResponseShapeError,
    error_for_status,
)
from .models import AccountDTO, LeagueEntryDTO
from .endpoints import RiotAPIEndpoints
from .constants import Region, Platform

logger = structlog.get_logger(__name__)


def parse_retry_after(value: Optional[str]) -> Optional[float]:
    """Seconds from a ``Retry-After`` header, either delta-seconds or an HTTP-date."""
    if not value:
        return None
    try:
        return max(float(value), 0.0)
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max((when - datetime.now(timezone.utc)).total_seconds(), 0.0)


class RiotAPIClient:
    """Riot API client covering the account-v1 and league-v4 lookups."""

    def __init__(
        self,
        api_key: str,
        timeout: float = 10.0,
        max_retries: int = 0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Riot API client.

        Args:
            api_key: Riot API key, sent with every request
            timeout: Per-request timeout in seconds
            max_retries: Retries for 429/5xx/transport failures (0 disables)
            transport: Optional httpx transport, used by tests
        """
        self.api_key = api_key
        self.timeout = timeout
        self.max_retries = max_retries
        self.endpoints = RiotAPIEndpoints()
        self._transport = transport

        # HTTP session
        self.session: Optional[httpx.AsyncClient] = None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    headers = {
                        "Accept": "application/json",
                        "User-Agent": "EloAPI/1.0",
                    }

                    self.session = httpx.AsyncClient(
                        headers=headers,
                        timeout=httpx.Timeout(self.timeout),
                        transport=self._transport,
                    )

                    logger.debug(
                        "Riot API client session started",
                        api_key_prefix="[REDACTED]" if self.api_key else "None",
                    )

    async def close(self) -> None:
        """Close the httpx session."""
        if self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.debug("Riot API client session closed")

    def _retry_delay(self, response: httpx.Response, attempt: int) -> Optional[float]:
        """Seconds to wait before retrying, or None when the status is final."""
        if attempt >= self.max_retries:
            return None
        if response.status_code == 429:
            delay = parse_retry_after(response.headers.get("Retry-After"))
            return 1.0 if delay is None else delay
        if response.status_code >= 500:
            return float(2**attempt)
        return None

    def _status_error(self, response: httpx.Response, url: str) -> RemoteLookupError:
        """Build the error matching a non-success response."""
        status_text = response.reason_phrase or str(response.status_code)
        error_cls = error_for_status(response.status_code)
        retry_after = parse_retry_after(response.headers.get("Retry-After"))

        logger.warning(
            "Riot API request failed",
            url=url,
            status_code=response.status_code,
            status_text=status_text,
        )

        return error_cls(
            f"Failed to fetch account data: {status_text}",
            status_code=response.status_code,
            status_text=status_text,
            retry_after=retry_after,
        )

    async def _make_request(self, url: str) -> Any:
        """
        Make a GET request and return the decoded JSON body.

        Raises:
            MissingAPIKeyError: If no API key is configured
            RemoteLookupError: For non-success responses, transport failures
                and undecodable bodies
        """
        if not self.api_key:
            logger.error("Riot API key not configured", url=url)
            raise MissingAPIKeyError()

        await self.start_session()

        if self.session is None:
            raise RemoteLookupError("Session not initialized")

        params = {"api_key": self.api_key}
        last_error: Optional[Exception] = None

        for attempt in range(self.max_retries + 1):
            try:
                response = await self.session.get(url, params=params)
            except httpx.HTTPError as e:
                last_error = e
                logger.warning(
                    "Riot API transport error",
                    url=url,
                    attempt=attempt,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                if attempt < self.max_retries:
                    await asyncio.sleep(2**attempt)
                continue

            if response.is_success:
                try:
                    return response.json()
                except ValueError as e:
                    raise ResponseShapeError(
                        "Riot API returned a non-JSON body",
                        status_code=response.status_code,
                        status_text=response.reason_phrase,
                    ) from e

            delay = self._retry_delay(response, attempt)
            if delay is None:
                raise self._status_error(response, url)
            await asyncio.sleep(delay)

        raise RemoteLookupError(f"Request failed: {str(last_error)}") from last_error

    @staticmethod
    def _parse(model: type, payload: Any, url: str) -> Any:
        """Validate a payload against a DTO model."""
        if not isinstance(payload, dict):
            raise ResponseShapeError(
                f"Expected object response, got {type(payload).__name__}"
            )
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.warning(
                "Riot API response failed validation",
                url=url,
                model=model.__name__,
                errors=e.error_count(),
            )
            raise ResponseShapeError(
                f"Unexpected {model.__name__} response shape"
            ) from e

    # Account endpoints
    async def get_account_by_riot_id(
        self, game_name: str, tag_line: str, region: Union[Region, str]
    ) -> AccountDTO:
        """Get account by Riot ID (gameName#tagLine)."""
        url = self.endpoints.account_by_riot_id(game_name, tag_line, region)
        response = await self._make_request(url)
        return self._parse(AccountDTO, response, url)

    async def get_account_by_puuid(
        self, puuid: str, region: Union[Region, str]
    ) -> AccountDTO:
        """Get account by PUUID."""
        url = self.endpoints.account_by_puuid(puuid, region)
        response = await self._make_request(url)
        return self._parse(AccountDTO, response, url)

    # League endpoints
    async def get_league_entries_by_puuid(
        self, puuid: str, platform: Union[Platform, str]
    ) -> List[LeagueEntryDTO]:
        """Get league entries by PUUID."""
        url = self.endpoints.league_entries_by_puuid(puuid, platform)
        response = await self._make_request(url)

        # API returns a list of league entries
        if not isinstance(response, list):
            raise ResponseShapeError(
                f"Expected list response for league entries, got {type(response).__name__}"
            )

        return [self._parse(LeagueEntryDTO, entry, url) for entry in response]
