"""Custom error classes for the Riot API client."""

from typing import Dict, Optional


class RemoteLookupError(Exception):
    """Base exception for failed Riot API lookups with status tracking."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        status_text: Optional[str] = None,
        retry_after: Optional[float] = None,
    ) -> None:
        """
        Initialize RemoteLookupError.

        Args:
            message: Error message
            status_code: HTTP status code (400, 401, 403, 404, 429, 503, etc.)
            status_text: HTTP reason phrase returned by the remote service
            retry_after: Seconds to wait before retry (for 429 errors)
        """
        super().__init__(message)
        self.status_code: Optional[int] = status_code
        self.status_text: Optional[str] = status_text
        self.retry_after: Optional[float] = retry_after
        self.message: str = message

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code == 429 and self.retry_after:
            return f"Rate Limit Error {self.status_code}: {self.message} (Retry after: {self.retry_after}s)"
        if self.status_code:
            return f"Riot API Error {self.status_code}: {self.message}"
        return f"Riot API Error: {self.message}"

    def is_rate_limit(self) -> bool:
        """Check if this is a rate limit error (429)."""
        return self.status_code == 429

    def is_not_found(self) -> bool:
        """Check if this is a not found error (404)."""
        return self.status_code == 404

    def is_auth_error(self) -> bool:
        """Check if this is an authentication/authorization error (401, 403)."""
        return self.status_code in (401, 403)


class BadRequestError(RemoteLookupError):
    """Bad request (400) - invalid parameters."""

    pass


class AuthenticationError(RemoteLookupError):
    """Authentication error (401) - invalid or expired API key."""

    pass


class MissingAPIKeyError(AuthenticationError):
    """No API key configured; raised before any request is sent."""

    def __init__(self, message: str = "Riot API key not configured") -> None:
        super().__init__(message)


class ForbiddenError(RemoteLookupError):
    """Forbidden error (403) - key rejected or lacks permission."""

    pass


class NotFoundError(RemoteLookupError):
    """Not found error (404) - resource doesn't exist."""

    pass


class RateLimitError(RemoteLookupError):
    """Rate limit error (429) - can be retried after cooldown."""

    pass


class ServiceUnavailableError(RemoteLookupError):
    """Server error (5xx) - Riot servers down or failing."""

    pass


class ResponseShapeError(RemoteLookupError):
    """Response body did not match the expected schema."""

    pass


STATUS_ERRORS: Dict[int, type[RemoteLookupError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
}


def error_for_status(status: int) -> type[RemoteLookupError]:
    """Pick the error class matching an HTTP status code."""
    if status >= 500:
        return ServiceUnavailableError
    return STATUS_ERRORS.get(status, RemoteLookupError)
