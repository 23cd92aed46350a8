"""
Service layer custom exceptions.

Remote failures live in ``core.riot_api.errors``; the exceptions here cover
user input problems.
"""

from typing import Any, Dict, Optional


class ServiceException(Exception):
    """Base exception for all service layer errors."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.context = context or {}

    def __str__(self) -> str:
        if self.service and self.operation:
            return f"[{self.service}.{self.operation}] {self.message}"
        return self.message


ACCOUNT_FORMAT_HINT = "Use o formato GameName#Tag para adicionar uma conta."


class MalformedAccountInputError(ServiceException):
    """Raised when an account string does not match ``Name#Tag(shard)``.

    The message is user-facing and is returned verbatim to the caller.
    """

    def __init__(
        self,
        value: Optional[str] = None,
        message: str = ACCOUNT_FORMAT_HINT,
    ):
        super().__init__(
            message=message,
            service="AccountResolver",
            operation="parse_account_string",
            context={"value": value} if value is not None else None,
        )

    def __str__(self) -> str:
        return self.message
