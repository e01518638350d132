"""
Exception hierarchy for the Hotel Mania API client.

Transport-level errors stay below the facades; facades only ever raise
NormalizedError.
"""

from datetime import UTC, datetime
from typing import Any


class HotelClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(HotelClientError):
    """Raised when client configuration is missing or invalid."""


class ValidationError(HotelClientError):
    """Raised when caller input is rejected before any request is made."""


class TransportError(HotelClientError):
    """Base class for failures reported by the HTTP transport."""

    status_code: int | None = None
    response_data: Any = None


class NetworkError(TransportError):
    """The request never produced a response (DNS, connect, reset...)."""


class RequestTimeoutError(NetworkError):
    """The request exceeded the transport timeout."""


class HTTPStatusError(TransportError):
    """The server answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        response_data: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code
        self.response_data = response_data


class SessionExpiredError(HotelClientError):
    """The stored credential was rejected and the session has been cleared."""

    status_code = 401


class NormalizedError(HotelClientError):
    """
    The single failure shape exposed by the service facades.

    Attributes:
        message: Human-readable message, never empty
        status_code: HTTP status when the failure came from a response
        context: Facade operation label, e.g. ``rooms.getAllRooms``
        timestamp: ISO-8601 UTC time the error was normalized
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: str = "",
        timestamp: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.context = context
        self.timestamp = timestamp or datetime.now(UTC).isoformat()

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "status": self.status_code,
            "context": self.context,
            "timestamp": self.timestamp,
        }
