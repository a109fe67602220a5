"""Typed failures of Riot API calls.

Callers branch on the class; ``status_code`` is ``None`` when the request
never produced an HTTP response (missing key or network failure).
"""

from typing import Any, Dict, Optional, Type


class RiotAPIError(Exception):
    """Base exception for failed Riot API calls."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        retry_after: Optional[float] = None,
    ) -> None:
        """
        Args:
            message: Error message
            status_code: Upstream HTTP status, if a response was received
            response_data: Decoded error body, if any
            retry_after: ``Retry-After`` seconds sent with a 429
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data: Dict[str, Any] = response_data or {}
        self.retry_after = retry_after

    def __str__(self) -> str:
        if self.status_code == 429 and self.retry_after:
            return f"Riot API Error 429: {self.message} (retry after {self.retry_after}s)"
        if self.status_code:
            return f"Riot API Error {self.status_code}: {self.message}"
        return f"Riot API Error: {self.message}"


class ConfigurationError(RiotAPIError):
    """No API key is configured; the request was never sent."""


class BadRequestError(RiotAPIError):
    """400."""


class AuthenticationError(RiotAPIError):
    """401, the key is invalid or expired."""


class ForbiddenError(RiotAPIError):
    """403, blocked by key scope or by the player's privacy settings."""


class NotFoundError(RiotAPIError):
    """404. For the spectator endpoint this means "not in a game"."""


class RateLimitError(RiotAPIError):
    """429."""


class ServiceUnavailableError(RiotAPIError):
    """503, or a network-level failure when ``status_code`` is ``None``."""


ERRORS_BY_STATUS: Dict[int, Type[RiotAPIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
    503: ServiceUnavailableError,
}

ERROR_MESSAGES: Dict[int, str] = {
    400: "Invalid request parameters",
    401: "Invalid API key",
    403: "Access forbidden",
    404: "Resource not found",
    429: "Rate limit exceeded",
    503: "Service unavailable",
}
