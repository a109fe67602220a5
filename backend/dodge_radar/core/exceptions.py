"""
Service layer custom exceptions.

Routers translate these into HTTP responses; the status resolver never lets
them escape (it records an ERROR status instead).
"""

from typing import Any, Dict, Optional


class ServiceException(Exception):
    """Base exception for all service layer errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.service and self.operation:
            return f"[{self.service}.{self.operation}] {self.message}"
        return self.message


class ConfigurationServiceError(ServiceException):
    """Raised when the Riot API key is not configured."""

    status_code = 500


class PlayerLookupError(ServiceException):
    """Raised when a player or its match history cannot be found."""

    status_code = 404


class MatchHistoryError(ServiceException):
    """Raised when a match record could not be retrieved."""

    status_code = 500
