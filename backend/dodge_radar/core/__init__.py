"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .exceptions import (
    ServiceException,
    ConfigurationServiceError,
    PlayerLookupError,
    MatchHistoryError,
)
from .throttle import Throttle, FixedDelayThrottle, TokenBucketThrottle
from .validation import is_empty_or_none, missing_fields, validate_nested_fields

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Exceptions
    "ServiceException",
    "ConfigurationServiceError",
    "PlayerLookupError",
    "MatchHistoryError",
    # Throttling
    "Throttle",
    "FixedDelayThrottle",
    "TokenBucketThrottle",
    # Validation
    "is_empty_or_none",
    "missing_fields",
    "validate_nested_fields",
]
