"""Logging configuration using structlog.

Every module logs through ``structlog.get_logger(__name__)`` with key=value
context. Output is JSON, or a console renderer when running in debug mode.
"""

import logging
from typing import Any, MutableMapping

import structlog
from structlog import contextvars as structlog_contextvars

# Event keys that may carry the Riot credential
SENSITIVE_KEYS = frozenset({"api_key", "riot_api_key", "x-riot-token", "headers"})


def redact_secrets(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Replace credential-bearing values with a marker."""
    for key in list(event_dict):
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = "[REDACTED]"
    return event_dict


def setup_logging(log_level: str = "INFO", debug: bool = False) -> None:
    """
    Configure stdlib logging and structlog.

    :param log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :param debug: Render human-readable console output instead of JSON
    """
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    renderer: Any = (
        structlog.dev.ConsoleRenderer()
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog_contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            redact_secrets,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
