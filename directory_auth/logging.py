"""
Structured logging for directory-auth.

Usage:
    from directory_auth.logging import configure_logging, get_logger

    configure_logging("INFO", json_output=True)
    log = get_logger(__name__)
    log.info("login_succeeded", subject=record_id)
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import structlog

# Keys whose values must never reach a log sink in clear text.
_SENSITIVE_KEYS = {"password", "secret", "jwt_secret", "token", "authorization"}


def _redact_sensitive(
    logger: Any, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Processor to mask credential and token values."""
    for key in list(event_dict.keys()):
        if key.lower() in _SENSITIVE_KEYS and isinstance(event_dict[key], str):
            event_dict[key] = "***"
    return event_dict


def configure_logging(log_level: str = "INFO", json_output: bool = True) -> None:
    """Configure structlog.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_output: If True, output JSON; if False, output human-readable
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _redact_sensitive,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a logger bound to a component name."""
    return structlog.get_logger(name)
