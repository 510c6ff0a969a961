"""
Centralized logging configuration for the auth form client.

This module sets up structured logging with:
- Environment-based configuration (dev vs production)
- JSON formatting for production, pretty console for development
- Redaction of credentials and verification tokens
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import EventDict, Processor

from config import AppSettings

# Sensitive fields to redact from logs
REDACTED_FIELDS = {
    "password",
    "token",
    "recaptcha_token",
    "api_key",
    "Authorization",
    "Cookie",
    "secret",
    "key",
}

_RESERVED_KEYS = ("level", "event", "timestamp", "logger")


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Example:
        >>> log = get_logger(__name__)
        >>> log.info("fallback_captcha_activated", problem="3 - 4")
    """
    return structlog.get_logger(name)


def add_timestamp(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ISO format timestamp to event dict."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Redact sensitive fields from logs."""
    for key in list(event_dict.keys()):
        if key.lower() in REDACTED_FIELDS or any(
            sensitive in key.lower()
            for sensitive in ["password", "token", "key", "secret"]
        ):
            if key not in _RESERVED_KEYS:
                event_dict[key] = "***REDACTED***"
    return event_dict


def configure_structlog(log_format: str = "console") -> None:
    """
    Configure structlog with appropriate processors for the environment.

    Production: JSON formatting for easy parsing
    Development: Pretty console formatting with colors
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_fields,
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            pad_event=15,
            sort_keys=False,
        )

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_stdlib_logging(log_level: str = "INFO") -> None:
    """Route stdlib logging to stdout at the configured level."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    # Reduce noise from the HTTP stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def resolve_log_format(settings: AppSettings) -> str:
    """Explicit LOG_FORMAT wins; otherwise JSON in production, console elsewhere."""
    if settings.logging.log_format:
        return settings.logging.log_format
    return "json" if settings.is_production else "console"


def setup_logging(settings: Optional[AppSettings] = None) -> None:
    """
    Initialize logging for the client.

    Should be called once by the embedding application before the form is
    wired up.
    """
    settings = settings or AppSettings()
    log_format = resolve_log_format(settings)
    configure_stdlib_logging(settings.logging.log_level)
    configure_structlog(log_format)

    get_logger(__name__).info(
        "logging_initialized",
        env=settings.env,
        log_level=settings.logging.log_level,
        log_format=log_format,
    )
