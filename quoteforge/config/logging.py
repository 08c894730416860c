"""
Structured logging for the quote rendering service.

Console output in development, one JSON object per line elsewhere. Client
contact details carried on quote payloads are masked before any renderer
sees them.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from quoteforge.config.settings import get_settings

# Chatty libraries held at WARNING
NOISY_LOGGERS: tuple[str, ...] = (
    "httpx",
    "httpcore",
    "uvicorn.access",
    "multipart",
)

CONTACT_FIELDS: frozenset[str] = frozenset(
    {"client_email", "client_phone", "company_email", "company_phone"}
)


def mask_contact(value: Any) -> Any:
    """Keep enough of an email or phone number to correlate, hide the rest."""
    if not isinstance(value, str) or not value:
        return value
    if "@" in value:
        local, _, domain = value.partition("@")
        return f"{local[:1]}***@{domain}"
    return f"***{value[-4:]}" if len(value) > 4 else "***"


def redact_contact_fields(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Mask client and issuer contact fields bound to a log event."""
    for key in CONTACT_FIELDS.intersection(event_dict):
        event_dict[key] = mask_contact(event_dict[key])
    return event_dict


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict["environment"] = settings.environment
    return event_dict


def configure_logging(log_level: str | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        log_level: Overrides the configured level, e.g. "DEBUG".
    """
    settings = get_settings()
    level_name = (log_level or settings.log_level).upper()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        redact_contact_fields,
        add_app_context,
    ]

    if settings.environment == "development":
        renderer: list[Processor] = [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]
    else:
        renderer = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=shared_processors + renderer,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=getattr(logging, level_name))
    logging.getLogger().setLevel(getattr(logging, level_name))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
