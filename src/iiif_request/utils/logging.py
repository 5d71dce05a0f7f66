"""Structured logging configuration using structlog.

Provides correlation IDs for tracing a request through parameter
resolution and configurable output formats (JSON for production,
colored console for dev).
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from iiif_request.config import SUPPORTED_LOG_FORMATS, ConfigError, settings

# Context variables for correlation IDs
_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_identifier: ContextVar[str | None] = ContextVar("identifier", default=None)


def set_correlation_context(
    request_id: str | None = None,
    identifier: str | None = None,
) -> None:
    """Set correlation IDs for the current context.

    Args:
        request_id: Unique identifier for the incoming request
        identifier: Image identifier the request addresses
    """
    if request_id is not None:
        _request_id.set(request_id)
    if identifier is not None:
        _identifier.set(identifier)


def clear_correlation_context() -> None:
    """Clear all correlation context variables."""
    _request_id.set(None)
    _identifier.set(None)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add correlation IDs to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    request_id = _request_id.get()
    identifier = _identifier.get()

    if request_id is not None:
        event_dict["request_id"] = request_id
    if identifier is not None:
        event_dict["identifier"] = identifier

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.

    Raises:
        ConfigError: If the output format is not supported.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.require_log_format()
    if log_format not in SUPPORTED_LOG_FORMATS:
        raise ConfigError("LOG_FORMAT", log_format, SUPPORTED_LOG_FORMATS)

    # Shared processors for all output formats
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_correlation_ids,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging to match
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
