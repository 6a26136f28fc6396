"""Logging setup using structlog."""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from datumsformat.core.config import get_settings

LIBRARY_LOGGER = "datumsformat"


def setup_logging(debug: bool | None = None, log_level: str | None = None) -> None:
    """
    Configure structlog for the booking helpers.

    Debug mode renders colored console lines, otherwise one JSON object per
    event is written to stderr. Arguments left as None fall back to the
    settings.

    Args:
        debug: Enable pretty console output
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    settings = get_settings()
    if debug is None:
        debug = settings.debug
    if log_level is None:
        log_level = settings.log_level

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    # PrintLoggerFactory has no logger name, so no add_logger_name here
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        renderers: list[Processor] = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]

    structlog.configure(
        processors=shared_processors + renderers,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
    )


def configure_library_defaults() -> None:
    """
    Route events to stdlib logging until setup_logging() is called.

    Events end up wherever the application configured the standard
    logging module; without any handlers they are dropped instead of being
    printed. An existing structlog configuration is left untouched.
    """
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in library_logger.handlers):
        library_logger.addHandler(logging.NullHandler())

    if structlog.is_configured():
        return

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def reset_logging() -> None:
    """Restore the library logging defaults (useful for testing)."""
    structlog.reset_defaults()
    configure_library_defaults()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger instance."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables (e.g. a chat session id) to the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


configure_library_defaults()
