"""
Structured Logging - JSON logs with correlation IDs.

structlog renders every record as one JSON line carrying timestamp, level
and, inside a request, the correlation id. Records emitted through the
standard library (``logging.getLogger(__name__)``, used across the package)
are routed through the same processors by a ProcessorFormatter attached to
the ``wizybot`` logger, so both paths produce identical output.

Pattern: Structured logging for observability
Pattern: Singleton configuration (configure once at startup)
"""

import contextvars
import logging
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Generator, Optional, TextIO

import structlog
from structlog.types import EventDict, Processor

PACKAGE_LOGGER = "wizybot"

_configured: bool = False
_handler: Optional[logging.Handler] = None


# =============================================================================
# Correlation ID Context
# =============================================================================

_correlation_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "correlation_id", default=None
)


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context."""
    _correlation_id_var.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID, or None outside a request."""
    return _correlation_id_var.get()


def clear_correlation_id() -> None:
    _correlation_id_var.set(None)


@contextmanager
def correlation_id_context(correlation_id: str) -> Generator[None, None, None]:
    """
    Bind a correlation ID for the duration of a block.

    Example:
        >>> with correlation_id_context("req-12345"):
        ...     logger.info("searching catalog")
    """
    token = _correlation_id_var.set(correlation_id)
    try:
        yield
    finally:
        _correlation_id_var.reset(token)


# =============================================================================
# Processors
# =============================================================================


def add_correlation_id(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    correlation_id = get_correlation_id()
    if correlation_id is not None:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def add_timestamp(
    logger: logging.Logger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add an ISO 8601 UTC timestamp."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def rename_level(
    logger: logging.Logger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Rename log_level to level for cleaner output."""
    if "log_level" in event_dict:
        event_dict["level"] = event_dict.pop("log_level")
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.stdlib.add_log_level,
        add_timestamp,
        add_correlation_id,
        rename_level,
    ]


# =============================================================================
# Configuration
# =============================================================================


def configure_logging(
    level: str = "INFO",
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> None:
    """
    Configure structlog and the package's standard library logger.

    Called once at application startup; later calls are no-ops unless
    force=True.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Output stream (default: sys.stdout).
        force: Reconfigure even if already configured (tests).

    Example:
        >>> configure_logging(level=settings.log_level)
        >>> get_logger("wizybot.main").info("startup", port=3000)
    """
    global _configured, _handler

    if _configured and not force:
        return

    output = stream or sys.stdout
    numeric_level = _level_to_int(level)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(output)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                *_shared_processors(),
                structlog.stdlib.add_logger_name,
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(numeric_level)
    _handler = handler

    _configured = True


def reset_logging() -> None:
    """Forget the configuration state. Test utility."""
    global _configured, _handler
    if _handler is not None:
        logging.getLogger(PACKAGE_LOGGER).removeHandler(_handler)
        _handler = None
    _configured = False


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structured logger with its name bound.

    Configures logging with defaults if configure_logging() was not called.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("tool executed", tool="searchProducts")
    """
    configure_logging()
    return structlog.get_logger().bind(logger=name)


def _level_to_int(level: str) -> int:
    """Convert a level name to its logging constant (INFO if unknown)."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO
