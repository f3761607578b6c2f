"""Structured logging setup and request-id context."""

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Optional

import structlog

_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def configure_logging(log_level: str = "INFO", debug: bool = False) -> None:
    """Configure structlog for the process.

    Debug mode renders human-readable console output, otherwise one JSON
    object per line.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    renderer = (
        structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a lazy logger that tags every event with the module name.

    The proxy resolves the configuration on first use, so module-level
    loggers pick up whatever ``configure_logging`` installed at startup.
    """
    return structlog.get_logger(name, logger_name=name)


def new_request_id() -> str:
    """Generate a new request id."""
    return uuid.uuid4().hex


def set_request_id(request_id: Optional[str]) -> None:
    """Set the request id for the current context and bind it to log entries."""
    _request_id.set(request_id)
    structlog.contextvars.clear_contextvars()
    if request_id:
        structlog.contextvars.bind_contextvars(request_id=request_id)


def get_request_id() -> Optional[str]:
    """Get the request id of the current context, if any."""
    return _request_id.get()
