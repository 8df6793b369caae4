"""Structured logging configuration using structlog."""

import logging
import sys

import structlog
from structlog.types import Processor

from dummy_payment_gateway.config import settings


def configure_logging(
    log_level: str | None = None,
    format_as_json: bool | None = None,
) -> None:
    """
    Configure structured logging for test runs that want gateway output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            defaults to settings.log_level
        format_as_json: If True, output logs as JSON; otherwise use console
            format. Defaults to settings.log_format_json
    """
    if log_level is None:
        log_level = settings.log_level
    if format_as_json is None:
        format_as_json = settings.log_format_json

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    if format_as_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
