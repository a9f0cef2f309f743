"""
Logging configuration using structlog for structured, JSON-based logging.

Logs go to standard error so they never mix with command output on standard
output. The default level is WARNING; raise it with ``--log-level DEBUG`` or
``ATM_LOG_LEVEL=DEBUG`` to see every external command atm runs.
"""

import logging
import sys
from typing import Any

import structlog


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(log_level: str = "WARNING") -> None:
    """Configure structured logging with JSON output.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

