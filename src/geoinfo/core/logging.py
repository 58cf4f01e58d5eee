"""Structured logging setup."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def configure_logging(
    level: str = "INFO",
    structured: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog on top of the standard library logging.

    Args:
        level: Minimum log level name
        structured: Emit JSON lines instead of console output
        stream: Where log lines go, stdout when omitted
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=not _is_test_environment()))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )
