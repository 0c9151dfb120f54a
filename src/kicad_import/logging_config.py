"""Logging infrastructure for KiCad board import.

Provides configurable levels and tags every record with the source being
parsed (a file path, or ``<string>`` for in-memory input).
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

DEFAULT_SOURCE = "<string>"

# Source tracking so log lines from nested builders can be tied to one file
source_ctx: ContextVar[str | None] = ContextVar("source", default=None)


def get_source() -> str | None:
    """Get the source currently being parsed, if any."""
    return source_ctx.get()


@contextmanager
def log_source(source: str) -> Iterator[None]:
    """Tag every log record emitted inside the block with ``source``."""
    token = source_ctx.set(source)
    try:
        yield
    finally:
        source_ctx.reset(token)


class _SourceFilter(logging.Filter):
    """Guarantee ``%(source)s`` resolves for records from plain loggers."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "source"):
            record.source = get_source() or DEFAULT_SOURCE
        return True


def setup_logging(
    level: int | str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure logging for the application.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO', 'ERROR').
               Defaults to LOGGING_LEVEL env var or 'INFO'.
        format_string: Custom log format string. Defaults to a structured format.

    Returns:
        The root logger configured for the application.
    """
    if level is None:
        level = os.environ.get("LOGGING_LEVEL", "INFO")

    if format_string is None:
        format_string = "%(asctime)s [%(levelname)s] [%(name)s] [source=%(source)s] %(message)s"

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    # stdout carries the MCP stdio transport
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.addFilter(_SourceFilter())
    console_handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(console_handler)

    # FastMCP transport chatter
    logging.getLogger("asyncio").setLevel("WARNING")
    logging.getLogger("asyncio").propagate = False

    return logger


class SourceLoggerAdapter(logging.LoggerAdapter[Any]):
    """Logger adapter that adds the current parse source to log records."""

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        extra = kwargs.get("extra")
        if extra is None:
            extra = {}
        extra.setdefault("source", get_source() or DEFAULT_SOURCE)
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> SourceLoggerAdapter:
    """Get a logger for the given module name.

    Args:
        name: The module name (e.g., __name__).

    Returns:
        A logger that tags records with the current parse source.
    """
    logger = logging.getLogger(name)
    return SourceLoggerAdapter(logger, {})


def create_logger(name: str) -> SourceLoggerAdapter:
    """Create and return a logger for a module (typically ``__name__``)."""
    return get_logger(name)
