"""Structured logging configuration for seedcheck."""

import logging
from typing import Optional, TextIO

import structlog

_log_stream: Optional[TextIO] = None


def configure_logging(
    level: str = "WARNING",
    json_format: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """Configure structured logging for the application.

    Records go to ``sys.stdout`` unless ``log_file`` is given. Loggers are not
    cached, so the stream is resolved again for every record.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Whether to output logs in JSON format
        log_file: Optional file path for log output, appended to. A file
            opened by a previous call is closed.
    """
    global _log_stream
    numeric_level = getattr(logging, level.upper())

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    if _log_stream is not None:
        _log_stream.close()
        _log_stream = None

    if log_file:
        _log_stream = open(log_file, "a", encoding="utf-8")
        logger_factory = structlog.PrintLoggerFactory(file=_log_stream)
    else:
        logger_factory = structlog.PrintLoggerFactory()

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically module name)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
