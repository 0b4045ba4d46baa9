"""Logging configuration using structlog."""

import logging
import sys

import structlog


def configure_logging(log_level: str = "INFO", debug: bool = False) -> None:
    """Configure structlog for the application.

    Logs go to stderr so stdout only carries command output.
    """
    level = getattr(logging, log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            # JSON lines on stderr for the CLI, colored console output with DEBUG=true
            structlog.dev.ConsoleRenderer()
            if debug
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Also configure standard logging for third-party libraries (httpx)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
