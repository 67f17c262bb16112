"""Structured logging for analysis runs and market data calls.

Production output is one JSON object per line. Development output goes
through structlog's console renderer.
"""
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog


def configure_structured_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON lines when True, human-readable console output otherwise
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    # Indicator and provider modules log through the stdlib
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stdout, level=level)

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


@contextmanager
def token_log_context(mint: str, symbol: str | None = None) -> Iterator[None]:
    """Bind the token being analyzed to every structlog event in the block."""
    with structlog.contextvars.bound_contextvars(mint=mint, symbol=symbol):
        yield


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the module)
    """
    return structlog.get_logger(name)
