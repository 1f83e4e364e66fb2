"""
Structured logging setup using structlog.
Renders key/value lines for humans or JSON lines for log collectors.
"""

import logging
import sys
from typing import Optional

import structlog


def setup_logging(level: str = "INFO", log_format: str = "text") -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        level: Name of the minimum log level (e.g. "INFO", "DEBUG")
        log_format: "json" for JSON lines, anything else for console output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structured logger bound to the given module name."""
    return structlog.get_logger(name)
