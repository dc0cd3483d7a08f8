"""Configures structlog to emit one JSON object per line on stderr."""

import logging
import sys

import structlog


def configure_logging(debug: bool = False) -> None:
    """Configure structlog for the CLI process.

    Events at INFO and above are rendered as JSON lines on stderr; debug mode
    lowers the threshold to DEBUG.
    """
    level = logging.DEBUG if debug else logging.INFO
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
