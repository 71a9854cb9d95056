import logging
import sys

import structlog


def configure_logging(level: str = "WARNING") -> None:
    """Configure structured logging for the command-line front end."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(endpoint: str | None = None, **kwargs: object) -> structlog.BoundLogger:
    """Get a structured logger, optionally bound to an endpoint description."""
    log = structlog.get_logger()
    if endpoint:
        log = log.bind(endpoint=endpoint)
    if kwargs:
        log = log.bind(**kwargs)
    return log
