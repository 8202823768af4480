"""
Structured logging for smart_emr.

Library loggers wrap standard library loggers, so events follow stdlib logging
and stay silent until the application adds handlers or calls
configure_logging(). Access tokens, launch codes and patient identifiers are
never put in an event.
"""

import logging
import sys
from collections.abc import Callable

import structlog

from .settings import get_settings

# Third-party loggers that are too chatty at INFO
SUPPRESSED_LOGGERS = {
    "urllib3": "WARNING",
    "requests": "WARNING",
}


def configure_logging(level: str | None = None, json_format: bool | None = None) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR); defaults to SMART_EMR_LOG_LEVEL
        json_format: If True, output JSON logs; otherwise, use console format.
            Defaults to SMART_EMR_LOG_JSON.
    """
    settings = get_settings()
    level = level or settings.log_level
    if json_format is None:
        json_format = settings.log_json

    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[Callable] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_format:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    for logger_name, logger_level in SUPPRESSED_LOGGERS.items():
        logging.getLogger(logger_name).setLevel(getattr(logging, logger_level))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by logging.getLogger(name), usually with name=__name__."""
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
