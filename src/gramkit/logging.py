"""structlog loggers backed by stdlib logging.

Events go to the stdlib logger of the same name, so nothing below WARNING
is printed until the application (or :func:`setup_logging`) configures
handlers, and nothing is ever written to stdout by default.
"""

from __future__ import annotations

import logging
import logging.config
import sys
from typing import Any, Literal

import structlog

__all__ = ["get_logger", "setup_logging"]

type LogFormat = Literal["console", "json"]

_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def setup_logging(*, level: str = "info", fmt: LogFormat = "console") -> None:
    normalized = level.lower()
    if normalized not in _LEVELS:
        allowed = ", ".join(sorted(_LEVELS))
        raise ValueError(f"Invalid log level {level!r}. Expected one of: {allowed}")
    renderer: Any
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"plain": {"format": "%(message)s"}},
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "plain",
                    "stream": "ext://sys.stderr",
                }
            },
            "root": {"level": _LEVELS[normalized], "handlers": ["stderr"]},
        }
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    # Bound to stdlib regardless of the global structlog logger factory;
    # processors still come from structlog's current configuration.
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
