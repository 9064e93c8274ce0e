from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from minitools.config.schema import LoggingConfig

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(config: LoggingConfig) -> None:
    """
    Route stdlib logging and structlog to stderr at the configured level.

    Quiz prompts own stdout, so nothing here ever writes there. The uvicorn loggers
    follow the same level so `serve` output stays consistent with the rest of the CLI.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(message)s",
    )
    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if config.json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def get_logger(name: Optional[str] = None):
    """Return a structlog logger bound to the global configuration."""
    return structlog.get_logger(name)
