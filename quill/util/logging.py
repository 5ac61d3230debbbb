"""Standard library logging setup.

Request-path code logs through logfire spans. The in-process publish
scheduler runs outside any request and uses plain ``logging`` loggers under
``quill``; those records are forwarded to logfire as well, so a failing
publish job shows up next to the request that scheduled it.
"""

import logging
import sys

import logfire

from quill.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers that are too chatty below WARNING
QUIET_LOGGERS = ("asyncpg", "sqlalchemy.engine", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure console logging and forward ``quill`` records to logfire.

    Args:
        settings: Application settings; ``debug`` selects DEBUG over INFO
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    app_logger = logging.getLogger("quill")
    app_logger.setLevel(level)
    if not any(isinstance(h, logfire.LogfireLoggingHandler) for h in app_logger.handlers):
        app_logger.addHandler(logfire.LogfireLoggingHandler())

    app_logger.info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
