"""Standard library logging for third-party packages.

Agora's own code logs through logfire. uvicorn, SQLAlchemy and asyncio log
through :mod:`logging`; this routes them to stdout at a level that fits the
environment.
"""

import logging
import sys

from agora.config import Settings

# Chatty loggers held at WARNING whatever the environment
QUIET_LOGGERS = ("sqlalchemy.pool", "asyncio")


def log_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger, replacing any earlier configuration."""
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
