"""Stdlib logging setup for third-party libraries.

Our own events go through logfire; uvicorn, SQLAlchemy and httpx still log
through the standard library.
"""

import logging
import sys

from forum.config import Settings

# Libraries that are noisy at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Configure root logging from settings.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # SQL echo only in debug
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
