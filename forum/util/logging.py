"""Standard-library logging setup.

Application events go through logfire. This only shapes what uvicorn,
SQLAlchemy and asyncpg print through ``logging``.
"""

import logging
import sys

from forum.config import Settings

# Loggers that are too chatty at the application level
_QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,  # SQL echo is the engine's echo flag
    "asyncpg": logging.WARNING,
}


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(max(level, quiet_level))

    # Request lines are already traced by the FastAPI instrumentation
    if settings.environment == "production":
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
