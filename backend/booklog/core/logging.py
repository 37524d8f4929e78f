"""
Logging Configuration
Console (and optional file) logging for the API, scripts and client
"""

import logging
import sys
from typing import List, Optional

from booklog.config import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "urllib3": logging.WARNING,
}


def setup_logging(level: Optional[str] = None) -> int:
    """
    Configure the root logger once per process

    Args:
        level: Level name overriding LOG_LEVEL (e.g. "DEBUG" from a script)

    Returns:
        The numeric level applied to the booklog loggers
    """
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE:
        handlers.append(logging.FileHandler(settings.LOG_FILE))

    # force=True so a second call (reload, tests) replaces handlers instead of stacking them
    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers, force=True)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)

    # SQL statements are only logged when DATABASE_ECHO is on
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DATABASE_ECHO else logging.WARNING
    )
    logging.getLogger("booklog").setLevel(log_level)

    logging.getLogger(__name__).info(
        f"Logging configured at {level_name}"
        + (f", writing to {settings.LOG_FILE}" if settings.LOG_FILE else "")
    )
    return log_level
