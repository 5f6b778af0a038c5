"""
Logging setup for applications embedding bakedassets.

Every module logs through logging.getLogger(__name__), so the whole package
sits under the "bakedassets" logger:

    bakedassets.handler   lookup traces (DEBUG), store failures (ERROR)
    bakedassets.store     baking summaries (INFO)
    bakedassets.middleware.base   pipeline assembly (DEBUG)

Libraries should not configure logging on import; call configure_logging()
from the application entry point, or configure "bakedassets" yourself.
"""

import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Configure root logging and the package logger level.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (any case).
                   Unknown names fall back to INFO.

    Returns:
        The "bakedassets" package logger.
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )

    package_logger = logging.getLogger("bakedassets")
    package_logger.setLevel(level)
    return package_logger
