"""
Logging setup for applications embedding mathcustom.

Library modules only create module loggers; nothing is printed unless the
host application configures logging. `configure_logging` is the convenience
entry point for scripts that just want the library's records on stderr.
"""

import logging
from typing import Optional

from mathcustom.config.settings import Settings, get_settings

PACKAGE_LOGGER_NAME = "mathcustom"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Apply the configured level to the package logger and attach a stream handler.

    Calling this more than once updates the level but never adds a second
    handler.

    Args:
        settings: Settings to use. Defaults to the global settings singleton.

    Returns:
        The `mathcustom` package logger.
    """
    global _handler

    settings = settings or get_settings()
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(settings.log.level_number)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)

    return logger
