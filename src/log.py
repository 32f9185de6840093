"""Log utilities."""

import logging
import os

from rich.logging import RichHandler

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"


def get_logger(name: str) -> logging.Logger:
    """Retrieve logger with the provided name.

    The level is taken from the LOG_LEVEL environment variable and defaults
    to DEBUG.
    """
    logger = logging.getLogger(name)
    logger.setLevel(os.environ.get(LOG_LEVEL_ENV_VAR, "DEBUG").upper())
    logger.handlers = [RichHandler()]
    logger.propagate = False
    return logger
