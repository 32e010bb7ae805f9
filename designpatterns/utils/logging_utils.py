"""
Logging setup for the demos.
"""

import logging
from typing import Optional, Union


LOG_FORMAT = '[%(asctime)s] %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[Union[str, int]] = None,
                  logger_name: str = 'designpatterns') -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it again only updates the level; no second handler is added.

    Args:
        level: Logging level name or number, INFO when None
        logger_name: Logger to configure

    Returns:
        The configured logger
    """
    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    if level is None:
        level = logging.INFO
    elif isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger
