"""Ecatconf logging. Log output goes to stderr (or a rotating log file) since
stdout carries the generated configuration document.
"""
import logging
import logging.handlers
import os
from typing import Optional
from logging import Logger

from ecatconf.configuration import CONFIG


LEVEL = CONFIG['Logging']['LEVEL']
DIRECTORY = CONFIG['Logging']['DIRECTORY']
FILENAME = CONFIG['Logging']['FILENAME']

MB: int = 1024 * 1024
"""One mega byte."""

ECATCONF_LOGGER = logging.getLogger('ecatconf')
"""Ecatconf root logger."""


def get_logger(name: Optional[str] = None, parent: Optional[Logger] = ECATCONF_LOGGER) -> Logger:
    """Get ecatconf logger. Wraps :func:`logging.getLogger`.

    Args:
        name: Logger name. None for root logger if not parent logger.
        parent: Parent logger. ECATCONF_LOGGER by default.

    Returns:
        Requested logger for given name.
    """
    if name is None:
        return ECATCONF_LOGGER

    if parent:
        return parent.getChild(name)

    return logging.getLogger(name)


def setup_logging(level: int = LEVEL, directory: Optional[str] = DIRECTORY):
    """Setup ecatconf loggers.

    Args:
        level: Logging level.
        directory: Log directory. Logging to stderr if not set.
    """
    ECATCONF_LOGGER.setLevel(level)

    formatter = logging.Formatter(
        fmt='%(asctime)s.%(msecs)03d - %(levelname)5s - %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    if directory:
        os.makedirs(directory, exist_ok=True)
        filename = os.path.join(directory, FILENAME)
        handler = logging.handlers.RotatingFileHandler(
            filename,
            maxBytes=10 * MB,
            backupCount=5,
        )
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)
    ECATCONF_LOGGER.addHandler(handler)
