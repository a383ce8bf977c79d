"""
Logging Configuration.

All modules obtain their logger through `get_logger(__name__)`. Loggers are
children of a single package logger, which owns the only handler, so the
verbosity of the whole package can be changed with `set_log_level`.

The transformations themselves are pure and log sparingly: the geocentric
solver logs iteration counts at DEBUG and non-convergence at ERROR, and the
identifier parsers log rejected values at WARNING.
"""

import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER_NAME = "jpr_coordinates"

LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'


def _package_logger() -> logging.Logger:
    root = logging.getLogger(PACKAGE_LOGGER_NAME)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    return root


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a logger configured for the coordinate transformation system.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int, optional
        Level for this logger only. By default the package level applies.

    Returns
    -------
    logging.Logger
        Child of the package logger.
    """
    logger = _package_logger().getChild(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Set the verbosity of every logger in the package.

    Parameters
    ----------
    level : int or str
        A `logging` level or its name, e.g. 'DEBUG'.
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {name!r}")
    _package_logger().setLevel(level)
