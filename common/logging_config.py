"""
Logging Configuration.

All modules obtain their logger through `get_logger` so that output
shares one format. The conversion code logs sparingly: engine setup at
INFO, NaN outcomes (undefined region, non-convergence) at DEBUG.
"""

import logging
import sys


# Configure root logger for the package
def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the geodetic conversion code.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def set_level(level: int, prefixes=("common", "geospatial", "georef")) -> None:
    """Change the level of every package logger created so far.

    Parameters
    ----------
    level : int
        New logging level, e.g. ``logging.DEBUG`` to see NaN outcomes.
    prefixes : tuple of str
        Top-level package names whose loggers are affected.
    """
    for name in list(logging.root.manager.loggerDict):
        if name.split(".")[0] in prefixes:
            logging.getLogger(name).setLevel(level)
