"""Logging utilities."""
from __future__ import annotations

import logging
import sys

from doublesdraw.config import LOG_LEVEL

# the logger format used
LOG_FMT = "%(asctime)s | %(levelname)s | %(name)s:%(funcName)s | %(message)s"


def setup_logger(logger_name: str) -> logging.Logger:
    """Set up a console logger for a module.

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the created logger
    """
    lgr = logging.getLogger(name=logger_name)
    lgr.setLevel(LOG_LEVEL)
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FMT))
    lgr.addHandler(console_handler)
    lgr.debug("logger %s initialized", logger_name)
    return lgr
