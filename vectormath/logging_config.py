# -*- coding: utf-8 -*-
# vectormath/logging_config.py

"""
Project: vectormath
Date: 3/6/2026

Purpose:
--------
Opt-in logging setup for applications embedding vectormath. The library itself only
creates module loggers (`logging.getLogger(__name__)`) and never adds handlers on import.
"""

from typing import Optional
import logging
import sys

__all__ = ["setup_logging"]

LOGGER_NAME = "vectormath"
_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler (and optionally a file handler) to the 'vectormath' logger.

    Calling it again replaces the handlers instead of stacking duplicates.

    Parameters
    ----------
    level : int
        Logging level, e.g. logging.DEBUG to see rejected polygons and singular solves.
    log_file : str, optional
        Path of a log file (overwritten).

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
