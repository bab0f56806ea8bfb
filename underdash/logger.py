# coding: utf-8
import logging
import os
import sys
from typing import Optional

def setup_logger(name: str = "underdash",
        level: Optional[str] = None,
        format_string: Optional[str] = None) -> logging.Logger:
    """Set up a logger with consistent formatting.

    The level defaults to the UNDERDASH_LOG_LEVEL environment variable, and
    to WARNING when that is unset, so importing the library stays quiet.
    Handlers are only attached once per logger name.
    """
    logger = logging.getLogger(name)

    if level is None:
        level = os.getenv("UNDERDASH_LOG_LEVEL", "WARNING").upper()
    logger.setLevel(getattr(logging, level, logging.WARNING))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        if format_string is None:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        handler.setFormatter(logging.Formatter(format_string,
            datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger

logger = setup_logger()

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
