from __future__ import annotations

import logging
import sys


ROOT_LOGGER = "mavka_did"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False, format_string: str | None = None) -> logging.Logger:
    """Attach a stderr handler to the package logger (once) and set its level.

    The library itself only logs at DEBUG and never installs handlers; this is
    for the command line driver.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
