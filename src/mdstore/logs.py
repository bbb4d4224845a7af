"""Logging setup for the mdstore package logger"""

import logging
import sys


LOGGER_NAME = "mdstore"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Configure the package logger with a single handler on the current stderr.

    Safe to call repeatedly: earlier handlers are replaced, so in-process CLI
    invocations always log to the stderr that is active at call time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for old in list(logger.handlers):
        logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    logger.debug("Logging initialized. level=%s", logging.getLevelName(logger.level))
    return logger
