"""Logging setup for the docstore logger hierarchy"""

import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach one stderr handler to the 'docstore' logger; repeat calls replace it."""
    logger = logging.getLogger("docstore")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
