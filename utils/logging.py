"""Logging setup shared by the decoder and its command-line entry point."""

import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name, configured once.

    Output goes to stderr so decoded listings on stdout stay clean.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        set_level(logger, os.getenv("LOG_LEVEL", "INFO"))
    return logger


def set_level(logger: logging.Logger, level: str) -> None:
    """Apply a level name such as "debug" or "WARNING", falling back to INFO."""
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
