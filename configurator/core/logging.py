"""Logging configuration for the configurator package."""

import logging
import sys

LOGGER_NAME = "configurator"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the package logger.

    Modules log through ``logging.getLogger(__name__)``, so every logger under
    ``configurator.*`` propagates to the handler installed here.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)

    # Format: timestamp - level - module - message
    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
