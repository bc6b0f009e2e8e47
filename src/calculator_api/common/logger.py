"""Shared logger for the calculator API."""
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("calculator_api")

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.INFO)


def set_level(level: str) -> None:
    """Set the level of the shared logger from a level name such as "DEBUG"."""
    logger.setLevel(level.upper())
