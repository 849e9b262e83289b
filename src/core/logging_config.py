"""Logging setup shared by the API server and scripts."""

import logging

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once for the process.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO").
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
