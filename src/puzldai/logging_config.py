"""Logging setup shared by the command-line entry points."""

import logging

from puzldai.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging.

    Args:
        level: Level name (e.g. "DEBUG"), defaults to settings.log_level
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
