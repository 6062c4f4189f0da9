"""Logging setup for processes embedding the engine."""

import logging

from jarvy.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the root logger from settings.

    Args:
        settings: Settings to read the level from (defaults to get_settings())
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("jarvy").setLevel(level)
