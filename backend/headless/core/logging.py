"""
Logging setup.

Replaces loguru's default sink with a single stderr sink
at the configured level.
"""

import sys

from loguru import logger

from headless.core.config import Settings, get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(settings: Settings | None = None) -> int:
    """
    Configure loguru sinks.

    Args:
        settings: Settings to read the level from (cached settings if None)

    Returns:
        Handler ID of the added stderr sink
    """
    settings = settings or get_settings()
    level = "DEBUG" if settings.debug else settings.log_level

    logger.remove()
    handler_id = logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    logger.debug(f"Logging configured at {level} for {settings.app_name}")
    return handler_id
