"""Logging configuration for the application."""

import logging
import sys

from nameguard.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Sets up stdlib logging with a level based on environment.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Driver loggers are noisy at INFO
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)

    logging.getLogger("nameguard").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
