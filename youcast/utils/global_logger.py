import sys

from loguru import logger

from youcast.utils.config import config


def init_logging() -> None:
    """Initialize loguru logger."""
    logger.remove()

    if config.local_mode:
        logger.add(
            sys.stdout,
            format="{time:HH:mm:ss} <level>{level: <8}</level> [youcast] {message}",
            level=config.log_level,
            colorize=True,
        )
    else:
        logger.add(
            sys.stdout,
            format="[youcast] - {level: <8} - {message}",
            level=config.log_level,
            colorize=False,
        )
