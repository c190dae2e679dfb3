"""Logging setup for content-images using loguru.

The library modules only emit records through ``loguru.logger``; handlers are
installed by the CLI (or by a host build script) through ``setup_logging``.

Example:
    from content_images.logging import setup_logging

    setup_logging(level="DEBUG")

"""

import sys
from typing import Any

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: str | None = None,
) -> Any:
    """Configure loguru handlers for a build run.

    Args:
        level: Minimum log level. One of: DEBUG, INFO, WARNING, ERROR, CRITICAL.
        json_output: Emit serialized JSON records on stderr instead of the
            colorized console format (useful when a CI system collects logs).
        log_file: Optional path of a log file kept next to the build output.

    Returns:
        The configured loguru logger.

    """
    logger.remove()

    if json_output:
        logger.add(sys.stderr, format="{message}", serialize=True, level=level)
    else:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level=level,
            rotation="5 MB",
            retention=3,
        )

    return logger

