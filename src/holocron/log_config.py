# holocron/log_config.py
"""Logging configuration for holocron using Loguru.

Every module logs through the shared ``logger`` re-exported here, so that a
single call to :func:`configure_logging` controls the format, level and sink
for the transport, the normalizer and the resource clients alike.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO", sink=sys.stderr):
    """
    Configures the Loguru logger.

    Removes default handlers and adds a new one with the specified level and sink.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "holocron.log").
    """
    logger.remove()
    logger.add(
        sink,
        level=level.upper(),
        format=LOG_FORMAT,
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=False,
    )
    logger.debug(f"Loguru logger configured with level={level.upper()} writing to {sink}")


__all__ = ["LOG_FORMAT", "configure_logging", "logger"]
