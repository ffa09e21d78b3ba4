"""
Logger module for mongoext.

Every module logs through the "mongoext" logger; configure it with
logging.getLogger("mongoext") or set_log_level().
"""

import logging

logger: logging.Logger = logging.getLogger("mongoext")
logger.setLevel(logging.WARNING)  # Default to WARNING level to avoid spam


def set_log_level(level: int) -> None:
    """Set the logging level for the package.

    Args:
        level: logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
    """
    logger.setLevel(level)
