"""Logging configuration for the path tracer."""

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = "INFO"


def setup_logging(
    level: Optional[Union[str, int]] = None,
    name: str = "pathtracer",
) -> logging.Logger:
    """
    Set up console logging for the package.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL) or number
        name: Logger name

    Returns:
        Configured logger instance
    """
    if level is None:
        level = DEFAULT_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Calling this twice must not duplicate output
    for handler in list(logger.handlers):
        if getattr(handler, "_pathtracer_console", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._pathtracer_console = True
    logger.addHandler(console_handler)

    return logger
