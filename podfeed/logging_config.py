"""
Logging setup.

All loggers live under the ``podfeed`` namespace. Library code only calls
``get_logger``; applications call ``init_logging`` once to attach a handler.
"""

import logging

from .config import settings

ROOT_LOGGER = "podfeed"


def init_logging(level: str | int | None = None, fmt: str | None = None) -> logging.Logger:
    """
    Configure the package logger with a stream handler.

    Calling it again replaces the level and format instead of adding
    another handler.

    Args:
        level: Log level name or number. Defaults to ``settings.log_level``.
        fmt: Log record format. Defaults to ``settings.log_format``.

    Returns:
        The package root logger.
    """
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    formatter = logging.Formatter(fmt or settings.log_format)
    handler = next((h for h in logger.handlers if h.get_name() == ROOT_LOGGER), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(ROOT_LOGGER)
        logger.addHandler(handler)
    handler.setFormatter(formatter)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
