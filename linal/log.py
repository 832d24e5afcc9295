"""Logging helpers.

The library only creates named loggers; handlers are installed by the
application (or the demos) through :func:`setup_logging`.
"""

from __future__ import annotations

import logging

from . import config

_LOGGER_CONFIGURED = False


def setup_logging(level: int | str | None = None) -> None:
    """Install a console handler on the root logger once."""
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    if level is None or isinstance(level, str):
        level = config.resolve_log_level(level)

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT))
    logger.addHandler(handler)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
