"""Default configuration values for linal."""

from __future__ import annotations

import logging
import os

# Relative tolerance on |area| or |triple product| against the product of
# the basis vector lengths.
DEGENERATE_TOLERANCE = 1e-12

TEXT_SEPARATOR = " "

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = os.environ.get("LINAL_LOG_LEVEL", "WARNING").upper()


def resolve_log_level(name: str | None = None) -> int:
    level = logging.getLevelName((name or DEFAULT_LOG_LEVEL).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level
