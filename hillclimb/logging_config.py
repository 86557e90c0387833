from __future__ import annotations

import logging
import sys
from typing import Optional

from .settings import settings

_LOG_FORMAT = "%(asctime)s | %(levelname)s | hillclimb.%(module)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logging_configured = False


def resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    # getLevelName returns "Level X" strings for unknown names
    if isinstance(level, str):
        return logging.INFO
    return level


def configure_logging(level: Optional[str] = None) -> None:
    """Attach one stderr handler to the `hillclimb` logger. Safe to call twice."""
    global _logging_configured
    resolved = resolve_level(level or settings.log_level)

    logger = logging.getLogger("hillclimb")
    logger.setLevel(resolved)
    if _logging_configured:
        for handler in logger.handlers:
            handler.setLevel(resolved)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    handler.setLevel(resolved)
    logger.addHandler(handler)
    _logging_configured = True


__all__ = ["configure_logging", "resolve_level"]
