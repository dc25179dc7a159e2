"""Root logger configuration."""

import logging
import sys
from typing import Optional

from .config import settings


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure the root logger with a stdout handler.

    Args:
        level: Level name, defaults to ``settings.log_level``
        fmt: Record format, defaults to ``settings.log_format``
    """
    level_name = level or settings.log_level
    formatter = logging.Formatter(fmt or settings.log_format)

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name.upper(), logging.INFO))
    root.handlers.clear()

    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(formatter)
    root.addHandler(ch)
