# titlescan/common/logging.py
from __future__ import annotations

import logging
from typing import Optional

from titlescan.common.settings import get_settings


def _level_from_settings() -> int:
    name = (get_settings().log_level or "INFO").upper()
    level = getattr(logging, name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str = "titlescan", level: Optional[int] = None) -> logging.Logger:
    """
    Return a named logger. The level defaults to LOG_LEVEL from the settings.
    If nothing has configured logging yet we add a basicConfig once so
    warnings from the parser are not lost.
    """
    if level is None:
        level = _level_from_settings()
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
