# filmorate/common/logging.py
from __future__ import annotations

import logging
from typing import Optional

from filmorate.common.settings import get_settings


def _resolve_level(level: Optional[int | str]) -> int:
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    return level


def get_logger(name: str = "uvicorn.error", level: Optional[int | str] = None) -> logging.Logger:
    """
    Return a logger that plays nice with Uvicorn if running under it.
    If no handlers are set, we add a basicConfig once. The level defaults to
    Settings.log_level.
    """
    lvl = _resolve_level(level)
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=lvl, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(lvl)
    return logger
