"""Logging helpers: a TRACE level below DEBUG for overlay diagnostics."""

from __future__ import annotations

import logging
import os
from typing import Any

TRACE = 5

logging.addLevelName(TRACE, "TRACE")

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def trace(logger: logging.Logger, msg: str, *args: Any) -> None:
    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, msg, *args)


def resolve_level(value: str | int | None) -> int:
    if isinstance(value, int):
        return value
    raw = str(value or "").strip().upper()
    if not raw:
        return logging.WARNING
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    if isinstance(level, int):
        return level
    raise ValueError(f"Unknown log level '{value}'")


def configure_logging(level: str | int | None = None) -> int:
    if level is None:
        level = os.getenv("CURSOR_OVERLAY_LOG_LEVEL", "WARNING")
    resolved = resolve_level(level)
    logging.basicConfig(level=resolved, format=_LOG_FORMAT)
    logging.getLogger("cursor_overlay").setLevel(resolved)
    return resolved
