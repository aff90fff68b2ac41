"""Environment-driven configuration for the cursor overlay."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Any

from cursor_overlay.constants import (
    ATTACH_RETRY_LIMIT,
    DEFAULT_COLOR,
    DEFAULT_ELEMENT_ID,
    ENV_PREFIX,
    RELOAD_RETRY_LIMIT,
    RETRY_DELAY_MS,
    TRANSITION_MS,
)


@dataclass(frozen=True)
class CursorOverlayConfig:
    element_id: str = DEFAULT_ELEMENT_ID
    attach_retries: int = ATTACH_RETRY_LIMIT
    reload_retries: int = RELOAD_RETRY_LIMIT
    retry_delay_ms: int = RETRY_DELAY_MS
    transition_ms: int = TRANSITION_MS
    color: str = DEFAULT_COLOR

    @classmethod
    def from_env(cls) -> "CursorOverlayConfig":
        return cls(
            element_id=_env_str("ELEMENT_ID", DEFAULT_ELEMENT_ID),
            attach_retries=max(1, _env_int("ATTACH_RETRIES", ATTACH_RETRY_LIMIT)),
            reload_retries=max(1, _env_int("RELOAD_RETRIES", RELOAD_RETRY_LIMIT)),
            retry_delay_ms=max(0, _env_int("RETRY_DELAY_MS", RETRY_DELAY_MS)),
            transition_ms=max(0, _env_int("TRANSITION_MS", TRANSITION_MS)),
            color=_env_str("COLOR", DEFAULT_COLOR),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _env_str(name: str, default: str) -> str:
    value = str(os.getenv(ENV_PREFIX + name, "") or "").strip()
    return value or default


def _env_int(name: str, default: int) -> int:
    raw = str(os.getenv(ENV_PREFIX + name, "") or "").strip()
    if not raw:
        return default
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        return default
