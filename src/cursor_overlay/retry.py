"""Bounded retry helpers for best-effort page operations."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from cursor_overlay.constants import RETRY_DELAY_MS, RETRY_MODES
from cursor_overlay.logs import trace

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    retry_limit: int
    delay_ms: int = RETRY_DELAY_MS
    mode: str = "retry_all"
    error_substrings: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.retry_limit < 1:
            raise ValueError("retry_limit must be at least 1")
        if self.delay_ms < 0:
            raise ValueError("delay_ms must not be negative")
        if self.mode not in RETRY_MODES:
            raise ValueError(f"Invalid retry mode '{self.mode}'. Must be one of {list(RETRY_MODES)}")

    def should_retry(self, exc: BaseException) -> bool:
        if self.mode == "retry_all":
            return True
        message = str(exc)
        return any(sub in message for sub in self.error_substrings)


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000.0)


def retry_on_error(
    fn: Callable[[], T],
    policy: RetryPolicy,
    *,
    wait: Callable[[int], Any] | None = None,
) -> T:
    """Call ``fn`` until it succeeds or ``policy.retry_limit`` attempts are spent.

    The last error is re-raised. Errors that the policy does not consider
    retryable are re-raised immediately.
    """
    wait_fn = wait or _sleep_ms
    last_error: Exception | None = None
    for attempt in range(1, policy.retry_limit + 1):
        try:
            return fn()
        except Exception as exc:
            last_error = exc
            if not policy.should_retry(exc):
                trace(logger, "attempt %d/%d failed, not retryable: %s", attempt, policy.retry_limit, exc)
                raise
            trace(logger, "attempt %d/%d failed: %s", attempt, policy.retry_limit, exc)
        if attempt < policy.retry_limit:
            try:
                wait_fn(policy.delay_ms)
            except Exception:
                pass
    if last_error is not None:
        raise last_error
    raise RuntimeError("retry exhausted")


def retry_on_error_is_success(
    fn: Callable[[], Any],
    policy: RetryPolicy,
    *,
    wait: Callable[[int], Any] | None = None,
) -> bool:
    try:
        retry_on_error(fn, policy, wait=wait)
    except Exception as exc:
        trace(logger, "retry gave up: %s", exc)
        return False
    return True
