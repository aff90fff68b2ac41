"""Synthetic cursor overlay that follows the agent's pointer across navigations.

The pointer is drawn inside the page DOM, so every navigation destroys it.
``CursorOverlay`` remembers the last commanded position and redraws it after
each ``load`` event. Drawing is cosmetic: failures (closed pages, CSP or
Trusted Types rejections) are logged at TRACE level and never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from cursor_overlay.config import CursorOverlayConfig
from cursor_overlay.constants import CLICK_EFFECT_MS
from cursor_overlay.logs import trace
from cursor_overlay.overlay_dom import (
    page_is_closed,
    read_overlay_snapshot,
    render_overlay,
    set_overlay_display,
)
from cursor_overlay.retry import RetryPolicy, retry_on_error_is_success

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverlayOutcome:
    action: str
    ok: bool
    error: str = ""

    @classmethod
    def success(cls, action: str) -> "OverlayOutcome":
        return cls(action=action, ok=True)

    @classmethod
    def failure(cls, action: str, error: object) -> "OverlayOutcome":
        return cls(action=action, ok=False, error=str(error) or type(error).__name__)

    def to_dict(self) -> dict[str, Any]:
        return {"action": self.action, "ok": self.ok, "error": self.error}


@dataclass
class CursorState:
    last_position: tuple[float, float] | None = None
    last_outcome: OverlayOutcome | None = None


class CursorOverlay:
    def __init__(
        self,
        config: CursorOverlayConfig | None = None,
        *,
        state: CursorState | None = None,
    ) -> None:
        self._config = config or CursorOverlayConfig()
        self._state = state or CursorState()
        self._target: Any | None = None

    @property
    def config(self) -> CursorOverlayConfig:
        return self._config

    @property
    def element_id(self) -> str:
        return self._config.element_id

    @property
    def target(self) -> Any | None:
        return self._target

    @property
    def last_position(self) -> tuple[float, float] | None:
        return self._state.last_position

    @property
    def last_outcome(self) -> OverlayOutcome | None:
        return self._state.last_outcome

    def attach(self, page: Any) -> bool:
        """Bind to ``page``, redraw on each of its loads, and draw once now.

        Returns whether the initial injection succeeded; the result is
        informational only.
        """
        if self._target is not None:
            self._unsubscribe(self._target)
        self._target = page
        page.on("load", self._handle_load)
        logger.debug("cursor overlay attached to %s", getattr(page, "url", page))
        return self.reinject(retries=self._config.attach_retries)

    def detach(self) -> None:
        if self._target is None:
            return
        self._unsubscribe(self._target)
        self._target = None

    def reinject(self, *, retries: int | None = None) -> bool:
        """Redraw at the last position without the click effect."""
        if self._state.last_position is None:
            return True
        limit = retries if retries is not None else self._config.reload_retries
        policy = RetryPolicy(retry_limit=max(1, limit), delay_ms=max(0, self._config.retry_delay_ms))
        ok = retry_on_error_is_success(self._reinject_once, policy, wait=self._wait)
        if not ok:
            trace(logger, "cursor overlay not restored after %d attempt(s)", policy.retry_limit)
        return ok

    def move_to(self, x: float, y: float) -> OverlayOutcome:
        # Recorded first so a racing reload redraws at the new target.
        self._state.last_position = (float(x), float(y))
        outcome = self._draw(x, y, show_click_effect=True)
        # evaluate() returns before the CSS transition finishes.
        self._wait(self._config.transition_ms)
        return outcome

    def hide(self) -> OverlayOutcome:
        return self._set_visible(False)

    def show(self) -> OverlayOutcome:
        return self._set_visible(True)

    def snapshot(self) -> dict[str, Any]:
        if page_is_closed(self._target):
            return {"exists": False, "error": "no open page"}
        return read_overlay_snapshot(self._target, self._config.element_id)

    def _handle_load(self, page: Any = None) -> None:
        if page is not None and page is not self._target:
            trace(logger, "ignoring load event from a page that is no longer attached")
            return
        self.reinject(retries=self._config.reload_retries)

    def _reinject_once(self) -> None:
        position = self._state.last_position
        if position is None:
            return
        outcome = self._draw(position[0], position[1], show_click_effect=False)
        if not outcome.ok:
            raise RuntimeError(outcome.error)

    def _draw(self, x: float, y: float, *, show_click_effect: bool) -> OverlayOutcome:
        page = self._target
        if page_is_closed(page):
            outcome = OverlayOutcome.failure("draw", "no open page")
        else:
            try:
                render_overlay(
                    page,
                    x,
                    y,
                    element_id=self._config.element_id,
                    show_click_effect=show_click_effect,
                    color=self._config.color,
                    click_ms=CLICK_EFFECT_MS,
                )
                outcome = OverlayOutcome.success("draw")
            except Exception as exc:
                # e.g. "This document requires 'TrustedHTML' assignment."
                outcome = OverlayOutcome.failure("draw", exc)
        self._state.last_outcome = outcome
        if not outcome.ok:
            trace(logger, "Failed to draw cursor overlay at (%s, %s): %s", x, y, outcome.error)
        return outcome

    def _set_visible(self, visible: bool) -> OverlayOutcome:
        action = "show" if visible else "hide"
        page = self._target
        if page_is_closed(page):
            outcome = OverlayOutcome.failure(action, "no open page")
        else:
            try:
                found = set_overlay_display(page, self._config.element_id, visible)
                outcome = OverlayOutcome.success(action)
                if not found:
                    trace(logger, "cursor overlay not present; %s skipped", action)
            except Exception as exc:
                outcome = OverlayOutcome.failure(action, exc)
        self._state.last_outcome = outcome
        if not outcome.ok:
            trace(logger, "Failed to %s cursor overlay: %s", action, outcome.error)
        return outcome

    def _wait(self, ms: int) -> None:
        page = self._target
        if ms <= 0 or page_is_closed(page):
            return
        try:
            page.wait_for_timeout(ms)
        except Exception as exc:
            trace(logger, "wait_for_timeout(%s) failed: %s", ms, exc)

    def _unsubscribe(self, page: Any) -> None:
        remover = getattr(page, "remove_listener", None)
        if not callable(remover):
            return
        try:
            remover("load", self._handle_load)
        except Exception as exc:
            trace(logger, "could not remove load listener: %s", exc)
