"""In-page scripts that draw, toggle and inspect the cursor overlay."""

from __future__ import annotations

from typing import Any

_RENDER_SCRIPT = """
({ x, y, id, showClickEffect, color, clickMs }) => {
  const docX = x + window.scrollX;
  const docY = y + window.scrollY;

  if (showClickEffect) {
    const circle = document.createElement('div');
    circle.style.position = 'absolute';
    circle.style.left = `${docX}px`;
    circle.style.top = `${docY}px`;
    circle.style.borderRadius = '50%';
    circle.style.backgroundColor = color;
    circle.style.width = '0px';
    circle.style.height = '0px';
    circle.style.transform = 'translate(-50%, -50%)';
    circle.style.pointerEvents = 'none';
    circle.style.zIndex = '9998';
    circle.style.opacity = '0.7';
    document.body.appendChild(circle);
    const animation = circle.animate([
      { width: '0px', height: '0px', opacity: 0.7 },
      { width: '50px', height: '50px', opacity: 0 },
    ], { duration: clickMs, easing: 'ease-out' });
    animation.onfinish = () => circle.remove();
  }

  let pointer = document.getElementById(id);
  if (!pointer) {
    pointer = document.createElement('div');
    pointer.id = id;
    pointer.style.position = 'fixed';
    pointer.style.width = '32px';
    pointer.style.height = '32px';
    pointer.style.zIndex = '2147483647';
    pointer.style.pointerEvents = 'none';
    pointer.style.transition =
      'left 0.3s cubic-bezier(0.25, 0.1, 0.25, 1), top 0.3s cubic-bezier(0.25, 0.1, 0.25, 1)';

    // DOM methods only; innerHTML is rejected on Trusted Types pages.
    const ns = 'http://www.w3.org/2000/svg';
    const svg = document.createElementNS(ns, 'svg');
    svg.setAttribute('width', '32');
    svg.setAttribute('height', '32');
    svg.setAttribute('viewBox', '0 0 113.50408 99.837555');
    const g = document.createElementNS(ns, 'g');
    g.setAttribute('transform', 'translate(-413.10686,-501.19661)');
    const paths = [
      [`fill:${color};fill-opacity:1;stroke:#000000;stroke-width:0`,
       'm 416.1069,504.1966 52.47697,93.83813 8.33253,-57.61019 z'],
      ['fill:#0384c7;fill-opacity:1;stroke:#000000;stroke-width:0',
       'm 416.1069,504.1966 60.8095,36.22794 46.69517,-34.75524 z'],
      ['fill:#0384c7;fill-opacity:0;stroke:#000000;stroke-width:6;stroke-linecap:round;stroke-linejoin:round',
       'm 416.1069,504.19658 52.47698,93.83813 8.33252,-57.61019 46.69517,-34.75521 -107.50467,-1.47273'],
    ];
    paths.forEach(([style, d]) => {
      const path = document.createElementNS(ns, 'path');
      path.setAttribute('style', style);
      path.setAttribute('d', d);
      g.appendChild(path);
    });
    svg.appendChild(g);
    pointer.appendChild(svg);
    document.body.appendChild(pointer);
  }

  // Tip of the arrow sits at roughly (1, 3) inside the SVG.
  pointer.style.left = `${x}px`;
  pointer.style.top = `${y}px`;
  pointer.style.transform = 'translate(-1px, -3px)';
  return true;
}
"""

_DISPLAY_SCRIPT = """
({ id, visible }) => {
  const el = document.getElementById(id);
  if (!el) return false;
  el.style.display = visible ? '' : 'none';
  return true;
}
"""

_SNAPSHOT_SCRIPT = """
(id) => {
  const el = document.getElementById(id);
  if (!el) return { exists: false };
  const count = document.querySelectorAll(`[id="${id}"]`).length;
  return {
    exists: true,
    count,
    display: el.style.display || '',
    left: el.style.left || '',
    top: el.style.top || '',
  };
}
"""


def page_is_closed(page: Any | None) -> bool:
    if page is None:
        return True
    checker = getattr(page, "is_closed", None)
    if callable(checker):
        try:
            return bool(checker())
        except Exception:
            return True
    return False


def render_overlay(
    page: Any,
    x: float,
    y: float,
    *,
    element_id: str,
    show_click_effect: bool,
    color: str,
    click_ms: int = 500,
) -> None:
    page.evaluate(
        _RENDER_SCRIPT,
        {
            "x": float(x),
            "y": float(y),
            "id": element_id,
            "showClickEffect": bool(show_click_effect),
            "color": str(color),
            "clickMs": int(click_ms),
        },
    )


def set_overlay_display(page: Any, element_id: str, visible: bool) -> bool:
    """Show or hide an existing pointer. Returns False when it is not in the page."""
    return bool(page.evaluate(_DISPLAY_SCRIPT, {"id": element_id, "visible": bool(visible)}))


def read_overlay_snapshot(page: Any, element_id: str) -> dict[str, Any]:
    try:
        raw = page.evaluate(_SNAPSHOT_SCRIPT, element_id)
    except Exception as exc:
        return {"exists": False, "error": str(exc)}
    if isinstance(raw, dict):
        return raw
    return {"exists": False, "error": "overlay snapshot is not a dict"}
