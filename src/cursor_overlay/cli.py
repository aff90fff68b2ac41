"""CLI entrypoint for cursor-overlay."""

from __future__ import annotations

import argparse
import importlib.util
import json
from pathlib import Path
from typing import Any

from cursor_overlay.config import CursorOverlayConfig
from cursor_overlay.cursor import CursorOverlay
from cursor_overlay.logs import configure_logging


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()
    configure_logging(args.log_level)

    if args.command == "demo":
        summary = demo_command(
            args.url,
            args.point or [],
            reload=args.reload,
            hide_at_end=args.hide_at_end,
            screenshot=args.screenshot,
            headed=args.headed,
        )
        print(json.dumps(summary, indent=2, ensure_ascii=False))
        return
    if args.command == "config":
        print(json.dumps(CursorOverlayConfig.from_env().to_dict(), indent=2, ensure_ascii=False))
        return

    parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cursor-overlay",
        description="Draw a visible agent cursor on a Playwright-controlled page.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (TRACE, DEBUG, INFO, ...). Defaults to CURSOR_OVERLAY_LOG_LEVEL.",
    )
    subparsers = parser.add_subparsers(dest="command")

    demo_parser = subparsers.add_parser("demo", help="Open a page and move the overlay through points")
    demo_parser.add_argument("url", type=str)
    demo_parser.add_argument(
        "--point",
        action="append",
        type=parse_point,
        help="Viewport point as X,Y. Repeat for a path.",
    )
    demo_parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload the page after moving to check that the overlay is restored.",
    )
    demo_parser.add_argument("--hide-at-end", action="store_true")
    demo_parser.add_argument("--screenshot", type=Path, default=None)
    demo_parser.add_argument("--headed", action="store_true", help="Show the browser window.")

    subparsers.add_parser("config", help="Print the effective overlay configuration")
    return parser


def parse_point(raw: str) -> tuple[float, float]:
    parts = [part.strip() for part in str(raw or "").split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Invalid point '{raw}'. Expected X,Y")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid point '{raw}'. Coordinates must be numbers") from None


def playwright_available() -> bool:
    return importlib.util.find_spec("playwright.sync_api") is not None


def demo_command(
    url: str,
    points: list[tuple[float, float]],
    *,
    reload: bool = False,
    hide_at_end: bool = False,
    screenshot: Path | None = None,
    headed: bool = False,
) -> dict[str, Any]:
    if not playwright_available():
        raise SystemExit(
            "Playwright is not installed. "
            "Install it with `pip install playwright` and `playwright install chromium`."
        )
    from playwright.sync_api import sync_playwright

    overlay = CursorOverlay(CursorOverlayConfig.from_env())
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=not headed)
        try:
            page = browser.new_page()
            page.goto(url)
            overlay.attach(page)
            for x, y in points:
                overlay.move_to(x, y)
            if reload:
                page.reload()
            if hide_at_end:
                overlay.hide()
            if screenshot is not None:
                screenshot.parent.mkdir(parents=True, exist_ok=True)
                page.screenshot(path=str(screenshot))
            return _summary(url, points, overlay, screenshot)
        finally:
            overlay.detach()
            browser.close()


def _summary(
    url: str,
    points: list[tuple[float, float]],
    overlay: CursorOverlay,
    screenshot: Path | None,
) -> dict[str, Any]:
    last_outcome = overlay.last_outcome
    return {
        "url": url,
        "points": [list(point) for point in points],
        "last_position": list(overlay.last_position) if overlay.last_position else None,
        "last_outcome": last_outcome.to_dict() if last_outcome else None,
        "overlay": overlay.snapshot(),
        "screenshot": str(screenshot) if screenshot is not None else "",
    }


if __name__ == "__main__":
    main()
