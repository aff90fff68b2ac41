import unittest

from cursor_overlay.overlay_dom import (
    page_is_closed,
    read_overlay_snapshot,
    render_overlay,
    set_overlay_display,
)


class _RecordingPage:
    def __init__(self, result=None, error: Exception | None = None):
        self.calls: list[tuple[str, object]] = []
        self.result = result
        self.error = error

    def evaluate(self, script: str, arg=None):
        self.calls.append((script, arg))
        if self.error is not None:
            raise self.error
        return self.result


class _ClosedCheckPage:
    def __init__(self, closed=False, broken=False):
        self.closed = closed
        self.broken = broken

    def is_closed(self) -> bool:
        if self.broken:
            raise RuntimeError("connection lost")
        return self.closed


class PageClosedTests(unittest.TestCase):
    def test_page_is_closed(self) -> None:
        self.assertTrue(page_is_closed(None))
        self.assertTrue(page_is_closed(_ClosedCheckPage(closed=True)))
        self.assertTrue(page_is_closed(_ClosedCheckPage(broken=True)))
        self.assertFalse(page_is_closed(_ClosedCheckPage()))
        self.assertFalse(page_is_closed(object()))


class OverlayScriptTests(unittest.TestCase):
    def test_render_passes_serializable_payload(self) -> None:
        page = _RecordingPage()
        render_overlay(page, 10, 20, element_id="ptr", show_click_effect=True, color="#026aa1")
        script, arg = page.calls[0]
        self.assertIn("getElementById(id)", script)
        self.assertIn("window.scrollX", script)
        self.assertEqual(
            arg,
            {"x": 10.0, "y": 20.0, "id": "ptr", "showClickEffect": True, "color": "#026aa1", "clickMs": 500},
        )

    def test_render_propagates_page_errors(self) -> None:
        page = _RecordingPage(error=RuntimeError("Refused to evaluate a string as JavaScript"))
        with self.assertRaises(RuntimeError):
            render_overlay(page, 0, 0, element_id="ptr", show_click_effect=False, color="#000")

    def test_display_reports_missing_element(self) -> None:
        self.assertFalse(set_overlay_display(_RecordingPage(result=False), "ptr", False))
        page = _RecordingPage(result=True)
        self.assertTrue(set_overlay_display(page, "ptr", True))
        self.assertEqual(page.calls[0][1], {"id": "ptr", "visible": True})

    def test_snapshot_never_raises(self) -> None:
        snapshot = read_overlay_snapshot(_RecordingPage(error=RuntimeError("Target closed")), "ptr")
        self.assertEqual(snapshot, {"exists": False, "error": "Target closed"})
        snapshot = read_overlay_snapshot(_RecordingPage(result="weird"), "ptr")
        self.assertFalse(snapshot["exists"])
        snapshot = read_overlay_snapshot(_RecordingPage(result={"exists": True, "count": 1}), "ptr")
        self.assertEqual(snapshot["count"], 1)


if __name__ == "__main__":
    unittest.main()
