import logging
import unittest

from cursor_overlay.logs import TRACE, resolve_level, trace


class LogLevelTests(unittest.TestCase):
    def test_resolve_level(self) -> None:
        self.assertEqual(resolve_level("trace"), TRACE)
        self.assertEqual(resolve_level("DEBUG"), logging.DEBUG)
        self.assertEqual(resolve_level("15"), 15)
        self.assertEqual(resolve_level(logging.INFO), logging.INFO)
        self.assertEqual(resolve_level(None), logging.WARNING)
        with self.assertRaises(ValueError):
            resolve_level("chatty")

    def test_trace_emits_below_debug(self) -> None:
        logger = logging.getLogger("cursor_overlay.test")
        with self.assertLogs(logger, level=TRACE) as logs:
            trace(logger, "drawn at (%s, %s)", 1, 2)
        self.assertEqual(logs.output, ["TRACE:cursor_overlay.test:drawn at (1, 2)"])

    def test_trace_is_silent_at_debug(self) -> None:
        logger = logging.getLogger("cursor_overlay.quiet")
        with self.assertLogs(logger, level=logging.DEBUG) as logs:
            trace(logger, "hidden")
            logger.debug("visible")
        self.assertEqual(logs.output, ["DEBUG:cursor_overlay.quiet:visible"])


if __name__ == "__main__":
    unittest.main()
