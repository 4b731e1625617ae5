import tempfile
import unittest
from pathlib import Path

from profile_chart_studio.app import build_parser
from profile_chart_studio.plotting.helpers import format_depth_tick, format_distance_tick
from profile_chart_studio.utils.log import (
    DEFAULT_LOG_PATH,
    current_log_path,
    log_event,
    log_exception,
    set_log_path,
)


class TestCommandLine(unittest.TestCase):
    def test_defaults(self):
        args = build_parser().parse_args([])
        self.assertEqual((args.host, args.port), ("127.0.0.1", 8050))
        self.assertFalse(args.debug)
        self.assertFalse(args.use_reloader)

    def test_flags(self):
        args = build_parser().parse_args(["--host", "0.0.0.0", "--port", "9000", "--debug", "--reloader"])
        self.assertEqual((args.host, args.port), ("0.0.0.0", 9000))
        self.assertTrue(args.debug)
        self.assertTrue(args.use_reloader)


class TestTickFormatting(unittest.TestCase):
    def test_distance_ticks_round_half_up(self):
        self.assertEqual(format_distance_tick(2.5), "3")
        self.assertEqual(format_distance_tick(7.49), "7")
        self.assertEqual(format_distance_tick(float("nan")), "")

    def test_depth_ticks_trim_zeros(self):
        self.assertEqual(format_depth_tick(1.5), "1.5")
        self.assertEqual(format_depth_tick(2.0), "2")
        self.assertEqual(format_depth_tick(-1.234), "-1.23")


class TestDiagnosticsLog(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = set_log_path(str(Path(self._tmp.name) / "diag.log"))

    def tearDown(self):
        set_log_path(None)
        self._tmp.cleanup()

    def test_blank_path_restores_default(self):
        self.assertEqual(set_log_path(""), DEFAULT_LOG_PATH)
        set_log_path(str(self.path))
        self.assertEqual(current_log_path(), self.path)

    def test_event_is_single_line(self):
        log_event("ctx", "two\nlines")
        lines = self.path.read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 1)
        self.assertIn("ctx", lines[0])
        self.assertIn("two\\nlines", lines[0])

    def test_exception_traceback(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            log_exception("failing step")
        text = self.path.read_text(encoding="utf-8")
        self.assertIn("failing step", text)
        self.assertIn("RuntimeError: boom", text)

    def test_unwritable_target_is_ignored(self):
        log_event("ctx", "msg", log_path=Path(self._tmp.name))


if __name__ == "__main__":
    unittest.main()
