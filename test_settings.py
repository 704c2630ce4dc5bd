import json
import os
import tempfile
import unittest
from unittest import mock

import settings
from settings import load_settings, save_settings


class TestSettings(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "settings.json")
        patcher = mock.patch.object(settings, "_SETTINGS_PATH", self.path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self.tmpdir.cleanup)

    def _write(self, text):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)

    def test_defaults_when_missing(self):
        s = load_settings()
        self.assertIsNone(s["window_width"])
        self.assertIsNone(s["window_height"])
        self.assertFalse(s["start_hidden"])
        self.assertTrue(s["show_tray"])
        self.assertEqual(s["log_level"], "INFO")

    def test_round_trip(self):
        s = load_settings()
        s["window_width"] = 700
        s["window_height"] = 640
        s["start_hidden"] = True
        save_settings(s)
        loaded = load_settings()
        self.assertEqual(loaded["window_width"], 700)
        self.assertEqual(loaded["window_height"], 640)
        self.assertTrue(loaded["start_hidden"])

    def test_wrong_types_are_ignored(self):
        self._write(json.dumps({
            "window_width": "wide",
            "window_height": True,
            "show_tray": "no",
            "log_level": 10,
        }))
        s = load_settings()
        self.assertIsNone(s["window_width"])
        self.assertIsNone(s["window_height"])
        self.assertTrue(s["show_tray"])
        self.assertEqual(s["log_level"], "INFO")

    def test_log_level_is_upper_cased(self):
        self._write(json.dumps({"log_level": "debug"}))
        self.assertEqual(load_settings()["log_level"], "DEBUG")

    def test_malformed_file_falls_back_to_defaults(self):
        self._write("{not json")
        with self.assertLogs("settings", level="WARNING"):
            s = load_settings()
        self.assertTrue(s["show_tray"])

    def test_non_object_falls_back_to_defaults(self):
        self._write("[1, 2, 3]")
        with self.assertLogs("settings", level="WARNING"):
            s = load_settings()
        self.assertIsNone(s["window_width"])


if __name__ == '__main__':
    unittest.main()
