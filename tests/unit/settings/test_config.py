"""Tests for config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtree import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_or_malformed_config_loads_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_default_depth_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertIsNone(config.load_default_depth())
                config.save_default_depth(3)
                self.assertEqual(config.load_default_depth(), 3)
                config.save_default_depth(0)
                self.assertEqual(config.load_default_depth(), 3)

    def test_default_depth_rejects_invalid_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                for value in (True, 0, -2, 2.5, "3"):
                    config.save_config({"default_depth": value})
                    self.assertIsNone(config.load_default_depth(), value)

    def test_color_preference_only_accepts_booleans(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertTrue(config.load_color_enabled())
                config.save_color_enabled(False)
                self.assertFalse(config.load_color_enabled())
                config.save_config({"color": "no"})
                self.assertTrue(config.load_color_enabled())

    def test_save_preserves_other_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                config.save_default_depth(2)
                config.save_color_enabled(False)
                self.assertEqual(config.load_config(), {"default_depth": 2, "color": False})


if __name__ == "__main__":
    unittest.main()
