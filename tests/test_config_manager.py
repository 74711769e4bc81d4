# pylint: disable=missing-module-docstring, missing-class-docstring, missing-function-docstring, protected-access
"""
Tests for ConfigManager.
"""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from config_manager import ConfigManager


class TestConfigManager(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.config_path = Path(self.tmp_dir.name) / "config.json"
        # CONFIG_FILE is a module level global read by every ConfigManager method
        self.patcher = patch("config_manager.CONFIG_FILE", self.config_path)
        self.patcher.start()

    def tearDown(self):
        self.patcher.stop()
        self.tmp_dir.cleanup()

    def test_load_config_defaults(self):
        config = ConfigManager.load_config()
        self.assertEqual(config, ConfigManager.DEFAULTS)
        self.assertEqual(config["language"], "pt")
        self.assertEqual(config["secret_length"], 32)
        self.assertEqual(config["status_clear_seconds"], 2.0)

    def test_defaults_not_shared(self):
        config = ConfigManager.load_config()
        config["language"] = "en"
        self.assertEqual(ConfigManager.DEFAULTS["language"], "pt")

    def test_save_and_load_config(self):
        ConfigManager.save_config({"theme_mode": "Light", "secret_length": 64})

        loaded = ConfigManager.load_config()
        self.assertEqual(loaded["theme_mode"], "Light")
        self.assertEqual(loaded["secret_length"], 64)
        self.assertEqual(loaded["language"], "pt")

    def test_saved_file_is_private(self):
        ConfigManager.save_config({"language": "en"})
        if os.name != "nt":
            self.assertEqual(self.config_path.stat().st_mode & 0o777, 0o600)
        self.assertEqual(json.loads(self.config_path.read_text())["language"], "en")

    def test_form_values_are_not_part_of_config(self):
        for key in ("projectName", "redisPassword", "postgresPassword"):
            self.assertNotIn(key, ConfigManager.DEFAULTS)

    def test_load_malformed_config(self):
        self.config_path.write_text("{invalid json", encoding="utf-8")

        config = ConfigManager.load_config()
        self.assertEqual(config, ConfigManager.DEFAULTS)
        self.assertTrue(self.config_path.with_suffix(".json.bak").exists())
        self.assertFalse(self.config_path.exists())

    def test_load_invalid_values(self):
        self.config_path.write_text(json.dumps({"secret_length": 7}), encoding="utf-8")
        self.assertEqual(ConfigManager.load_config(), ConfigManager.DEFAULTS)

    def test_load_empty_file(self):
        self.config_path.write_text("", encoding="utf-8")
        self.assertEqual(ConfigManager.load_config(), ConfigManager.DEFAULTS)

    def test_save_rejects_invalid(self):
        bad_configs = [
            {"theme_mode": "Neon"},
            {"theme_mode": 1},
            {"language": None},
            {"high_contrast": "yes"},
            {"secret_length": 33},
            {"secret_length": True},
            {"status_clear_seconds": 0},
            {"status_clear_seconds": False},
        ]
        for bad in bad_configs:
            with self.subTest(bad=bad):
                with self.assertRaises(ValueError):
                    ConfigManager.save_config(bad)
        self.assertFalse(self.config_path.exists())

    def test_validate_requires_dict(self):
        with self.assertRaises(ValueError):
            ConfigManager._validate_config(["not", "a", "dict"])

    def test_save_cleans_temp_file_on_failure(self):
        with patch("config_manager.os.replace", side_effect=OSError("disk full")):
            with self.assertRaises(OSError):
                ConfigManager.save_config({"language": "en"})
        leftovers = list(Path(self.tmp_dir.name).glob(".config_tmp_*"))
        self.assertEqual(leftovers, [])
