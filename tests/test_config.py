#!/usr/bin/env python3
"""
配置加载测试
"""

import unittest

from creational.config import CreationalConfig, get_config
from creational.exceptions import ConfigError


class TestCreationalConfig(unittest.TestCase):

    def test_defaults(self):
        config = CreationalConfig.from_env({})
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(config.report_format, "text")
        self.assertIsNone(config.wait_timeout)
        self.assertIsNone(config.platform)

    def test_from_env(self):
        config = CreationalConfig.from_env({
            "CREATIONAL_LOG_LEVEL": "debug",
            "CREATIONAL_REPORT_FORMAT": "Markdown",
            "CREATIONAL_WAIT_TIMEOUT": "2.5",
            "CREATIONAL_PLATFORM": "Windows",
        })
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.report_format, "markdown")
        self.assertEqual(config.wait_timeout, 2.5)
        self.assertEqual(config.platform, "Windows")

    def test_invalid_values(self):
        cases = [
            {"CREATIONAL_LOG_LEVEL": "LOUD"},
            {"CREATIONAL_REPORT_FORMAT": "pdf"},
            {"CREATIONAL_WAIT_TIMEOUT": "soon"},
            {"CREATIONAL_WAIT_TIMEOUT": "-1"},
            {"CREATIONAL_WAIT_TIMEOUT": "inf"},
            {"CREATIONAL_WAIT_TIMEOUT": "nan"},
            {"CREATIONAL_PLATFORM": "Amiga"},
        ]
        for env in cases:
            with self.subTest(env=env):
                with self.assertRaises(ConfigError):
                    CreationalConfig.from_env(env)

    def test_to_dict(self):
        data = CreationalConfig(report_format="json").to_dict()
        self.assertEqual(data["report_format"], "json")

    def test_get_config_is_process_wide(self):
        self.assertIs(get_config(), get_config())


if __name__ == "__main__":
    unittest.main(verbosity=2)
