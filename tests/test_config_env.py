import importlib
import logging
import os
import unittest
from unittest.mock import patch

import fenboard
from fenboard import config


class ConfigEnvTests(unittest.TestCase):
    def test_get_settings_reads_flags_from_env(self) -> None:
        env = {"FENBOARD_ACCEPT_RUN_LENGTHS": "Yes", "FENBOARD_LOG_LEVEL": "debug"}
        with patch.dict(os.environ, env, clear=True):
            with patch("fenboard.config.load_dotenv") as load_dotenv:
                settings = config.get_settings()

        load_dotenv.assert_called_once()
        self.assertTrue(settings.accept_run_lengths)
        self.assertEqual(settings.log_level, "debug")

    def test_defaults_keep_placeholder_grammar(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with patch("fenboard.config.load_dotenv"):
                settings = config.get_settings()

        self.assertFalse(settings.accept_run_lengths)
        self.assertEqual(settings.log_level, "INFO")

    def test_blank_or_unknown_flag_is_false(self) -> None:
        for value in ("", "  ", "nope", "0"):
            with patch.dict(os.environ, {"FENBOARD_ACCEPT_RUN_LENGTHS": value}, clear=True):
                self.assertFalse(config.NotationSettings().accept_run_lengths)


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger("fenboard")
        self.original_level = self.logger.level

    def tearDown(self) -> None:
        self.logger.setLevel(self.original_level)

    def test_configure_logging_applies_level(self) -> None:
        settings = config.NotationSettings(accept_run_lengths=False, log_level="warning")

        returned = config.configure_logging(settings)

        self.assertIs(returned, settings)
        self.assertEqual(self.logger.level, logging.WARNING)

    def test_unknown_level_falls_back_to_info(self) -> None:
        settings = config.NotationSettings(accept_run_lengths=False, log_level="verbose")

        with self.assertLogs("fenboard", level="WARNING") as logs:
            config.configure_logging(settings)

        self.assertTrue(any("Unknown log level 'verbose'" in line for line in logs.output))
        self.assertEqual(self.logger.level, logging.INFO)

    def test_package_imports_with_unknown_level_in_env(self) -> None:
        with patch.dict(os.environ, {"FENBOARD_LOG_LEVEL": "verbose"}, clear=True):
            with patch("fenboard.config.load_dotenv"):
                module = importlib.reload(fenboard)

        self.assertIs(module, fenboard)
        self.assertEqual(self.logger.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
