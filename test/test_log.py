"""Tests for logger configuration."""

import logging
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QuerySieve.utils.log import configure_logging, log


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        for handler in log.handlers:
            handler.close()
        log.handlers.clear()
        log.addHandler(logging.NullHandler())

    def test_run_file_gets_abbreviated_levels(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging(level="WARNING", action="parse", log_to_file=True, log_dir=tmp)
            log.debug("detail line")
            log.warning("careful")
            for handler in log.handlers:
                handler.flush()

            files = list((Path(tmp) / "parse").glob("parse_*.log"))
            self.assertEqual(len(files), 1)
            text = files[0].read_text(encoding="utf-8")
            self.tearDown()

        self.assertIn("[DEBG] detail line", text)
        self.assertIn("[WARN] careful", text)

    def test_console_only_without_action(self) -> None:
        configure_logging(level="debug", log_to_file=True)
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.handlers[0].level, logging.DEBUG)
        self.assertFalse(log.propagate)

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging(level="chatty")
        self.assertEqual(log.handlers[0].level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
