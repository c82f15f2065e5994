"""
Unit tests for logging configuration.
"""

import importlib
import io
import unittest
from contextlib import redirect_stderr

import structlog

import mediyap.log
from mediyap import MedicalDecoder
from mediyap.log import configure_logging


class TestLogging(unittest.TestCase):
    """Test cases for structlog setup."""

    def tearDown(self):
        """Restore the package's own configuration."""
        structlog.reset_defaults()
        configure_logging()

    def test_import_keeps_host_configuration(self):
        """Test importing the package leaves an existing structlog setup untouched."""
        renderer = structlog.processors.JSONRenderer()
        structlog.configure(processors=[renderer])

        importlib.reload(mediyap.log)

        self.assertEqual(structlog.get_config()["processors"], [renderer])

    def test_import_configures_when_unset(self):
        """Test importing the package configures structlog when nothing else has."""
        structlog.reset_defaults()
        self.assertFalse(structlog.is_configured())

        importlib.reload(mediyap.log)

        self.assertTrue(structlog.is_configured())

    def test_configure_logging_level(self):
        """Test an explicit level and JSON format are applied."""
        configure_logging("debug", json_format=True)
        processors = structlog.get_config()["processors"]
        self.assertIsInstance(processors[-1], structlog.processors.JSONRenderer)

    def test_decode_logs_morphemes_at_debug(self):
        """Test decode reports its segmentation only when debug logging is on."""
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            configure_logging()
            MedicalDecoder().decode("nephritis")
        self.assertEqual(stderr.getvalue(), "")

        with redirect_stderr(stderr):
            configure_logging("debug")
            MedicalDecoder().decode("nephritis")
        self.assertIn("decoded", stderr.getvalue())
        self.assertIn("suffix:itis", stderr.getvalue())


if __name__ == '__main__':
    unittest.main()
