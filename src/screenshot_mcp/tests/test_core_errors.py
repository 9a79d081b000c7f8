#!/usr/bin/env python3
"""
Unit tests for core/errors.py
"""

import errno
import os
import sys
import unittest

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

# Add parent directory to path to import module
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from screenshot_mcp.core.errors import classify_capture_error
from screenshot_mcp.core.models import CaptureErrorType


class TestClassifyCaptureError(unittest.TestCase):
    """Test cases for error classification"""

    def test_playwright_timeout(self):
        error = classify_capture_error(PlaywrightTimeoutError("Timeout 60000ms exceeded."), 60000)
        self.assertEqual(error.type, CaptureErrorType.TIMEOUT_ERROR)
        self.assertEqual(error.message, "Screenshot timed out after 60000ms")

    def test_builtin_timeout(self):
        error = classify_capture_error(TimeoutError(), 30000)
        self.assertEqual(error.type, CaptureErrorType.TIMEOUT_ERROR)
        self.assertEqual(error.message, "Screenshot timed out after 30000ms")

    def test_timeout_checked_before_network(self):
        error = classify_capture_error(PlaywrightTimeoutError("net::ERR_TIMED_OUT"))
        self.assertEqual(error.type, CaptureErrorType.TIMEOUT_ERROR)

    def test_network_markers(self):
        for message in (
            "net::ERR_CONNECTION_REFUSED at https://localhost:1/",
            "page.goto: ERR_NAME_NOT_RESOLVED",
        ):
            error = classify_capture_error(PlaywrightError(message))
            self.assertEqual(error.type, CaptureErrorType.NETWORK_ERROR)
            self.assertEqual(error.message, f"Network error: {message}")

    def test_network_marker_in_plain_exception(self):
        error = classify_capture_error(RuntimeError("net::ERR_INTERNET_DISCONNECTED"))
        self.assertEqual(error.type, CaptureErrorType.NETWORK_ERROR)

    def test_permission_codes(self):
        for code in (errno.EACCES, errno.EPERM):
            error = classify_capture_error(OSError(code, os.strerror(code)))
            self.assertEqual(error.type, CaptureErrorType.PERMISSION_ERROR)
            self.assertEqual(error.message, "Permission denied: Cannot write to file")

    def test_other_os_error(self):
        error = classify_capture_error(FileNotFoundError(errno.ENOENT, "No such file or directory"))
        self.assertEqual(error.type, CaptureErrorType.PUPPETEER_ERROR)
        self.assertIn("No such file or directory", error.message)

    def test_generic_error(self):
        error = classify_capture_error(ValueError("Unknown browser type: opera"))
        self.assertEqual(error.type, CaptureErrorType.PUPPETEER_ERROR)
        self.assertEqual(error.message, "Puppeteer error: Unknown browser type: opera")

    def test_error_without_message(self):
        error = classify_capture_error(Exception())
        self.assertEqual(error.message, "Puppeteer error: Unknown error")


if __name__ == "__main__":
    unittest.main()
