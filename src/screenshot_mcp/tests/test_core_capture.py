#!/usr/bin/env python3
"""
Unit tests for core/capture.py
"""

import errno
import os
import re
import sys
import unittest
from unittest.mock import AsyncMock, MagicMock

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

# Add parent directory to path to import module
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from fakes import make_browser, make_launcher, make_page
from screenshot_mcp.core.capture import capture_webpage, capture_request
from screenshot_mcp.core.models import CaptureError, CaptureErrorType, CaptureRequest, CaptureResult


class CaptureTestCase(unittest.IsolatedAsyncioTestCase):
    """Shared fake browser setup"""

    def setUp(self):
        self.browser = make_browser()
        self.page = self.browser.page
        self.launcher = make_launcher(self.browser)

    async def capture(self, url="https://example.com", **kwargs):
        kwargs.setdefault("output_path", "/tmp/shot.png")
        return await capture_webpage(
            url,
            browser_launcher=self.launcher,
            scroll_delay_ms=0,
            element_delay_ms=0,
            **kwargs
        )


class TestUrlValidation(CaptureTestCase):
    """Invalid URLs never reach the browser"""

    async def assert_invalid(self, url, fragment):
        outcome = await self.capture(url)
        self.assertIsInstance(outcome, CaptureError)
        self.assertEqual(outcome.type, CaptureErrorType.INVALID_URL)
        self.assertIn(fragment, outcome.message)
        self.launcher.assert_not_awaited()

    async def test_empty_url(self):
        await self.assert_invalid("", "must be a non-empty string")

    async def test_missing_url(self):
        await self.assert_invalid(None, "must be a non-empty string")

    async def test_non_string_url(self):
        await self.assert_invalid(12345, "must be a non-empty string")

    async def test_unparseable_url(self):
        await self.assert_invalid("not a url", "Invalid URL format")

    async def test_http_rejected(self):
        await self.assert_invalid("http://example.com", "Only HTTPS URLs are allowed. Got: http:")

    async def test_ftp_rejected(self):
        await self.assert_invalid("ftp://example.com/file", "Got: ftp:")

    async def test_credentials_without_host(self):
        await self.assert_invalid("https://user@", "Invalid URL format")

    async def test_port_without_host(self):
        await self.assert_invalid("https://:443", "Invalid URL format")

    async def test_whitespace_in_host(self):
        await self.assert_invalid("https://exa mple.com", "Invalid URL format")

    async def test_ipv6_host_accepted(self):
        outcome = await self.capture("https://[::1]:8443/")
        self.assertIsInstance(outcome, CaptureResult)
        self.launcher.assert_awaited_once()


class TestResolvedSettings(CaptureTestCase):
    """Viewport / full-page decision table"""

    async def test_custom_viewport_disables_full_page(self):
        outcome = await self.capture(width=800, height=600, full_page=True)

        self.assertIsInstance(outcome, CaptureResult)
        self.assertFalse(outcome.metadata.full_page)
        self.assertEqual(outcome.metadata.viewport.width, 800)
        self.assertEqual(outcome.metadata.viewport.height, 600)
        self.page.set_viewport_size.assert_awaited_once_with({"width": 800, "height": 600})
        self.assertFalse(self.page.screenshot.await_args.kwargs["full_page"])
        # No auto-scroll for viewport captures
        self.page.evaluate.assert_not_awaited()

    async def test_width_only_uses_default_height(self):
        outcome = await self.capture(width=1024)

        self.assertFalse(outcome.metadata.full_page)
        self.assertEqual(outcome.metadata.viewport.width, 1024)
        self.assertEqual(outcome.metadata.viewport.height, 720)

    async def test_defaults_to_full_page(self):
        outcome = await self.capture()

        self.assertTrue(outcome.metadata.full_page)
        self.assertEqual(outcome.metadata.viewport.width, 1280)
        self.assertEqual(outcome.metadata.viewport.height, 720)
        self.assertTrue(self.page.screenshot.await_args.kwargs["full_page"])
        # Auto-scroll ran (one position check, page already at the bottom)
        self.page.evaluate.assert_awaited()

    async def test_explicit_full_page_false(self):
        outcome = await self.capture(full_page=False)

        self.assertFalse(outcome.metadata.full_page)
        self.assertEqual(outcome.metadata.viewport.width, 1280)
        self.assertEqual(outcome.metadata.viewport.height, 720)
        self.page.evaluate.assert_not_awaited()

    async def test_auto_scroll_can_be_disabled(self):
        outcome = await self.capture(disable_auto_scroll=True)

        self.assertTrue(outcome.metadata.full_page)
        self.page.evaluate.assert_not_awaited()

    async def test_output_path_echoed(self):
        outcome = await self.capture(output_path="/tmp/custom/page.png")

        self.assertEqual(outcome.metadata.file_path, "/tmp/custom/page.png")
        self.assertEqual(outcome.content[0].text, "Screenshot saved successfully at: /tmp/custom/page.png")
        self.assertEqual(self.page.screenshot.await_args.kwargs["path"], "/tmp/custom/page.png")

    async def test_default_output_path(self):
        outcome = await capture_webpage(
            "https://example.com",
            browser_launcher=self.launcher,
            disable_auto_scroll=True
        )

        path = outcome.metadata.file_path
        self.assertEqual(os.path.dirname(path), os.getcwd())
        self.assertRegex(
            os.path.basename(path),
            r"^screenshot-\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d{3}Z\.png$"
        )

    async def test_navigation_arguments(self):
        await self.capture(navigation_timeout_ms=30000)

        self.page.goto.assert_awaited_once_with(
            "https://example.com", wait_until="networkidle", timeout=30000
        )

    async def test_metadata_dump_uses_wire_names(self):
        outcome = await self.capture(width=800, height=600)
        data = outcome.to_dict()

        self.assertEqual(data["content"], [{"type": "text", "text": "Screenshot saved successfully at: /tmp/shot.png"}])
        self.assertEqual(data["metadata"]["filePath"], "/tmp/shot.png")
        self.assertEqual(data["metadata"]["viewport"], {"width": 800, "height": 600})
        self.assertIs(data["metadata"]["fullPage"], False)
        self.assertTrue(re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", data["metadata"]["timestamp"]))

    async def test_capture_request(self):
        request = CaptureRequest.model_validate(
            {"url": "https://example.com", "fullPage": False, "outputPath": "/tmp/req.png"}
        )
        outcome = await capture_request(request, browser_launcher=self.launcher)

        self.assertFalse(outcome.metadata.full_page)
        self.assertEqual(outcome.metadata.file_path, "/tmp/req.png")


class TestFailureMapping(CaptureTestCase):
    """Engine and filesystem failures become CaptureError values"""

    async def test_timeout(self):
        self.page.goto.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded.")

        outcome = await self.capture(navigation_timeout_ms=30000)

        self.assertEqual(outcome.type, CaptureErrorType.TIMEOUT_ERROR)
        self.assertIn("30000", outcome.message)
        self.browser.close.assert_awaited_once()

    async def test_network_error(self):
        self.page.goto.side_effect = PlaywrightError(
            "net::ERR_NAME_NOT_RESOLVED at https://does-not-exist.invalid/"
        )

        outcome = await self.capture("https://does-not-exist.invalid/")

        self.assertEqual(outcome.type, CaptureErrorType.NETWORK_ERROR)
        self.assertIn("ERR_NAME_NOT_RESOLVED", outcome.message)
        self.browser.close.assert_awaited_once()

    async def test_permission_error(self):
        self.page.screenshot.side_effect = PermissionError(errno.EACCES, "Permission denied", "/root/x.png")

        outcome = await self.capture(output_path="/root/x.png")

        self.assertEqual(outcome.type, CaptureErrorType.PERMISSION_ERROR)
        self.assertEqual(outcome.message, "Permission denied: Cannot write to file")
        self.browser.close.assert_awaited_once()

    async def test_generic_error(self):
        self.browser.new_page.side_effect = RuntimeError("Target closed")

        outcome = await self.capture()

        self.assertEqual(outcome.type, CaptureErrorType.PUPPETEER_ERROR)
        self.assertEqual(outcome.message, "Puppeteer error: Target closed")
        self.browser.close.assert_awaited_once()

    async def test_error_without_message(self):
        self.page.screenshot.side_effect = RuntimeError()

        outcome = await self.capture()

        self.assertEqual(outcome.type, CaptureErrorType.PUPPETEER_ERROR)
        self.assertEqual(outcome.message, "Puppeteer error: Unknown error")

    async def test_launch_failure(self):
        launcher = AsyncMock(side_effect=PlaywrightError("Executable doesn't exist"))

        outcome = await capture_webpage("https://example.com", browser_launcher=launcher)

        self.assertEqual(outcome.type, CaptureErrorType.PUPPETEER_ERROR)
        self.assertIn("Executable doesn't exist", outcome.message)


class TestResourceRelease(CaptureTestCase):
    """The browser is closed on every path once acquired"""

    async def test_closed_on_success(self):
        outcome = await self.capture()

        self.assertIsInstance(outcome, CaptureResult)
        self.page.close.assert_awaited_once()
        self.browser.close.assert_awaited_once()

    async def test_closed_when_scroll_fails(self):
        self.page.evaluate.side_effect = PlaywrightError("Execution context was destroyed")

        outcome = await self.capture()

        self.assertIsInstance(outcome, CaptureError)
        self.browser.close.assert_awaited_once()

    async def test_closed_when_viewport_fails(self):
        self.page.set_viewport_size.side_effect = PlaywrightError("Protocol error")

        await self.capture()

        self.browser.close.assert_awaited_once()
        self.page.goto.assert_not_awaited()


class TestInjectedLogger(CaptureTestCase):

    async def test_logger_receives_records(self):
        log = MagicMock()

        await self.capture(logger=log)

        self.assertTrue(log.info.called)
        self.assertTrue(any("captured successfully" in str(call.args[0]) for call in log.info.call_args_list))


if __name__ == "__main__":
    unittest.main()
