#!/usr/bin/env python3
"""
Web Page Capture Module

This module provides the capture routine: it validates the request, resolves
the viewport and full-page settings, drives a headless browser session from
launch to close, and returns either a CaptureResult or a CaptureError.

Failures are returned as values; no engine, filesystem or validation error
escapes capture_webpage().

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- url="https://example.com"  (full page, 1280x720 viewport)
- url="https://example.com", width=800, height=600  (viewport only)
- url="https://example.com", full_page=False, output_path="/tmp/example.png"

Expected output:
- CaptureResult with:
  - content: [{"type": "text", "text": "Screenshot saved successfully at: <path>"}]
  - metadata: url, filePath, timestamp, viewport, fullPage (resolved values)
- On error: CaptureError(type=<CaptureErrorType>, message=<str>)
"""

from typing import Any, Optional

from loguru import logger as default_logger

from screenshot_mcp.core.autoscroll import scroll_page_to_bottom
from screenshot_mcp.core.browser import BrowserLauncher, browser_session
from screenshot_mcp.core.config import get_settings
from screenshot_mcp.core.constants import LOGGER_NAME, NAVIGATION_SETTINGS, SCROLL_SETTINGS
from screenshot_mcp.core.errors import classify_capture_error
from screenshot_mcp.core.models import (
    CaptureError,
    CaptureErrorType,
    CaptureMetadata,
    CaptureOutcome,
    CaptureRequest,
    CaptureResult,
    TextContent,
    Viewport,
)
from screenshot_mcp.core.utils import iso_timestamp, resolve_capture_settings, truncate_large_value, validate_url


def _image_type(path: str) -> str:
    return "jpeg" if path.lower().endswith((".jpg", ".jpeg")) else "png"


async def capture_webpage(
    url: Any,
    width: Optional[float] = None,
    height: Optional[float] = None,
    full_page: Optional[bool] = None,
    output_path: Optional[str] = None,
    *,
    browser_launcher: Optional[BrowserLauncher] = None,
    logger: Any = None,
    disable_auto_scroll: Optional[bool] = None,
    navigation_timeout_ms: Optional[int] = None,
    scroll_delay_ms: int = SCROLL_SETTINGS["SCROLL_DELAY_MS"],
    element_delay_ms: int = SCROLL_SETTINGS["ELEMENT_DELAY_MS"]
) -> CaptureOutcome:
    """
    Capture a screenshot of a web page.

    Args:
        url: Absolute https URL of the page
        width: Viewport width; disables full-page capture when given
        height: Viewport height; disables full-page capture when given
        full_page: Capture the whole document (default True without custom viewport)
        output_path: Where to write the image (default: timestamped PNG in cwd)
        browser_launcher: Async factory returning a browser, used instead of Playwright
        logger: loguru-compatible logger (default: loguru bound to "mcp:screenshot")
        disable_auto_scroll: Skip lazy-load scrolling (default from settings)
        navigation_timeout_ms: Navigation timeout (default from settings)
        scroll_delay_ms: Pause between auto-scroll steps
        element_delay_ms: Pause per lazy element triggered by a scroll step

    Returns:
        CaptureOutcome: CaptureResult on success, CaptureError otherwise
    """
    log = logger or default_logger.bind(name=LOGGER_NAME)
    settings = get_settings()
    timeout_ms = navigation_timeout_ms or settings.navigation_timeout_ms
    if disable_auto_scroll is None:
        disable_auto_scroll = settings.disable_auto_scroll

    log.info(
        f"Capture requested: url={truncate_large_value(url)}, width={width}, height={height}, "
        f"full_page={full_page}, output_path={output_path}"
    )

    is_valid, error = validate_url(url)
    if not is_valid:
        log.warning(error)
        return CaptureError(type=CaptureErrorType.INVALID_URL, message=error)

    try:
        resolved = resolve_capture_settings(width, height, full_page, output_path)
        viewport = {"width": resolved["width"], "height": resolved["height"]}
        resolved_full_page = resolved["full_page"]
        path = resolved["output_path"]

        log.debug(
            f"Capture configuration: viewport={viewport}, full_page={resolved_full_page} "
            f"(has_custom_viewport={resolved['has_custom_viewport']}), output_path={path}, "
            f"timeout={timeout_ms}ms"
        )

        async with browser_session(
            launcher=browser_launcher,
            browser_type=settings.browser,
            headless=settings.headless
        ) as browser:
            page = await browser.new_page()
            await page.set_viewport_size(viewport)
            await page.goto(url, wait_until=NAVIGATION_SETTINGS["WAIT_UNTIL"], timeout=timeout_ms)

            if resolved_full_page and not disable_auto_scroll:
                log.debug("Starting auto-scroll for lazy loading images")
                steps = await scroll_page_to_bottom(
                    page,
                    scroll_delay_ms=scroll_delay_ms,
                    element_delay_ms=element_delay_ms
                )
                log.debug(f"Auto-scroll completed, scrolled {steps} times")

            await page.screenshot(path=path, full_page=resolved_full_page, type=_image_type(path))
            await page.close()

        metadata = CaptureMetadata(
            url=url,
            file_path=path,
            timestamp=iso_timestamp(),
            viewport=Viewport(**viewport),
            full_page=resolved_full_page
        )

        log.info(f"Screenshot captured successfully: {path}")
        return CaptureResult(
            content=[TextContent(text=f"Screenshot saved successfully at: {path}")],
            metadata=metadata
        )

    except Exception as e:
        log.error(f"Screenshot error: {type(e).__name__}: {e}")
        return classify_capture_error(e, timeout_ms)


async def capture_request(request: CaptureRequest, **options: Any) -> CaptureOutcome:
    """
    Run capture_webpage() for a CaptureRequest.

    Args:
        request: Capture arguments
        **options: Keyword options forwarded to capture_webpage()

    Returns:
        CaptureOutcome: CaptureResult on success, CaptureError otherwise
    """
    return await capture_webpage(
        request.url,
        width=request.width,
        height=request.height,
        full_page=request.full_page,
        output_path=request.output_path,
        **options
    )


if __name__ == "__main__":
    """Capture a page from the command line: python -m screenshot_mcp.core.capture <url> [output]"""
    import asyncio
    import sys

    target = sys.argv[1] if len(sys.argv) > 1 else "https://example.com"
    output = sys.argv[2] if len(sys.argv) > 2 else None

    outcome = asyncio.run(capture_webpage(target, output_path=output))
    if isinstance(outcome, CaptureError):
        print(f"❌ {outcome.type.value}: {outcome.message}")
        sys.exit(1)
    print(f"✅ {outcome.content[0].text}")
    sys.exit(0)
