#!/usr/bin/env python3
"""
Browser Session Management

This module provides the scoped acquisition of a headless browser for a
single capture. The browser comes either from an injected launcher (tests,
callers that manage their own browser pool) or from a fresh Playwright
instance, and is closed on every exit path.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- async with browser_session() as browser: ...
- async with browser_session(launcher=my_async_factory) as browser: ...

Expected output:
- A Playwright Browser, closed when the block exits
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, Optional

from loguru import logger
from playwright.async_api import async_playwright

from screenshot_mcp.core.constants import NAVIGATION_SETTINGS

BrowserLauncher = Callable[[], Awaitable[Any]]


@asynccontextmanager
async def browser_session(
    launcher: Optional[BrowserLauncher] = None,
    browser_type: str = NAVIGATION_SETTINGS["BROWSER"],
    headless: bool = NAVIGATION_SETTINGS["HEADLESS"]
) -> AsyncIterator[Any]:
    """
    Acquire a browser for the duration of the block.

    Args:
        launcher: Optional async factory returning a browser
        browser_type: Playwright browser type (chromium, firefox, webkit)
        headless: Launch without a visible window

    Yields:
        Browser: The acquired browser
    """
    if launcher is not None:
        browser = await launcher()
        try:
            yield browser
        finally:
            logger.debug("Closing injected browser")
            await browser.close()
        return

    async with async_playwright() as playwright:
        engine = getattr(playwright, browser_type, None)
        if engine is None:
            raise ValueError(f"Unknown browser type: {browser_type}")

        logger.debug(f"Launching {browser_type} (headless={headless})")
        browser = await engine.launch(headless=headless)
        try:
            yield browser
        finally:
            logger.debug(f"Closing {browser_type}")
            await browser.close()
