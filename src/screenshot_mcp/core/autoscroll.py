#!/usr/bin/env python3
"""
Auto-Scroll for Lazy-Loaded Content

Scrolls a Playwright page to the bottom one viewport at a time so that
images and other elements loaded on viewport intersection are fetched before
a full-page screenshot is taken.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- page (playwright.async_api.Page), scroll_delay_ms=300, element_delay_ms=100

Expected output:
- Number of scroll steps performed (int)
"""

import asyncio
from typing import Any

from loguru import logger

from screenshot_mcp.core.constants import SCROLL_SETTINGS

SCROLL_POSITION_JS = """
() => ({
    scrollY: window.scrollY,
    viewportHeight: window.innerHeight,
    scrollHeight: Math.max(
        document.body ? document.body.scrollHeight : 0,
        document.documentElement ? document.documentElement.scrollHeight : 0
    )
})
"""

# Scrolls by `distance` and returns how many not-yet-loaded images are now visible
SCROLL_STEP_JS = """
(distance) => {
    const pending = Array.from(document.images).filter((img) => !img.complete);
    window.scrollBy(0, distance);
    const viewportHeight = window.innerHeight;
    return pending.filter((img) => {
        const rect = img.getBoundingClientRect();
        return rect.bottom > 0 && rect.top < viewportHeight;
    }).length;
}
"""


async def scroll_page_to_bottom(
    page: Any,
    scroll_delay_ms: int = SCROLL_SETTINGS["SCROLL_DELAY_MS"],
    element_delay_ms: int = SCROLL_SETTINGS["ELEMENT_DELAY_MS"],
    max_steps: int = SCROLL_SETTINGS["MAX_STEPS"]
) -> int:
    """
    Incrementally scroll a page to its bottom.

    Args:
        page: Playwright page (anything with an async evaluate())
        scroll_delay_ms: Pause after every scroll step
        element_delay_ms: Extra pause per lazy image brought into view
        max_steps: Hard limit for pages that keep growing

    Returns:
        int: Number of scroll steps performed
    """
    steps = 0
    last_scroll_y = None

    while steps < max_steps:
        position = await page.evaluate(SCROLL_POSITION_JS)
        scroll_y = position["scrollY"]
        viewport_height = position["viewportHeight"]

        if scroll_y + viewport_height >= position["scrollHeight"]:
            break
        if scroll_y == last_scroll_y:
            # The page refused to move (overflow hidden, fixed-height body)
            logger.debug(f"Scroll position stuck at {scroll_y}, stopping")
            break
        last_scroll_y = scroll_y

        triggered = await page.evaluate(SCROLL_STEP_JS, viewport_height)
        steps += 1

        if triggered:
            await asyncio.sleep(element_delay_ms * triggered / 1000)
        await asyncio.sleep(scroll_delay_ms / 1000)

    if steps >= max_steps:
        logger.warning(f"Auto-scroll stopped after reaching the step limit ({max_steps})")

    return steps
