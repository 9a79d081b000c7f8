"""
In-memory stand-ins for a Playwright browser and page.

Only the calls made by the capture routine are modelled; every coroutine is
an AsyncMock so tests can inspect awaits and inject failures.
"""

from unittest.mock import AsyncMock, MagicMock


def make_page(scroll_height: int = 720, viewport_height: int = 720) -> MagicMock:
    """Page whose document fits in one viewport unless scroll_height says otherwise"""
    page = MagicMock(name="page")
    page.set_viewport_size = AsyncMock()
    page.goto = AsyncMock()
    page.screenshot = AsyncMock(return_value=b"")
    page.close = AsyncMock()
    page.evaluate = AsyncMock(
        return_value={"scrollY": 0, "viewportHeight": viewport_height, "scrollHeight": scroll_height}
    )
    return page


def make_browser(page: MagicMock = None) -> MagicMock:
    browser = MagicMock(name="browser")
    browser.page = page or make_page()
    browser.new_page = AsyncMock(return_value=browser.page)
    browser.close = AsyncMock()
    return browser


def make_launcher(browser: MagicMock) -> AsyncMock:
    """Async factory returning the given browser"""
    return AsyncMock(return_value=browser)
