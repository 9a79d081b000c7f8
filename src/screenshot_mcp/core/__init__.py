"""
Core Layer for Web Screenshot Module

This package contains the core business logic for capturing web page
screenshots with a headless browser.

The core layer is designed to:
1. Be independent of UI or integration concerns
2. Return errors as values instead of raising them
3. Accept injected collaborators (browser launcher, logger) for testing

Usage:
    import asyncio
    from screenshot_mcp.core import capture_webpage, is_error
    outcome = asyncio.run(capture_webpage("https://example.com", width=800, height=600))
    if not is_error(outcome):
        print(outcome.metadata.file_path)
"""

# Core constants and settings
from screenshot_mcp.core.constants import (
    DEFAULT_VIEWPORT,
    NAVIGATION_SETTINGS,
    SCROLL_SETTINGS,
    SERVER_NAME,
    SERVER_VERSION,
    TOOL_NAME,
    TOOL_DESCRIPTION
)
from screenshot_mcp.core.config import CaptureSettings, get_settings

# Value models
from screenshot_mcp.core.models import (
    CaptureRequest,
    CaptureResult,
    CaptureMetadata,
    CaptureError,
    CaptureErrorType,
    CaptureOutcome,
    TextContent,
    Viewport,
    is_error
)

# Capture routine
from screenshot_mcp.core.capture import capture_webpage, capture_request
from screenshot_mcp.core.browser import browser_session
from screenshot_mcp.core.autoscroll import scroll_page_to_bottom
from screenshot_mcp.core.errors import classify_capture_error

# Utility functions
from screenshot_mcp.core.utils import (
    validate_url,
    resolve_capture_settings,
    generate_filename,
    iso_timestamp,
    truncate_large_value
)

__all__ = [
    # Constants
    'DEFAULT_VIEWPORT',
    'NAVIGATION_SETTINGS',
    'SCROLL_SETTINGS',
    'SERVER_NAME',
    'SERVER_VERSION',
    'TOOL_NAME',
    'TOOL_DESCRIPTION',

    # Configuration
    'CaptureSettings',
    'get_settings',

    # Models
    'CaptureRequest',
    'CaptureResult',
    'CaptureMetadata',
    'CaptureError',
    'CaptureErrorType',
    'CaptureOutcome',
    'TextContent',
    'Viewport',
    'is_error',

    # Capture
    'capture_webpage',
    'capture_request',
    'browser_session',
    'scroll_page_to_bottom',
    'classify_capture_error',

    # Utilities
    'validate_url',
    'resolve_capture_settings',
    'generate_filename',
    'iso_timestamp',
    'truncate_large_value'
]
