#!/usr/bin/env python3
"""
Error Classification for Web Screenshot Module

This module maps exceptions raised by the browser engine or the filesystem
onto the closed CaptureErrorType taxonomy.

Checks run in a fixed order: timeout, network failure, permission denied,
then the generic automation failure. The heuristics match the shapes of
Playwright errors (class name, "net::ERR_*" messages) and OSError errno
values.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- playwright.async_api.TimeoutError("Timeout 60000ms exceeded.")
- playwright.async_api.Error("net::ERR_NAME_NOT_RESOLVED at https://nope.invalid/")
- PermissionError(13, "Permission denied")

Expected output:
- CaptureError(type=TIMEOUT_ERROR, message="Screenshot timed out after 60000ms")
- CaptureError(type=NETWORK_ERROR, message="Network error: net::ERR_NAME_NOT_RESOLVED ...")
- CaptureError(type=PERMISSION_ERROR, message="Permission denied: Cannot write to file")
"""

import errno
from typing import Optional

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from screenshot_mcp.core.constants import (
    NAVIGATION_SETTINGS,
    NETWORK_ERROR_MARKERS,
    PERMISSION_ERROR_CODES,
)
from screenshot_mcp.core.models import CaptureError, CaptureErrorType


def error_message(error: BaseException) -> Optional[str]:
    """Best-effort message of an exception, None when it carries none"""
    # Playwright errors expose .message; everything else goes through str()
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    text = str(error)
    return text or None


def is_timeout_error(error: BaseException) -> bool:
    return isinstance(error, PlaywrightTimeoutError) or type(error).__name__ == "TimeoutError"


def is_network_error(error: BaseException) -> bool:
    message = error_message(error) or ""
    return any(marker in message for marker in NETWORK_ERROR_MARKERS)


def is_permission_error(error: BaseException) -> bool:
    if not isinstance(error, OSError) or error.errno is None:
        return False
    return errno.errorcode.get(error.errno) in PERMISSION_ERROR_CODES


def classify_capture_error(
    error: BaseException,
    timeout_ms: int = NAVIGATION_SETTINGS["TIMEOUT_MS"]
) -> CaptureError:
    """
    Convert an exception into a CaptureError.

    Args:
        error: Exception caught during the capture
        timeout_ms: Navigation timeout in effect, reported on timeouts

    Returns:
        CaptureError: Classified error with a human-readable message
    """
    if is_timeout_error(error):
        return CaptureError(
            type=CaptureErrorType.TIMEOUT_ERROR,
            message=f"Screenshot timed out after {timeout_ms}ms"
        )

    if is_network_error(error):
        return CaptureError(
            type=CaptureErrorType.NETWORK_ERROR,
            message=f"Network error: {error_message(error)}"
        )

    if is_permission_error(error):
        return CaptureError(
            type=CaptureErrorType.PERMISSION_ERROR,
            message="Permission denied: Cannot write to file"
        )

    return CaptureError(
        type=CaptureErrorType.PUPPETEER_ERROR,
        message=f"Puppeteer error: {error_message(error) or 'Unknown error'}"
    )
