#!/usr/bin/env python3
"""
Utility Functions for Web Screenshot Module

This module provides common utility functions used by other core modules.
It includes URL validation, viewport/full-page resolution, timestamps and
output file naming.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- validate_url("https://example.com")
- resolve_capture_settings(width=800, height=None, full_page=True, output_path=None)

Expected output:
- (True, None)
- {"width": 800, "height": 720, "full_page": False, "output_path": "/cwd/screenshot-....png",
   "has_custom_viewport": True}
"""

import os
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlparse

from loguru import logger

from screenshot_mcp.core.constants import (
    ALLOWED_URL_SCHEME,
    DEFAULT_VIEWPORT,
    FILENAME_EXTENSION,
    FILENAME_PREFIX,
    LOG_MAX_STR_LEN,
)

# Registered names (including IDN labels) and IPv4 literals; urlparse strips IPv6 brackets
HOST_PATTERN = re.compile(r"^[\w-]+(\.[\w-]+)*\.?$")
IPV6_HOST_PATTERN = re.compile(r"^[0-9a-f:.]+$")


def truncate_large_value(value: Any, max_str_len: int = LOG_MAX_STR_LEN) -> Any:
    """
    Truncates large string values for logging purposes.

    Args:
        value: The value to truncate
        max_str_len: Maximum string length to allow

    Returns:
        The value, truncated if it is a long string
    """
    if isinstance(value, str) and len(value) > max_str_len:
        return f"{value[:max_str_len]}... [truncated, {len(value)} chars total]"
    return value


def validate_url(url: Any) -> Tuple[bool, Optional[str]]:
    """
    Validates that url is a non-empty, absolute https URL.

    Checks run in order: type/emptiness, parseability, scheme, host.

    Args:
        url: Candidate URL (any type)

    Returns:
        Tuple[bool, Optional[str]]: (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, f"Invalid URL provided: {url}. URL must be a non-empty string."

    try:
        parsed = urlparse(url)
        # Accessing port validates the netloc (raises ValueError on garbage)
        parsed.port
    except ValueError:
        return False, f"Invalid URL format: {url}"

    if not parsed.scheme:
        return False, f"Invalid URL format: {url}"

    if parsed.scheme != ALLOWED_URL_SCHEME:
        return False, f"Only HTTPS URLs are allowed. Got: {parsed.scheme}:"

    host = parsed.hostname
    if not host or not (HOST_PATTERN.match(host) or IPV6_HOST_PATTERN.match(host)):
        return False, f"Invalid URL format: {url}"

    return True, None


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """
    Formats a UTC timestamp as ISO-8601 with millisecond precision.

    Args:
        now: Time to format (defaults to the current time)

    Returns:
        str: e.g. "2024-05-01T12:30:45.123Z"
    """
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def generate_filename(
    prefix: str = FILENAME_PREFIX,
    extension: str = FILENAME_EXTENSION,
    now: Optional[datetime] = None
) -> str:
    """
    Generates a filename from the current ISO timestamp.

    ':' and '.' in the timestamp are replaced by '-' so the name is valid on
    every filesystem.

    Args:
        prefix: Filename prefix
        extension: File extension without dot
        now: Time to embed (defaults to the current time)

    Returns:
        str: e.g. "screenshot-2024-05-01T12-30-45-123Z.png"
    """
    timestamp = iso_timestamp(now).replace(":", "-").replace(".", "-")
    return f"{prefix}-{timestamp}.{extension}"


def resolve_capture_settings(
    width: Optional[float] = None,
    height: Optional[float] = None,
    full_page: Optional[bool] = None,
    output_path: Optional[str] = None
) -> Dict[str, Any]:
    """
    Derives the effective viewport, full-page flag and output path.

    An explicit width or height always disables full-page capture, even when
    full_page=True was requested.

    Args:
        width: Requested viewport width
        height: Requested viewport height
        full_page: Requested full-page flag
        output_path: Requested output path

    Returns:
        Dict[str, Any]: width, height, full_page, output_path, has_custom_viewport
    """
    has_custom_viewport = width is not None or height is not None

    resolved_width = int(width) if width else DEFAULT_VIEWPORT["WIDTH"]
    resolved_height = int(height) if height else DEFAULT_VIEWPORT["HEIGHT"]

    if has_custom_viewport:
        resolved_full_page = False
    elif full_page is not None:
        resolved_full_page = bool(full_page)
    else:
        resolved_full_page = True

    resolved_output_path = output_path or os.path.join(os.getcwd(), generate_filename())

    if has_custom_viewport and full_page:
        logger.debug("fullPage ignored because a custom viewport was provided")

    return {
        "width": resolved_width,
        "height": resolved_height,
        "full_page": resolved_full_page,
        "output_path": resolved_output_path,
        "has_custom_viewport": has_custom_viewport,
    }


if __name__ == "__main__":
    """Validate utility functions"""
    import sys

    # List to track all validation failures
    all_validation_failures = []
    total_tests = 0

    # Test 1: https URL accepted, http rejected
    total_tests += 1
    if validate_url("https://example.com") != (True, None):
        all_validation_failures.append("https URL should be valid")
    if validate_url("http://example.com")[0]:
        all_validation_failures.append("http URL should be rejected")

    # Test 2: custom viewport disables full page
    total_tests += 1
    settings = resolve_capture_settings(width=800, height=600, full_page=True, output_path="out.png")
    if settings["full_page"] or settings["width"] != 800 or settings["output_path"] != "out.png":
        all_validation_failures.append(f"Unexpected settings: {settings}")

    # Test 3: filename format
    total_tests += 1
    name = generate_filename()
    if not name.startswith("screenshot-") or ":" in name or not name.endswith(".png"):
        all_validation_failures.append(f"Unexpected filename: {name}")

    # Final validation result
    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)  # Exit with error code
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        print("Utility functions are validated and ready for use")
        sys.exit(0)  # Exit with success code
