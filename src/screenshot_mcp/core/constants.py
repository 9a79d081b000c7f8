#!/usr/bin/env python3
"""
Constants for Web Screenshot Module

This module defines constants used throughout the web screenshot functionality,
ensuring consistent configuration across the application.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- None (module contains only constants)

Expected output:
- None (module contains only constants)
"""

from typing import Dict, Any, Tuple

# Viewport used when the caller does not provide width/height
DEFAULT_VIEWPORT: Dict[str, int] = {
    "WIDTH": 1280,
    "HEIGHT": 720,
}

# Browser navigation settings
NAVIGATION_SETTINGS: Dict[str, Any] = {
    "TIMEOUT_MS": 60_000,  # Maximum time to wait for the page to settle
    "WAIT_UNTIL": "networkidle",  # Playwright load state to wait for
    "BROWSER": "chromium",  # Playwright browser type
    "HEADLESS": True,
}

# Auto-scroll cadence for lazy-loaded content
SCROLL_SETTINGS: Dict[str, int] = {
    "SCROLL_DELAY_MS": 300,  # Pause between scroll steps
    "ELEMENT_DELAY_MS": 100,  # Settle time per lazy element brought into view
    "MAX_STEPS": 200,  # Upper bound for infinitely growing pages
}

# Output file naming
FILENAME_PREFIX = "screenshot"
FILENAME_EXTENSION = "png"

# Substrings in engine error messages that indicate a network failure
NETWORK_ERROR_MARKERS: Tuple[str, ...] = ("net::", "ERR_NAME_NOT_RESOLVED")

# errno names that indicate the output file could not be written
PERMISSION_ERROR_CODES: Tuple[str, ...] = ("EACCES", "EPERM")

ALLOWED_URL_SCHEME = "https"

# MCP server / tool identity
SERVER_NAME = "screenshot-mcp-server"
SERVER_VERSION = "1.0.0"
TOOL_NAME = "screenshot"
TOOL_DESCRIPTION = "Capture screenshots of web pages using Puppeteer with lazy loading support"

# Logger name bound on every record emitted by the capture routine
LOGGER_NAME = "mcp:screenshot"

# Logging settings
LOG_MAX_STR_LEN: int = 100  # Maximum string length for truncated logging


if __name__ == "__main__":
    """Validate module constants"""
    import sys

    # List to track all validation failures
    all_validation_failures = []
    total_tests = 0

    # Test 1: Verify default viewport is positive
    total_tests += 1
    for key, value in DEFAULT_VIEWPORT.items():
        if not isinstance(value, int) or value <= 0:
            all_validation_failures.append(f"DEFAULT_VIEWPORT[{key}] should be positive integer, got {value}")

    # Test 2: Verify scroll cadence
    total_tests += 1
    for key, value in SCROLL_SETTINGS.items():
        if not isinstance(value, int) or value <= 0:
            all_validation_failures.append(f"SCROLL_SETTINGS[{key}] should be positive integer, got {value}")

    # Test 3: Verify navigation timeout
    total_tests += 1
    if NAVIGATION_SETTINGS["TIMEOUT_MS"] <= 0:
        all_validation_failures.append(f"Invalid navigation timeout: {NAVIGATION_SETTINGS['TIMEOUT_MS']}")

    # Final validation result
    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)  # Exit with error code
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        print("Constants are valid and ready for use")
        sys.exit(0)  # Exit with success code
