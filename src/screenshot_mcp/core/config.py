"""
Configuration Module for the Web Screenshot Tool.

Description:
This module centralizes runtime settings for the capture routine and the MCP
server. Values are read from environment variables (optionally loaded from a
.env file) and fall back to the defaults in constants.py.

Third-Party Package Documentation:
- python-dotenv: https://github.com/theskumar/python-dotenv
- Pydantic: https://docs.pydantic.dev/

Sample Input:
Environment variables (e.g., in .env file or exported):
SCREENSHOT_NAVIGATION_TIMEOUT_MS=30000
SCREENSHOT_BROWSER="firefox"
SCREENSHOT_HEADLESS=false
SCREENSHOT_DISABLE_AUTO_SCROLL=true
SCREENSHOT_LOG_LEVEL="DEBUG"

Expected Output (when imported):
from screenshot_mcp.core.config import get_settings
settings = get_settings()
print(settings.navigation_timeout_ms)  # 30000
"""

import os
from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field

from screenshot_mcp.core.constants import NAVIGATION_SETTINGS

# Load environment variables from .env file if it exists
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


class CaptureSettings(BaseModel):
    """Snapshot of the environment-driven settings"""
    navigation_timeout_ms: int = Field(default=NAVIGATION_SETTINGS["TIMEOUT_MS"], gt=0)
    browser: str = NAVIGATION_SETTINGS["BROWSER"]
    headless: bool = NAVIGATION_SETTINGS["HEADLESS"]
    disable_auto_scroll: bool = False
    log_level: str = "INFO"


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}: not an integer, using {default}")
        return default
    if parsed <= 0:
        logger.warning(f"Ignoring {name}={value!r}: must be positive, using {default}")
        return default
    return parsed


def get_settings() -> CaptureSettings:
    """
    Read settings from the environment.

    Settings are read on every call so that the environment can change
    between captures (and be patched in tests).

    Returns:
        CaptureSettings: Current settings
    """
    return CaptureSettings(
        navigation_timeout_ms=_env_int("SCREENSHOT_NAVIGATION_TIMEOUT_MS", NAVIGATION_SETTINGS["TIMEOUT_MS"]),
        browser=os.environ.get("SCREENSHOT_BROWSER", NAVIGATION_SETTINGS["BROWSER"]),
        headless=_env_flag("SCREENSHOT_HEADLESS", NAVIGATION_SETTINGS["HEADLESS"]),
        disable_auto_scroll=_env_flag("SCREENSHOT_DISABLE_AUTO_SCROLL", False),
        log_level=os.environ.get("SCREENSHOT_LOG_LEVEL", "INFO").upper(),
    )
