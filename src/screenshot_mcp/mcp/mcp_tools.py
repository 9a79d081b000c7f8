#!/usr/bin/env python3
"""
MCP Tools for Web Screenshot Module

This module provides the MCP tool definition for web page screenshots and
the factory that builds a configured FastMCP server.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
- MCP server configuration

Expected output:
- Configured MCP server with the "screenshot" tool registered
"""

from typing import Any, Optional

from loguru import logger
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult

from screenshot_mcp.core.constants import SERVER_NAME, TOOL_DESCRIPTION, TOOL_NAME
from screenshot_mcp.mcp.wrappers import handle_screenshot


def create_mcp_server(name: str = SERVER_NAME, **capture_options: Any) -> FastMCP:
    """
    Create and configure MCP server with the screenshot tool

    Args:
        name: Name for the MCP server
        **capture_options: Options forwarded to every capture
            (browser_launcher, disable_auto_scroll, navigation_timeout_ms, ...)

    Returns:
        FastMCP: Configured MCP server instance
    """
    mcp = FastMCP(name)
    logger.info(f"Initialized FastMCP server: {name}")

    register_screenshot_tool(mcp, **capture_options)

    return mcp


def register_screenshot_tool(mcp: FastMCP, **capture_options: Any) -> None:
    """
    Register screenshot tool with the MCP server

    Args:
        mcp: MCP server instance
        **capture_options: Options forwarded to every capture
    """
    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION, structured_output=False)
    async def screenshot(
        url: str,
        width: Optional[float] = None,
        height: Optional[float] = None,
        fullPage: Optional[bool] = None,
        outputPath: Optional[str] = None
    ) -> CallToolResult:
        """
        Captures a screenshot of a web page and saves it as an image file.

        Args:
            url (str): Absolute https URL of the page to capture.
            width (number, optional): Viewport width. Disables full-page capture. Defaults to 1280.
            height (number, optional): Viewport height. Disables full-page capture. Defaults to 720.
            fullPage (bool, optional): Capture the whole scrollable page. Defaults to True
                                       unless width or height is given.
            outputPath (str, optional): File to write. Defaults to a timestamped PNG
                                        in the server's working directory.

        Returns:
            CallToolResult: text item naming the saved file plus metadata,
            or a single "Error: ..." text item with isError set.
        """
        logger.info(f"Screenshot requested for url={url}")
        return await handle_screenshot(url, width, height, fullPage, outputPath, **capture_options)

    logger.debug(f"Registered tool: {TOOL_NAME}")
