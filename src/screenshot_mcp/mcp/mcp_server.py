#!/usr/bin/env python3
"""
MCP Server Entry Point for Web Screenshot Tool

This is the main entry point for the screenshot MCP server, designed to be
directly referenced in the .mcp.json configuration. The server talks MCP
over stdio, so all log output goes to stderr and the log file.

This module is part of the Integration Layer and connects the MCP functionality
to the application core.
"""

import os
import sys
import argparse
import asyncio
import json
import platform
from importlib.metadata import PackageNotFoundError, version
from typing import Dict, Any

from loguru import logger

from screenshot_mcp.core.browser import browser_session
from screenshot_mcp.core.config import get_settings
from screenshot_mcp.core.constants import SERVER_NAME, SERVER_VERSION, TOOL_NAME
from screenshot_mcp.mcp.mcp_tools import create_mcp_server


def ensure_log_directory() -> None:
    """Ensure log directory exists"""
    os.makedirs("logs", exist_ok=True)


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging with proper format and level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    ensure_log_directory()

    # Remove default handlers
    logger.remove()

    # Add file logger
    logger.add(
        "logs/mcp_server.log",
        rotation="10 MB",
        retention="1 week",
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]} | {message}"
    )

    # stdout carries the MCP protocol, so visible output goes to stderr
    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | {message}",
        level=level,
        colorize=True
    )

    logger.configure(extra={"name": "screenshot_mcp"})


def _package_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "unknown"


def get_server_info() -> Dict[str, Any]:
    """
    Get server information.

    Returns:
        Dict[str, Any]: Server information
    """
    return {
        "name": SERVER_NAME,
        "version": SERVER_VERSION,
        "description": "Captures screenshots of web pages with a headless browser",
        "tools": [TOOL_NAME],
        "transport": "stdio",
    }


async def _launch_probe() -> None:
    settings = get_settings()
    async with browser_session(browser_type=settings.browser, headless=True) as browser:
        page = await browser.new_page()
        await page.close()


def health_check() -> Dict[str, Any]:
    """
    Perform a health check by launching and closing the configured browser.

    Returns:
        Dict[str, Any]: Health check results
    """
    settings = get_settings()
    try:
        asyncio.run(_launch_probe())
        return {
            "status": "healthy",
            "platform": platform.system(),
            "python_version": platform.python_version(),
            "browser": settings.browser,
            "playwright_version": _package_version("playwright"),
            "mcp_version": _package_version("mcp"),
        }
    except Exception as e:
        return {
            "status": "unhealthy",
            "browser": settings.browser,
            "error": str(e),
        }


async def get_tool_schemas() -> Dict[str, Any]:
    """
    List the registered tools with their input schemas.

    Returns:
        Dict[str, Any]: Tool name -> {"description", "inputSchema"}
    """
    mcp = create_mcp_server()
    tools = await mcp.list_tools()
    return {
        tool.name: {"description": tool.description, "inputSchema": tool.inputSchema}
        for tool in tools
    }


def main() -> int:
    """
    Main entry point for the MCP server.

    Returns:
        int: Exit code
    """
    parser = argparse.ArgumentParser(description="Web Screenshot MCP Server")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Start server command
    start_parser = subparsers.add_parser("start", help="Start the MCP server on stdio")
    start_parser.add_argument("--debug", action="store_true", help="Enable debug mode")

    # Health check command
    subparsers.add_parser("health", help="Check that the browser can be launched")

    # Info command
    subparsers.add_parser("info", help="Display server information")

    # Schema command
    subparsers.add_parser("schema", help="Display tool schema as JSON")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "start":
        # Configure logging
        log_level = "DEBUG" if args.debug else get_settings().log_level
        configure_logging(log_level)

        logger.info(f"Starting {SERVER_NAME} v{SERVER_VERSION} (debug={args.debug})")

        try:
            mcp = create_mcp_server()
            mcp.run(transport="stdio")
        except KeyboardInterrupt:
            logger.info("Server stopped by user")
            return 0
        except Exception as e:
            logger.error(f"Server failed to start: {str(e)}")
            return 1

    elif args.command == "health":
        result = health_check()
        print(json.dumps(result, indent=2))
        return 0 if result["status"] == "healthy" else 1

    elif args.command == "info":
        print(json.dumps(get_server_info(), indent=2))
        return 0

    elif args.command == "schema":
        print(json.dumps(asyncio.run(get_tool_schemas()), indent=2))
        return 0

    return 0


if __name__ == "__main__":
    """
    Direct entry point for the screenshot MCP server.
    This file is designed to be referenced in .mcp.json.

    Usage:
      python -m screenshot_mcp.mcp.mcp_server start [--debug]
      python -m screenshot_mcp.mcp.mcp_server health
      python -m screenshot_mcp.mcp.mcp_server info
      python -m screenshot_mcp.mcp.mcp_server schema
    """
    sys.exit(main())
