"""
Web Screenshot MCP Tool

Captures screenshots of web pages with a headless browser and exposes the
capability as an MCP tool.

This package implements a three-layer architecture:

1. Core Layer: capture routine, validation, error classification
2. Presentation Layer: CLI interface with rich formatting
3. Integration Layer: MCP server and tool adapter for AI agent usage

Usage:
    # Direct API usage (Core Layer)
    import asyncio
    from screenshot_mcp.core import capture_webpage
    outcome = asyncio.run(capture_webpage("https://example.com"))

    # CLI usage (Presentation Layer)
    # screenshot-mcp capture https://example.com --width 800 --height 600

    # MCP server usage (Integration Layer)
    # screenshot-mcp-server start
"""

# Core functionality
from screenshot_mcp.core import (
    capture_webpage,
    capture_request,
    CaptureRequest,
    CaptureResult,
    CaptureError,
    CaptureErrorType,
    is_error
)

# CLI layer
from screenshot_mcp.cli import app as cli_app

# MCP layer
from screenshot_mcp.mcp import create_mcp_server

__version__ = "1.0.0"

__all__ = [
    # Core
    'capture_webpage',
    'capture_request',
    'CaptureRequest',
    'CaptureResult',
    'CaptureError',
    'CaptureErrorType',
    'is_error',

    # CLI entrypoint
    'cli_app',

    # MCP server
    'create_mcp_server',

    # Version info
    '__version__'
]
