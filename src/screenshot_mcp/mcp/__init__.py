"""
MCP Layer for Web Screenshot Module

This package contains the MCP (Model Context Protocol) layer, exposing the
core capture routine as the "screenshot" tool.

The MCP layer is designed to:
1. Expose the capture routine as an MCP tool
2. Translate capture errors into MCP error results
3. Manage server startup and configuration

Usage:
    # Start the MCP server
    python -m screenshot_mcp.mcp.mcp_server start

    # Use the MCP server in Python
    from screenshot_mcp.mcp import create_mcp_server
    mcp = create_mcp_server()
    mcp.run()
"""

# MCP server creation
from screenshot_mcp.mcp.mcp_tools import create_mcp_server, register_screenshot_tool

# MCP server entry point
from screenshot_mcp.mcp.mcp_server import (
    main,
    health_check,
    get_server_info,
    get_tool_schemas,
    configure_logging
)

# MCP wrappers
from screenshot_mcp.mcp.wrappers import (
    screenshot_wrapper,
    handle_screenshot,
    format_mcp_response,
    format_error_response,
    to_call_tool_result
)

__all__ = [
    # MCP server
    'create_mcp_server',
    'register_screenshot_tool',
    'main',
    'health_check',
    'get_server_info',
    'get_tool_schemas',
    'configure_logging',

    # MCP wrappers
    'screenshot_wrapper',
    'handle_screenshot',
    'format_mcp_response',
    'format_error_response',
    'to_call_tool_result'
]

# Example configuration for .mcp.json
EXAMPLE_MCP_CONFIG = """
{
  "mcpServers": {
    "screenshot": {
      "command": "screenshot-mcp-server",
      "args": ["start"]
    }
  }
}
"""
