#!/usr/bin/env python3
"""
MCP Wrappers for Web Screenshot Module

This module adapts the core capture routine to the MCP tool contract:
successful captures pass their content (and metadata) through, failures
become a single "Error: <message>" text item flagged as an error.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
- {"url": "https://example.com", "width": 800, "height": 600}

Expected output:
- {"content": [{"type": "text", "text": "Screenshot saved successfully at: ..."}],
   "metadata": {...}}
- On error: {"content": [{"type": "text", "text": "Error: ..."}], "isError": True}
"""

import json
from typing import Any, Dict, Optional

from loguru import logger
from mcp.types import CallToolResult, TextContent
from pydantic import ValidationError

from screenshot_mcp.core.capture import capture_request
from screenshot_mcp.core.constants import LOGGER_NAME
from screenshot_mcp.core.models import CaptureError, CaptureOutcome, CaptureRequest


def format_error_response(message: str) -> Dict[str, Any]:
    """
    Build the MCP error envelope.

    Args:
        message: Human-readable error message

    Returns:
        Dict[str, Any]: Content with a single "Error: ..." text item and isError=True
    """
    return {
        "content": [
            {
                "type": "text",
                "text": f"Error: {message}",
            }
        ],
        "isError": True
    }


def format_mcp_response(outcome: CaptureOutcome) -> Dict[str, Any]:
    """
    Format a capture outcome in MCP-compatible form.

    Args:
        outcome: CaptureResult or CaptureError

    Returns:
        Dict[str, Any]: MCP-compatible response
    """
    if isinstance(outcome, CaptureError):
        logger.bind(name=LOGGER_NAME).error(f"Screenshot tool error: {outcome.type.value}: {outcome.message}")
        return format_error_response(outcome.message)
    return outcome.to_dict()


async def screenshot_wrapper(arguments: Dict[str, Any], **capture_options: Any) -> Dict[str, Any]:
    """
    MCP wrapper for the screenshot tool.

    Args:
        arguments: Raw tool arguments (url, width, height, fullPage, outputPath)
        **capture_options: Options forwarded to capture_webpage()
            (browser_launcher, logger, disable_auto_scroll, navigation_timeout_ms, ...)

    Returns:
        Dict[str, Any]: MCP-compatible response
    """
    try:
        request = CaptureRequest.model_validate(arguments)
    except ValidationError as e:
        logger.warning(f"Rejected screenshot arguments: {e}")
        return format_error_response(f"Invalid arguments: {e.errors()[0]['msg']}")

    outcome = await capture_request(request, **capture_options)
    return format_mcp_response(outcome)


def to_call_tool_result(response: Dict[str, Any]) -> CallToolResult:
    """
    Convert a wrapper response into an MCP CallToolResult.

    Metadata, when present, is carried as structured content.

    Args:
        response: Response from screenshot_wrapper()

    Returns:
        CallToolResult: Result handed back to the MCP framework
    """
    content = [TextContent(type="text", text=item["text"]) for item in response["content"]]
    metadata: Optional[Dict[str, Any]] = response.get("metadata")
    return CallToolResult(
        content=content,
        structuredContent={"metadata": metadata} if metadata is not None else None,
        isError=response.get("isError", False)
    )


async def handle_screenshot(
    url: str,
    width: Optional[float] = None,
    height: Optional[float] = None,
    fullPage: Optional[bool] = None,
    outputPath: Optional[str] = None,
    **capture_options: Any
) -> CallToolResult:
    """
    Tool handler registered with the MCP server.

    Argument names match the tool's wire schema.

    Returns:
        CallToolResult: Success content with metadata, or an error result
    """
    arguments = {"url": url, "width": width, "height": height, "fullPage": fullPage, "outputPath": outputPath}
    response = await screenshot_wrapper(arguments, **capture_options)
    return to_call_tool_result(response)


if __name__ == "__main__":
    """Show the error envelope and a wrapper call for an invalid URL"""
    import asyncio
    import sys

    # Configure logger if running as main script
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        format="<level>{level}: {message}</level>",
        level="INFO",
        colorize=True
    )

    print(f"Error response: {json.dumps(format_error_response('Test error'))}")
    result = asyncio.run(screenshot_wrapper({"url": "http://example.com"}))
    print(f"Wrapper response: {json.dumps(result)}")
