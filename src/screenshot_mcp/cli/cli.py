#!/usr/bin/env python3
"""
Command Line Interface for Web Screenshot Module

This module provides a CLI for the web screenshot functionality using Typer
and Rich, allowing users to capture pages by hand with the same routine the
MCP tool uses.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- screenshot-mcp capture https://example.com --width 800 --height 600

Expected output:
- Formatted console output of the capture result
- Image file saved to disk
- Structured JSON output with --json
"""

import sys
import asyncio
from typing import Optional

import typer
from loguru import logger

from screenshot_mcp.core.capture import capture_webpage
from screenshot_mcp.core.constants import SERVER_NAME, SERVER_VERSION, TOOL_NAME
from screenshot_mcp.core.models import CaptureError
from screenshot_mcp.cli.formatters import (
    print_capture_result,
    print_error,
    print_info,
    emit_json,
    format_cli_response,
    create_progress
)
from screenshot_mcp.cli.validators import (
    validate_url_argument,
    validate_dimension_option,
    validate_output_path,
    validate_json_output
)


# Initialize typer app with command groups
app = typer.Typer(
    help="Web page screenshot tool (headless browser)",
    rich_markup_mode="rich",
    add_completion=False
)

tools_app = typer.Typer(help="Utility tools", rich_markup_mode="rich")
app.add_typer(tools_app, name="tools", help="Utility tools")


@app.callback()
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output results as JSON",
        callback=validate_json_output
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show capture logs on stderr"
    ),
):
    """
    Web Screenshot Tool - captures screenshots of https pages

    Full-page capture is the default; giving --width or --height switches to
    a viewport-only capture of that size.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json_output

    logger.remove()
    logger.add(
        sys.stderr,
        format="<level>{level}: {message}</level>",
        level="DEBUG" if verbose else "WARNING",
        colorize=True
    )


@app.command("capture")
def capture_command(
    ctx: typer.Context,
    url: str = typer.Argument(
        ...,
        help="https URL of the page to capture",
        callback=validate_url_argument
    ),
    width: Optional[int] = typer.Option(
        None,
        "--width", "-w",
        help="Viewport width in pixels (disables full-page capture)",
        callback=validate_dimension_option
    ),
    height: Optional[int] = typer.Option(
        None,
        "--height", "-h",
        help="Viewport height in pixels (disables full-page capture)",
        callback=validate_dimension_option
    ),
    full_page: Optional[bool] = typer.Option(
        None,
        "--full-page/--viewport-only",
        help="Capture the whole scrollable page (default when no width/height is given)"
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="Output file path. If not provided, saves a timestamped PNG in the current directory.",
        callback=validate_output_path
    ),
    no_scroll: bool = typer.Option(
        False,
        "--no-scroll",
        help="Skip auto-scrolling for lazy-loaded images"
    ),
    timeout: Optional[int] = typer.Option(
        None,
        "--timeout", "-t",
        help="Navigation timeout in milliseconds"
    )
):
    """
    Capture a screenshot of a web page.
    """
    json_output = ctx.obj.get("json_output", False)

    async def run():
        return await capture_webpage(
            url,
            width=width,
            height=height,
            full_page=full_page,
            output_path=output,
            disable_auto_scroll=True if no_scroll else None,
            navigation_timeout_ms=timeout
        )

    try:
        if not json_output:
            with create_progress() as progress:
                progress.add_task(f"Capturing {url}...", total=None)
                outcome = asyncio.run(run())
        else:
            outcome = asyncio.run(run())
    except Exception as e:
        logger.error(f"Capture command failed: {str(e)}")
        if json_output:
            emit_json(format_cli_response(False, error=str(e)))
        else:
            print_error(f"Capture failed: {str(e)}")
        sys.exit(1)

    if isinstance(outcome, CaptureError):
        if json_output:
            emit_json(format_cli_response(False, error=outcome.message) | {"type": outcome.type.value})
        else:
            print_capture_result(outcome.to_dict())
        sys.exit(1)

    if json_output:
        emit_json(format_cli_response(True, data=outcome.to_dict()))
    else:
        print_capture_result(outcome.to_dict())


@tools_app.command("version")
def show_version(ctx: typer.Context):
    """
    Show version information.
    """
    version_info = {
        "name": SERVER_NAME,
        "version": SERVER_VERSION,
        "tool": TOOL_NAME,
        "description": "Captures screenshots of web pages with a headless browser.",
    }

    json_output = ctx.obj.get("json_output", False)

    if json_output:
        emit_json(format_cli_response(True, data=version_info))
    else:
        print_info(
            f"Name: {version_info['name']}\n"
            f"Version: {version_info['version']}\n"
            f"Tool: {version_info['tool']}\n"
            f"Description: {version_info['description']}"
        )


@tools_app.command("serve")
def server_command(ctx: typer.Context):
    """
    Show how to start the MCP server.
    """
    print_info(
        "The MCP server lives in the MCP layer.\n"
        "Please use: screenshot-mcp-server start"
    )


if __name__ == "__main__":
    """
    CLI entry point for the web screenshot module.

    Examples:
      python -m screenshot_mcp.cli.cli capture https://example.com
      python -m screenshot_mcp.cli.cli capture https://example.com -w 800 -h 600 -o shot.png
      python -m screenshot_mcp.cli.cli --json tools version
    """
    app()
