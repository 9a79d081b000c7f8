#!/usr/bin/env python3
"""
Formatters for Web Screenshot CLI

This module provides rich formatting utilities for the CLI presentation layer.
It includes panels and progress indicators for a better user experience.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- CaptureResult / CaptureError dictionaries
- Error messages

Expected output:
- Rich formatted panels and progress indicators
"""

import os
import json
from typing import Dict, Any, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.text import Text


# Initialize console
console = Console()


# Color scheme
COLORS = {
    "success": "green",
    "error": "red",
    "warning": "yellow",
    "info": "blue",
    "path": "cyan",
    "highlight": "magenta",
    "dim": "grey70",
}


def print_capture_result(result: Dict[str, Any]) -> None:
    """
    Format and print a capture result to the console.

    Args:
        result: CaptureResult or CaptureError dictionary
    """
    if "message" in result and "type" in result:
        print_error(result["message"], title=result["type"])
        return

    metadata = result.get("metadata", {})
    file_path = metadata.get("filePath", "Unknown")
    viewport = metadata.get("viewport", {})

    file_info = Text()
    file_info.append("URL: ", style=COLORS["dim"])
    file_info.append(f"{metadata.get('url', '')}\n", style=COLORS["highlight"])
    file_info.append("File: ", style=COLORS["dim"])
    file_info.append(f"{file_path}\n", style=COLORS["path"])
    file_info.append("Viewport: ", style=COLORS["dim"])
    file_info.append(f"{viewport.get('width')}x{viewport.get('height')}\n", style=COLORS["info"])
    file_info.append("Full page: ", style=COLORS["dim"])
    file_info.append(f"{metadata.get('fullPage')}\n", style=COLORS["info"])
    file_info.append("Captured at: ", style=COLORS["dim"])
    file_info.append(f"{metadata.get('timestamp')}", style=COLORS["info"])

    # Add size information if available
    if os.path.exists(file_path):
        size_kb = os.path.getsize(file_path) / 1024
        file_info.append("\nSize: ", style=COLORS["dim"])
        file_info.append(f"{size_kb:.1f} KB", style=COLORS["info"])

    panel = Panel(
        file_info,
        title="[bold green]Screenshot Captured Successfully",
        border_style=COLORS["success"],
        padding=(1, 2)
    )

    console.print(panel)


def print_error(message: str, title: str = "Error") -> None:
    """
    Format and print error message to the console.

    Args:
        message: Error message
        title: Panel title
    """
    panel = Panel(
        Text(message, style=COLORS["error"]),
        title=f"[bold {COLORS['error']}]{title}",
        border_style=COLORS["error"],
        padding=(1, 2)
    )

    console.print(panel)


def print_warning(message: str, title: str = "Warning") -> None:
    """
    Format and print warning message to the console.

    Args:
        message: Warning message
        title: Panel title
    """
    panel = Panel(
        Text(message, style=COLORS["warning"]),
        title=f"[bold {COLORS['warning']}]{title}",
        border_style=COLORS["warning"],
        padding=(1, 2)
    )

    console.print(panel)


def print_info(message: str, title: str = "Info") -> None:
    """
    Format and print info message to the console.

    Args:
        message: Info message
        title: Panel title
    """
    panel = Panel(
        Text(message, style=COLORS["info"]),
        title=f"[bold {COLORS['info']}]{title}",
        border_style=COLORS["info"],
        padding=(1, 2)
    )

    console.print(panel)


def print_json(data: Dict[str, Any], title: str = "JSON Output") -> None:
    """
    Format and print JSON data to the console.

    Args:
        data: JSON data
        title: Panel title
    """
    json_str = json.dumps(data, indent=2)
    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=True)

    panel = Panel(
        syntax,
        title=f"[bold {COLORS['info']}]{title}",
        border_style=COLORS["info"],
        padding=(1, 2)
    )

    console.print(panel)


def format_cli_response(
    success: bool,
    data: Optional[Dict[str, Any]] = None,
    error: Optional[str] = None
) -> Dict[str, Any]:
    """
    Format a response for JSON output.

    Args:
        success: Whether the operation was successful
        data: Response data (for successful operations)
        error: Error message (for failed operations)

    Returns:
        Dict[str, Any]: {"success": True, "data": ...} or {"success": False, "error": ...}
    """
    if success:
        return {"success": True, "data": data or {}}
    return {"success": False, "error": error or "Unknown error"}


def emit_json(data: Dict[str, Any]) -> None:
    """Print plain JSON for machine consumption (--json mode)"""
    console.print_json(data=data)


def create_progress() -> Progress:
    """
    Create a spinner progress indicator.

    Returns:
        Progress: Rich progress indicator
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True
    )
