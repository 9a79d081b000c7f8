#!/usr/bin/env python3
"""
Validators for Web Screenshot CLI

This module provides Typer callbacks that validate CLI inputs before a
capture is attempted.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- CLI parameter values

Expected output:
- Validated parameter values
- Friendly error messages
"""

import os
from typing import Optional

import typer
from loguru import logger

from screenshot_mcp.core.utils import validate_url
from screenshot_mcp.cli.formatters import print_error, print_warning


def validate_url_argument(ctx: typer.Context, value: str) -> str:
    """
    Typer callback for validating the URL argument.

    Args:
        ctx: Typer context
        value: URL from CLI

    Returns:
        str: Validated URL
    """
    is_valid, error = validate_url(value)
    if not is_valid:
        logger.debug(f"URL validation error: {error}")
        print_error(error or "Invalid URL")
        raise typer.Exit(1)
    return value


def validate_dimension_option(ctx: typer.Context, value: Optional[int]) -> Optional[int]:
    """
    Typer callback for validating width/height options.

    Args:
        ctx: Typer context
        value: Dimension in pixels

    Returns:
        Optional[int]: Validated dimension
    """
    if value is None:
        return None

    if value <= 0:
        print_error(f"Invalid dimension: {value}. Must be a positive number of pixels.")
        raise typer.Exit(1)

    return value


def validate_output_path(ctx: typer.Context, value: Optional[str]) -> Optional[str]:
    """
    Typer callback for validating the output file path.

    Args:
        ctx: Typer context
        value: Output file path from CLI

    Returns:
        Optional[str]: Validated output path
    """
    if value is None:
        return None

    directory = os.path.dirname(os.path.abspath(value))
    if not os.path.isdir(directory):
        print_error(f"Output directory does not exist: {directory}")
        raise typer.Exit(1)

    if not value.lower().endswith((".png", ".jpg", ".jpeg")):
        print_warning(f"Output path '{value}' has no image extension; the file will be written as PNG.")

    return value


def validate_json_output(ctx: typer.Context, value: bool) -> bool:
    """
    Typer callback for validating JSON output option.

    Args:
        ctx: Typer context
        value: JSON output flag from CLI

    Returns:
        bool: Validated JSON output flag
    """
    # Store in context for other callbacks to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = value
    return value
