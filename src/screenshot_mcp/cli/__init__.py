"""
CLI Layer for Web Screenshot Module

This package contains the CLI (Command Line Interface) layer, providing a
rich interface for capturing pages by hand.

Usage:
    from screenshot_mcp.cli import app as screenshot_app

    # Run the CLI app
    screenshot_app()
"""

# CLI application
from screenshot_mcp.cli.cli import app

# Formatters for rich output
from screenshot_mcp.cli.formatters import (
    print_capture_result,
    print_error,
    print_warning,
    print_info,
    print_json,
    emit_json,
    format_cli_response,
    create_progress,
    console
)

# CLI validators
from screenshot_mcp.cli.validators import (
    validate_url_argument,
    validate_dimension_option,
    validate_output_path,
    validate_json_output
)

__all__ = [
    # CLI application
    'app',

    # Formatters
    'print_capture_result',
    'print_error',
    'print_warning',
    'print_info',
    'print_json',
    'emit_json',
    'format_cli_response',
    'create_progress',
    'console',

    # Validators
    'validate_url_argument',
    'validate_dimension_option',
    'validate_output_path',
    'validate_json_output'
]
