"""Validate command for checking configuration files.

This module provides the `validate` command that checks a JSON configuration
file for errors, then plans the screen to report whether it fits the room.
"""

from pathlib import Path
from typing import Annotated

import typer

from screenfit.application import PlanLayoutCommand, PlannerOutput
from screenfit.application.config import (
    ConfigError,
    ConfigErrorType,
    config_to_inputs,
    load_config,
)


def _display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type is ConfigErrorType.FILE_NOT_FOUND:
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type is ConfigErrorType.JSON_PARSE:
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail['line']}, Column {detail['column']}: {detail['message']}",
                err=True,
            )
    elif error.error_type is ConfigErrorType.UNSUPPORTED_VERSION:
        typer.echo(f"  {error.message}", err=True)
        typer.echo('    Set "schema_version" to one the planner supports.', err=True)
    elif error.error_type is ConfigErrorType.SCREEN_DRIVER:
        typer.echo(f"  {error.message}", err=True)
        typer.echo(
            '    Give the screen only one of "width", "height" or "diagonal".',
            err=True,
        )
    elif error.error_type is ConfigErrorType.VALIDATION:
        for detail in error.details:
            typer.echo(f"  {detail['path'] or '(root)'}: {detail['message']}", err=True)
            value = detail["value"]
            if value is not None and not isinstance(value, dict):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_plan_result(result: PlannerOutput) -> None:
    """Display planning errors and warnings with a summary line."""
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error}", err=True)
        typer.echo()
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning}")
        typer.echo()
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a screen plan configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, several screen sizes, etc.)
    - A screen that reaches above the ceiling

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        screenfit validate living-room.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    screen_input, room_input, canvas_input = config_to_inputs(config)
    result = PlanLayoutCommand().execute(screen_input, room_input, canvas_input)
    _display_plan_result(result)

    if result.errors:
        raise typer.Exit(code=1)
    if result.warnings:
        raise typer.Exit(code=2)
