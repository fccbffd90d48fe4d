"""Typer CLI for screen planning."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from screenfit.application import (
    CanvasInput,
    PlanLayoutCommand,
    PlannerOutput,
    RoomInput,
    ScreenInput,
)
from screenfit.application.config import (
    ConfigError,
    config_to_diagram_engine,
    config_to_exporter_options,
    config_to_inputs,
    load_config,
    merge_config_with_cli,
)
from screenfit.cli.commands import validate_command
from screenfit.domain.value_objects import DEFAULT_ASPECT_RATIO, AspectRatio
from screenfit.infrastructure import PlanSummaryFormatter
from screenfit.infrastructure.exporters import ExporterRegistry, ExportManager


def _handle_multi_format_export(
    formats: list[str],
    output_dir: Path | None,
    project_name: str,
    result: PlannerOutput,
    exporter_options: dict[str, dict] | None = None,
) -> None:
    """Export the plan to every requested format.

    Args:
        formats: Format names, or ["all"].
        output_dir: Output directory for exported files.
        project_name: Project name for file naming.
        result: The planner output to export.
        exporter_options: Constructor keyword arguments per format.
    """
    try:
        formats = ExporterRegistry.resolve(formats)
    except KeyError as e:
        typer.echo(e.args[0], err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, project_name, exporter_options)
    except (ValueError, OSError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


def _parse_formats(output_formats: str | None) -> list[str] | None:
    if output_formats is None:
        return None
    return [f.strip().lower() for f in output_formats.split(",") if f.strip()]


app = typer.Typer(
    name="screenfit",
    help="Plan a wall-mounted screen: reconcile its size and check it fits the room.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Plan a wall-mounted screen."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.command()
def plan(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    ratio: Annotated[
        str | None,
        typer.Option("--ratio", "-r", help="Aspect ratio: 16:9, 4:3, 21:9, 16:10, 5:4"),
    ] = None,
    unit: Annotated[
        str | None,
        typer.Option("--unit", "-u", help="Diagonal unit: metric (cm) or imperial (inches)"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Screen width in cm"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", help="Screen height in cm"),
    ] = None,
    diagonal: Annotated[
        float | None,
        typer.Option("--diagonal", "-d", help="Screen diagonal in the selected unit"),
    ] = None,
    room_width: Annotated[
        float | None,
        typer.Option("--room-width", help="Room width in meters"),
    ] = None,
    room_depth: Annotated[
        float | None,
        typer.Option("--room-depth", help="Room depth in meters"),
    ] = None,
    room_height: Annotated[
        float | None,
        typer.Option("--room-height", help="Room height in meters"),
    ] = None,
    mount_height: Annotated[
        float | None,
        typer.Option("--mount-height", help="Screen bottom edge above the floor in cm"),
    ] = None,
    canvas_width: Annotated[
        float | None,
        typer.Option("--canvas-width", help="Drawing width in pixels"),
    ] = None,
    canvas_height: Annotated[
        float | None,
        typer.Option("--canvas-height", help="Drawing height in pixels"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: svg,dxf,stl,json (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for exported files"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
) -> None:
    """Reconcile the screen size, validate it against the room and export drawings.

    You can provide dimensions via CLI options or via a JSON configuration file.
    When using --config, CLI options override config file values.

    Examples:
        screenfit plan --diagonal 55 --room-width 4 --room-depth 5 --room-height 2.44 --mount-height 100
        screenfit plan --config living-room.json
        screenfit plan --config living-room.json --diagonal 65 --output-formats svg,stl --output-dir ./out
    """
    formats = _parse_formats(output_formats) or []
    command = PlanLayoutCommand()
    exporter_options: dict[str, dict] = {}

    if config_file is not None:
        try:
            config = load_config(config_file)
            config = merge_config_with_cli(
                config,
                aspect_ratio=ratio,
                unit=unit,
                width=width,
                height=height,
                diagonal=diagonal,
                room_width=room_width,
                room_depth=room_depth,
                room_height=room_height,
                mount_height=mount_height,
                canvas_width=canvas_width,
                canvas_height=canvas_height,
                formats=_parse_formats(output_formats),
                output_dir=output_dir,
                project_name=project_name,
            )
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        except ValidationError as e:
            typer.echo(f"Error: invalid option values:\n{e}", err=True)
            raise typer.Exit(code=1)

        screen_input, room_input, canvas_input = config_to_inputs(config)
        command = PlanLayoutCommand(diagram_engine=config_to_diagram_engine(config))
        exporter_options = config_to_exporter_options(config)
        formats = config.output.formats
        if config.output.output_dir is not None:
            output_dir = Path(config.output.output_dir)
        project_name = config.output.project_name
    else:
        # CLI-only mode: require the full room description
        if room_width is None or room_depth is None or room_height is None or mount_height is None:
            typer.echo(
                "Error: --room-width, --room-depth, --room-height and --mount-height "
                "are required when --config is not provided",
                err=True,
            )
            raise typer.Exit(code=1)

        screen_input = ScreenInput(
            aspect_ratio=ratio or DEFAULT_ASPECT_RATIO.value,
            width=width,
            height=height,
            diagonal=diagonal,
        )
        if unit is not None:
            screen_input.unit = unit
        room_input = RoomInput(
            width=room_width,
            depth=room_depth,
            height=room_height,
            screen_mount_height=mount_height,
        )
        canvas_input = None
        if canvas_width is not None and canvas_height is not None:
            canvas_input = CanvasInput(width=canvas_width, height=canvas_height)

    result = command.execute(screen_input, room_input, canvas_input)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    formatter = PlanSummaryFormatter()
    typer.echo(
        formatter.format(result, AspectRatio.from_label(screen_input.aspect_ratio))
    )

    if formats:
        _handle_multi_format_export(
            formats, output_dir, project_name or "screen", result, exporter_options
        )


@app.command()
def ratios() -> None:
    """List the supported aspect ratios."""
    for aspect in AspectRatio:
        marker = " (default)" if aspect is DEFAULT_ASPECT_RATIO else ""
        typer.echo(f"{aspect.label:<6} {aspect.ratio:.4f}{marker}")


if __name__ == "__main__":
    app()
