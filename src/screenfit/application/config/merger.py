"""Configuration merging utilities for CLI override support.

Merges CLI arguments with configuration file values, following the
precedence: CLI args > config values > defaults.

Only non-None CLI arguments override configuration values.
"""

from pathlib import Path
from typing import Any

from screenfit.application.config.schema import PlannerConfiguration


def merge_config_with_cli(
    config: PlannerConfiguration,
    *,
    aspect_ratio: str | None = None,
    unit: str | None = None,
    width: float | None = None,
    height: float | None = None,
    diagonal: float | None = None,
    room_width: float | None = None,
    room_depth: float | None = None,
    room_height: float | None = None,
    mount_height: float | None = None,
    canvas_width: float | None = None,
    canvas_height: float | None = None,
    formats: list[str] | None = None,
    output_dir: str | Path | None = None,
    project_name: str | None = None,
) -> PlannerConfiguration:
    """Merge CLI arguments with configuration values.

    A screen measurement given on the command line replaces the one in the
    file, since only one of width, height and diagonal may drive the screen.

    Args:
        config: The base PlannerConfiguration to merge with
        aspect_ratio: Override for screen.aspect_ratio
        unit: Override for screen.unit
        width: Override for the driving screen width (cm)
        height: Override for the driving screen height (cm)
        diagonal: Override for the driving screen diagonal
        room_width: Override for room.width (m)
        room_depth: Override for room.depth (m)
        room_height: Override for room.height (m)
        mount_height: Override for room.screen_mount_height (cm)
        canvas_width: Override for canvas.width (px)
        canvas_height: Override for canvas.height (px)
        formats: Override for output.formats
        output_dir: Override for output.output_dir
        project_name: Override for output.project_name

    Returns:
        A new PlannerConfiguration with merged values

    Raises:
        pydantic.ValidationError: If the merged values are invalid.

    Example:
        >>> config = load_config(Path("living-room.json"))
        >>> merged = merge_config_with_cli(config, diagonal=65)
        >>> merged.screen.diagonal
        65.0
    """
    data = config.model_dump(mode="json", by_alias=True)

    screen = data["screen"]
    if aspect_ratio is not None:
        screen["aspect_ratio"] = aspect_ratio
    if unit is not None:
        screen["unit"] = unit
    drivers = {"width": width, "height": height, "diagonal": diagonal}
    if any(value is not None for value in drivers.values()):
        screen.update(drivers)

    _override(
        data["room"],
        width=room_width,
        depth=room_depth,
        height=room_height,
        screen_mount_height=mount_height,
    )

    if canvas_width is not None or canvas_height is not None:
        canvas = data.get("canvas") or {}
        _override(canvas, width=canvas_width, height=canvas_height)
        data["canvas"] = canvas

    _override(
        data["output"],
        formats=formats,
        output_dir=str(output_dir) if output_dir is not None else None,
        project_name=project_name,
    )

    return PlannerConfiguration.model_validate(data)


def _override(section: dict[str, Any], **values: Any) -> None:
    """Copy every non-None value into a config section dict."""
    for key, value in values.items():
        if value is not None:
            section[key] = value
