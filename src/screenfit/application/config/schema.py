"""Pydantic configuration schema models for screen plans.

This module defines the configuration schema for JSON-based planner
configuration files. It uses Pydantic v2 for validation and serialization.

The AspectRatio and DiagonalUnit enums are reused from the domain layer to
keep the accepted values in one place.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from screenfit.domain.value_objects import AspectRatio, DiagonalUnit

# Supported schema versions for configuration files
# Version 1.0: Initial schema with screen, room, canvas and output sections
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

VALID_FORMATS: frozenset[str] = frozenset({"svg", "dxf", "stl", "json"})


class ScreenConfig(BaseModel):
    """Screen selection.

    Exactly one of ``width``, ``height`` or ``diagonal`` drives the other
    two through the aspect ratio.

    Attributes:
        aspect_ratio: Aspect ratio label such as "16:9".
        unit: Unit of the diagonal ("metric" for cm, "imperial" for inches).
        width: Screen width in centimeters.
        height: Screen height in centimeters.
        diagonal: Screen diagonal in ``unit``.
    """

    model_config = ConfigDict(extra="forbid")

    aspect_ratio: AspectRatio = AspectRatio.WIDESCREEN_16_9
    unit: DiagonalUnit = DiagonalUnit.IMPERIAL
    width: float | None = Field(default=None, gt=0, description="Screen width in cm")
    height: float | None = Field(default=None, gt=0, description="Screen height in cm")
    diagonal: float | None = Field(default=None, gt=0, description="Diagonal in the selected unit")

    @field_validator("aspect_ratio", mode="before")
    @classmethod
    def normalize_aspect_ratio(cls, v: Any) -> Any:
        """Accept labels with stray spaces such as "16 : 9"."""
        if isinstance(v, str):
            return v.replace(" ", "")
        return v

    @model_validator(mode="after")
    def validate_single_driver(self) -> "ScreenConfig":
        """Validate that exactly one screen measurement is given."""
        given = [
            name
            for name in ("width", "height", "diagonal")
            if getattr(self, name) is not None
        ]
        if len(given) != 1:
            raise ValueError(
                "Exactly one of width, height or diagonal must be given"
                + (f" (got {', '.join(given)})" if given else "")
            )
        return self


class RoomConfig(BaseModel):
    """Room dimensions.

    Attributes:
        width: Room width in meters.
        depth: Room depth in meters.
        height: Floor to ceiling height in meters.
        screen_mount_height: Floor to the screen's bottom edge in centimeters.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, description="Room width in meters")
    depth: float = Field(..., gt=0, description="Room depth in meters")
    height: float = Field(..., gt=0, description="Room height in meters")
    screen_mount_height: float = Field(
        ..., gt=0, description="Screen bottom edge above the floor in cm"
    )


class CanvasConfig(BaseModel):
    """Drawing area in pixels."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=1200.0, gt=0)
    height: float = Field(default=900.0, gt=0)


class SvgOutputConfigSchema(BaseModel):
    """SVG export configuration.

    Attributes:
        show_grid: Whether to draw the 50 px reference grid.
        show_guides: Whether to draw the screen and outlet axes.
    """

    model_config = ConfigDict(extra="forbid")

    show_grid: bool = True
    show_guides: bool = True


class JsonOutputConfigSchema(BaseModel):
    """JSON export configuration.

    Attributes:
        include_scene: Include the 3D scene boxes.
        indent: JSON indentation level (0 for compact).
    """

    model_config = ConfigDict(extra="forbid")

    include_scene: bool = True
    indent: int = Field(default=2, ge=0, description="JSON indentation spaces")


class OutputConfig(BaseModel):
    """Configuration for output formats and file paths.

    Attributes:
        formats: List of output formats to generate.
        output_dir: Directory for output files.
        project_name: Base name for output files.
        svg: SVG export configuration.
        json_options: JSON export configuration, aliased as "json" in config files.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    formats: list[str] = Field(default_factory=list, description="List of output formats to generate")
    output_dir: str | None = Field(default=None, description="Directory for output files")
    project_name: str = Field(default="screen", description="Base name for output files")

    svg: SvgOutputConfigSchema | None = None
    json_options: JsonOutputConfigSchema | None = Field(default=None, alias="json")

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        """Validate format names in the formats list."""
        invalid = set(v) - VALID_FORMATS - {"all"}
        if invalid:
            raise ValueError(f"Invalid formats: {invalid}. Valid formats: {sorted(VALID_FORMATS)}")
        return v


class PlannerConfiguration(BaseModel):
    """Root configuration model for screen plans.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        screen: Screen selection
        room: Room dimensions
        canvas: Drawing area (optional; preview mode without it)
        output: Output format configuration

    Example:
        >>> config = PlannerConfiguration(
        ...     schema_version="1.0",
        ...     screen=ScreenConfig(diagonal=55),
        ...     room=RoomConfig(width=4, depth=5, height=2.438, screen_mount_height=100),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    screen: ScreenConfig
    room: RoomConfig
    canvas: CanvasConfig | None = Field(default=None, description="Drawing area (optional)")
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
