"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from screenfit.domain.services import DiagramLayout
from screenfit.domain.value_objects import (
    AspectRatio,
    CommittedSnapshot,
    DiagonalUnit,
    Scene3D,
    ScreenField,
)


@dataclass
class ScreenInput:
    """Input DTO for the screen.

    Exactly one of width, height or diagonal drives the other two. Width and
    height are in centimeters; the diagonal is in ``unit``.
    """

    aspect_ratio: str = AspectRatio.WIDESCREEN_16_9.value
    unit: str = DiagonalUnit.IMPERIAL.value
    width: float | None = None
    height: float | None = None
    diagonal: float | None = None

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        given = [
            name
            for name, value in (
                ("width", self.width),
                ("height", self.height),
                ("diagonal", self.diagonal),
            )
            if value is not None
        ]
        if not given:
            errors.append("One of screen width, height or diagonal is required")
        elif len(given) > 1:
            errors.append(
                f"Only one of screen width, height or diagonal may be given (got {', '.join(given)})"
            )
        for name in given:
            if getattr(self, name) <= 0:
                errors.append(f"Screen {name} must be positive")

        valid_ratios = [ratio.value for ratio in AspectRatio]
        if self.aspect_ratio.replace(" ", "") not in valid_ratios:
            errors.append(f"Aspect ratio must be one of: {', '.join(valid_ratios)}")
        valid_units = [unit.value for unit in DiagonalUnit]
        if self.unit not in valid_units:
            errors.append(f"Unit must be one of: {', '.join(valid_units)}")
        return errors

    @property
    def driving_field(self) -> ScreenField | None:
        """The field supplied by the caller, if exactly one was."""
        if self.diagonal is not None:
            return ScreenField.DIAGONAL
        if self.width is not None:
            return ScreenField.WIDTH
        if self.height is not None:
            return ScreenField.HEIGHT
        return None

    @property
    def driving_value(self) -> float | None:
        field_ = self.driving_field
        if field_ is None:
            return None
        return getattr(self, field_.value)


@dataclass
class RoomInput:
    """Input DTO for the room.

    Width, depth and height are in meters; the mount height (floor to the
    bottom edge of the screen) is in centimeters.
    """

    width: float
    depth: float
    height: float
    screen_mount_height: float

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.width <= 0:
            errors.append("Room width must be positive")
        if self.depth <= 0:
            errors.append("Room depth must be positive")
        if self.height <= 0:
            errors.append("Room height must be positive")
        if self.screen_mount_height <= 0:
            errors.append("Screen mount height must be positive")
        return errors


@dataclass
class CanvasInput:
    """Input DTO for the drawing area, in pixels."""

    width: float
    height: float

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.width <= 0:
            errors.append("Canvas width must be positive")
        if self.height <= 0:
            errors.append("Canvas height must be positive")
        return errors


@dataclass
class PlannerOutput:
    """Output DTO containing the planning results.

    Attributes:
        snapshot: Validated screen and room dimensions.
        diagram: 2D elevation drawing of the screen wall.
        scene: 3D layout of the room and screen.
        errors: List of error messages if planning failed.
    """

    snapshot: CommittedSnapshot | None
    diagram: DiagramLayout | None = None
    scene: Scene3D | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the plan was produced successfully."""
        return len(self.errors) == 0

    @property
    def warnings(self) -> list[str]:
        """Advisory messages attached to the drawing."""
        if self.diagram is None or self.diagram.warning is None:
            return []
        return [self.diagram.warning.message]
