"""Screen and room dimension value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class ScreenField(str, Enum):
    """Screen measurement that can drive a reconciliation."""

    WIDTH = "width"
    HEIGHT = "height"
    DIAGONAL = "diagonal"


class RoomField(str, Enum):
    """Room measurement entered by the user."""

    WIDTH = "width"
    DEPTH = "depth"
    HEIGHT = "height"
    SCREEN_MOUNT_HEIGHT = "screen_mount_height"

    @property
    def entered_in_meters(self) -> bool:
        """True for fields typed in meters and stored in centimeters."""
        return self is not RoomField.SCREEN_MOUNT_HEIGHT


@dataclass(frozen=True)
class ScreenDimensions:
    """Screen size in centimeters.

    Live states may be partial (all zero before the first edit), so only
    negative values are refused here. Positivity is enforced at commit time.
    """

    width: float = 0.0
    height: float = 0.0
    diagonal: float = 0.0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or self.diagonal < 0:
            raise ValueError("Screen dimensions cannot be negative")

    @classmethod
    def zero(cls) -> "ScreenDimensions":
        """All-zero initial state."""
        return cls(0.0, 0.0, 0.0)

    @property
    def is_complete(self) -> bool:
        """True when every measurement is strictly positive."""
        return self.width > 0 and self.height > 0 and self.diagonal > 0

    @property
    def aspect_ratio(self) -> float | None:
        """Width / height, or None while height is zero."""
        if self.height == 0:
            return None
        return self.width / self.height

    def is_consistent(self, aspect_ratio: float, tolerance: float = 1e-9) -> bool:
        """Check the Pythagorean and aspect-ratio invariants.

        Args:
            aspect_ratio: Expected width / height.
            tolerance: Relative tolerance for both checks.

        Returns:
            True if diagonal^2 == width^2 + height^2 and width / height
            equals the aspect ratio, within tolerance.
        """
        if not self.is_complete:
            return self.width == self.height == self.diagonal == 0
        pythagorean = math.isclose(
            self.diagonal, math.hypot(self.width, self.height), rel_tol=tolerance
        )
        ratio = math.isclose(self.width / self.height, aspect_ratio, rel_tol=tolerance)
        return pythagorean and ratio

    def get(self, field: ScreenField) -> float:
        """Value of a single field in centimeters."""
        return getattr(self, field.value)


@dataclass(frozen=True)
class RoomDimensions:
    """Room size and screen mount height, all in centimeters."""

    width: float = 0.0
    depth: float = 0.0
    height: float = 0.0
    screen_mount_height: float = 0.0

    def __post_init__(self) -> None:
        if (
            self.width < 0
            or self.depth < 0
            or self.height < 0
            or self.screen_mount_height < 0
        ):
            raise ValueError("Room dimensions cannot be negative")

    @classmethod
    def zero(cls) -> "RoomDimensions":
        """All-zero initial state."""
        return cls(0.0, 0.0, 0.0, 0.0)

    @property
    def is_complete(self) -> bool:
        """True when every measurement is strictly positive."""
        return (
            self.width > 0
            and self.depth > 0
            and self.height > 0
            and self.screen_mount_height > 0
        )

    def get(self, field: RoomField) -> float:
        """Value of a single field in centimeters."""
        return getattr(self, field.value)


@dataclass(frozen=True)
class CommittedSnapshot:
    """Validated screen and room dimensions consumed by the renderers."""

    screen: ScreenDimensions
    room: RoomDimensions

    def __post_init__(self) -> None:
        if not self.screen.is_complete:
            raise ValueError("Committed screen dimensions must all be positive")
        if not self.room.is_complete:
            raise ValueError("Committed room dimensions must all be positive")

    @property
    def screen_top(self) -> float:
        """Height of the screen's top edge above the floor in centimeters."""
        return self.room.screen_mount_height + self.screen.height

    @property
    def screen_exceeds_room_height(self) -> bool:
        """True when the mounted screen would pass through the ceiling."""
        return self.screen_top > self.room.height
