"""Drawable primitives produced by the diagram layout engine.

Coordinates are canvas pixels with the origin at the top-left corner and
y growing downwards, as in SVG.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class LineStyle(str, Enum):
    """Stroke style of a line or rectangle."""

    SOLID = "solid"
    DIMENSION = "dimension"
    DASHED = "dashed"
    GUIDE = "guide"
    GRID = "grid"
    BAND = "band"
    SCREEN = "screen"


class TextAnchor(str, Enum):
    """Horizontal text anchoring, matching SVG text-anchor values."""

    START = "start"
    MIDDLE = "middle"
    END = "end"


@dataclass(frozen=True)
class Point2D:
    """2D point in canvas coordinates."""

    x: float
    y: float

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> "Point2D":
        return Point2D(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Line:
    """Straight segment between two points."""

    kind: ClassVar[str] = "line"

    start: Point2D
    end: Point2D
    style: LineStyle = LineStyle.SOLID
    role: str = ""

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)


@dataclass(frozen=True)
class Arrowhead:
    """Filled triangular arrowhead.

    Attributes:
        tip: Point the arrow touches.
        direction: Unit vector the arrow points along (towards the tip).
        size: Length of the arrowhead in pixels; the base is half as wide.
    """

    kind: ClassVar[str] = "arrowhead"

    tip: Point2D
    direction: tuple[float, float]
    size: float
    role: str = ""

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("Arrowhead size must be positive")
        if not math.isclose(math.hypot(*self.direction), 1.0, rel_tol=1e-9):
            raise ValueError("Arrowhead direction must be a unit vector")

    def points(self) -> tuple[Point2D, Point2D, Point2D]:
        """Triangle corners: tip, then the two base corners."""
        dx, dy = self.direction
        base_x = self.tip.x - dx * self.size
        base_y = self.tip.y - dy * self.size
        # Perpendicular to the direction, scaled to half the base width
        px, py = -dy * self.size / 2, dx * self.size / 2
        return (
            self.tip,
            Point2D(base_x + px, base_y + py),
            Point2D(base_x - px, base_y - py),
        )


@dataclass(frozen=True)
class Label:
    """Text placed at a point, optionally rotated around that point.

    Multi-line text is separated by newlines.
    """

    kind: ClassVar[str] = "label"

    text: str
    position: Point2D
    rotation_degrees: float = 0.0
    anchor: TextAnchor = TextAnchor.MIDDLE
    role: str = ""

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle (room outline, floor and ceiling bands, screen)."""

    kind: ClassVar[str] = "rect"

    origin: Point2D
    width: float
    height: float
    style: LineStyle = LineStyle.SOLID
    role: str = ""

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Rectangle size cannot be negative")

    @property
    def corners(self) -> tuple[Point2D, Point2D, Point2D, Point2D]:
        """Top-left, top-right, bottom-right, bottom-left."""
        x, y = self.origin.x, self.origin.y
        return (
            Point2D(x, y),
            Point2D(x + self.width, y),
            Point2D(x + self.width, y + self.height),
            Point2D(x, y + self.height),
        )


DrawablePrimitive = Union[Line, Arrowhead, Label, Rect]


@dataclass(frozen=True)
class DiagramWarning:
    """Advisory marker rendered as an alert banner by presentation layers."""

    code: str
    message: str


SCREEN_TOO_TALL = DiagramWarning(
    code="screen_exceeds_room_height",
    message="Screen is too high for the room!",
)
