"""Architectural dimension lines.

A dimension line annotates a measured span with two extension ticks, a
span line offset from the measured edge, an arrowhead at each end and a
centered label::

      |<------ 121 cm ------>|
      |                      |
      +======================+   <- measured edge
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from screenfit.domain.value_objects import (
    Arrowhead,
    DrawablePrimitive,
    Label,
    Line,
    LineStyle,
    Point2D,
    TextAnchor,
)

ARROW_SIZE = 12.0
EXTENSION_LINE = 25.0
DEFAULT_EXTENSION = EXTENSION_LINE / 3
DEFAULT_TEXT_GAP = 14.0


class Axis(str, Enum):
    """Direction of the measured span."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class DimensionLine:
    """The six primitives that make up one dimension callout."""

    extension_lines: tuple[Line, Line]
    span_line: Line
    arrowheads: tuple[Arrowhead, Arrowhead]
    label: Label
    length: float
    axis: Axis

    @property
    def primitives(self) -> list[DrawablePrimitive]:
        return [
            *self.extension_lines,
            self.span_line,
            *self.arrowheads,
            self.label,
        ]


def build_dimension_line(
    start: Point2D,
    length: float,
    axis: Axis,
    text: str,
    side: int = 1,
    extension: float = DEFAULT_EXTENSION,
    arrow_size: float = ARROW_SIZE,
    text_gap: float = DEFAULT_TEXT_GAP,
    label_rotation: float | None = None,
    role: str = "",
) -> DimensionLine:
    """Lay out a dimension line along a measured edge.

    The edge runs from ``start`` along the axis for ``length`` pixels
    (rightwards for horizontal spans, downwards for vertical ones). The span
    line sits ``extension`` pixels away from the edge on ``side``: +1 is
    below a horizontal edge or right of a vertical edge, -1 the opposite.

    Arrowheads have their tips on the extension lines with their bodies
    inside the span. A zero length is allowed and yields coincident points.

    Args:
        start: First end of the measured edge.
        length: Span length in pixels (non-negative).
        axis: Orientation of the edge.
        text: Label text.
        side: Which side of the edge the callout is drawn on (+1 or -1).
        extension: Length of the extension ticks.
        arrow_size: Arrowhead length in pixels.
        text_gap: Distance from the span line to the label anchor.
        label_rotation: Label rotation in degrees. Defaults to 0 for
            horizontal spans and -90 (reads bottom to top) for vertical ones.
        role: Role tag copied to every primitive.

    Returns:
        The DimensionLine.

    Raises:
        ValueError: If the length is negative or side is not +1/-1.
    """
    if length < 0:
        raise ValueError("Dimension length cannot be negative")
    if side not in (1, -1):
        raise ValueError("side must be 1 or -1")

    offset = side * extension
    x0, y0 = start.x, start.y

    if axis is Axis.HORIZONTAL:
        a = Point2D(x0, y0 + offset)
        b = Point2D(x0 + length, y0 + offset)
        ticks = (
            Line(Point2D(x0, y0), a, LineStyle.DIMENSION, role),
            Line(Point2D(x0 + length, y0), b, LineStyle.DIMENSION, role),
        )
        arrows = (
            Arrowhead(a, (-1.0, 0.0), arrow_size, role),
            Arrowhead(b, (1.0, 0.0), arrow_size, role),
        )
        label_position = Point2D(x0 + length / 2, y0 + offset + side * text_gap)
        rotation = 0.0 if label_rotation is None else label_rotation
    else:
        a = Point2D(x0 + offset, y0)
        b = Point2D(x0 + offset, y0 + length)
        ticks = (
            Line(Point2D(x0, y0), a, LineStyle.DIMENSION, role),
            Line(Point2D(x0, y0 + length), b, LineStyle.DIMENSION, role),
        )
        arrows = (
            Arrowhead(a, (0.0, -1.0), arrow_size, role),
            Arrowhead(b, (0.0, 1.0), arrow_size, role),
        )
        label_position = Point2D(x0 + offset + side * text_gap, y0 + length / 2)
        rotation = -90.0 if label_rotation is None else label_rotation

    return DimensionLine(
        extension_lines=ticks,
        span_line=Line(a, b, LineStyle.DIMENSION, role),
        arrowheads=arrows,
        label=Label(text, label_position, rotation, TextAnchor.MIDDLE, role),
        length=length,
        axis=axis,
    )
