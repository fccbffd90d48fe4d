"""2D cross-section layout of the screen wall.

Produces the primitives of a to-scale elevation drawing: room outline with
ceiling and floor bands, a reference grid, the screen, and dimension
callouts for the screen width, screen height, mount height, room height
and screen diagonal.

Two modes exist:

- SCALED: the canvas size is known, so centimeters map to pixels with
  ``min(canvas_w / room_w, canvas_h / room_h) * 0.85``.
- PREVIEW: the canvas has not been measured yet (or the room has no size).
  A fixed 800x600 px room with a 400x200 px screen is drawn instead; the
  labels still show the real values but the drawing is not to scale.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from screenfit.domain.services.dimension_line import (
    ARROW_SIZE,
    DEFAULT_EXTENSION,
    DEFAULT_TEXT_GAP,
    Axis,
    DimensionLine,
    build_dimension_line,
)
from screenfit.domain.value_objects import (
    SCREEN_TOO_TALL,
    CommittedSnapshot,
    DiagramWarning,
    DrawablePrimitive,
    Label,
    Line,
    LineStyle,
    Point2D,
    Rect,
    RoomDimensions,
    ScreenDimensions,
    TextAnchor,
    cm_to_inches,
    round_half_up,
)

SCALE_MARGIN_FACTOR = 0.85
MARGIN = 100.0
BAND_THICKNESS = 20.0
GRID_SPACING = 50.0
SCREEN_CALLOUT_INSET = 8.0
ROOM_CALLOUT_GAP = 15.0
AXIS_LEAD = 100.0
OUTLET_AXIS_OFFSET = 30.0

PREVIEW_ROOM_WIDTH = 800.0
PREVIEW_ROOM_HEIGHT = 600.0
PREVIEW_SCREEN_WIDTH = 400.0
PREVIEW_SCREEN_HEIGHT = 200.0
PREVIEW_SCREEN_TOP = 0.3  # fraction of room height


class DiagramMode(str, Enum):
    """Whether the drawing is to scale."""

    SCALED = "scaled"
    PREVIEW = "preview"


def format_meters(value_cm: float) -> str:
    """Room-scale value shown in meters, e.g. ``2.44 m``."""
    return f"{value_cm / 100:.2f} m"


def format_centimeters(value_cm: float) -> str:
    """Whole-centimeter value, e.g. ``68 cm``."""
    return f"{round_half_up(value_cm, 0):.0f} cm"


def format_diagonal(value_cm: float) -> str:
    """Two-line diagonal label: centimeters, then the nearest whole inch."""
    inches = round_half_up(cm_to_inches(value_cm), 0)
    return f"{value_cm:.1f} cm\n{inches:.0f}\""


def screen_exceeds_room_height(screen: ScreenDimensions, room: RoomDimensions) -> bool:
    """True when a known room height is smaller than the screen's top edge."""
    if room.height <= 0:
        return False
    return room.screen_mount_height + screen.height > room.height


@dataclass(frozen=True)
class DiagramLayout:
    """Result of one layout computation.

    Attributes:
        mode: SCALED or PREVIEW.
        scale: Pixels per centimeter (1.0 in preview mode).
        canvas_width: Width of the drawing area in pixels.
        canvas_height: Height of the drawing area in pixels.
        room_rect: Room outline in canvas coordinates.
        screen_rect: Screen body in canvas coordinates.
        primitives: Everything to draw, back to front.
        dimensions: Dimension callouts keyed by name.
        screen_exceeds_room_height: Whether the screen passes the ceiling.
        warning: Advisory marker when the screen is too high.
    """

    mode: DiagramMode
    scale: float
    canvas_width: float
    canvas_height: float
    room_rect: Rect
    screen_rect: Rect
    primitives: tuple[DrawablePrimitive, ...]
    dimensions: dict[str, DimensionLine] = field(default_factory=dict)
    screen_exceeds_room_height: bool = False
    warning: DiagramWarning | None = None

    @property
    def is_to_scale(self) -> bool:
        return self.mode is DiagramMode.SCALED

    def dimension(self, name: str) -> DimensionLine:
        """Look up a dimension callout by name.

        Raises:
            KeyError: If the layout has no callout with that name.
        """
        return self.dimensions[name]

    def by_kind(self, kind: str) -> list[DrawablePrimitive]:
        """Primitives of one kind (``line``, ``arrowhead``, ``label``, ``rect``)."""
        return [primitive for primitive in self.primitives if primitive.kind == kind]

    def by_role(self, role: str) -> list[DrawablePrimitive]:
        return [primitive for primitive in self.primitives if primitive.role == role]


@dataclass(frozen=True)
class _Frame:
    """Pixel placement of the room and the screen."""

    mode: DiagramMode
    scale: float
    canvas_width: float
    canvas_height: float
    room: Rect
    screen: Rect
    floor_y: float


class DiagramLayoutEngine:
    """Computes the 2D elevation drawing from screen and room dimensions.

    The engine holds only styling constants; ``layout`` is a pure function
    of its arguments and can be called on every resize.

    Attributes:
        margin_factor: Fraction of the canvas used by the room in scaled mode.
        arrow_size: Arrowhead length in pixels.
        extension: Extension tick length in pixels.
        show_grid: Whether to emit the 50 px reference grid.
        show_guides: Whether to emit the screen and outlet reference axes.
    """

    def __init__(
        self,
        margin_factor: float = SCALE_MARGIN_FACTOR,
        arrow_size: float = ARROW_SIZE,
        extension: float = DEFAULT_EXTENSION,
        show_grid: bool = True,
        show_guides: bool = True,
    ) -> None:
        if not 0 < margin_factor <= 1:
            raise ValueError("margin_factor must be in (0, 1]")
        self.margin_factor = margin_factor
        self.arrow_size = arrow_size
        self.extension = extension
        self.show_grid = show_grid
        self.show_guides = show_guides

    def layout_snapshot(
        self,
        snapshot: CommittedSnapshot,
        canvas_width: float | None = None,
        canvas_height: float | None = None,
    ) -> DiagramLayout:
        """Lay out a committed snapshot."""
        return self.layout(snapshot.screen, snapshot.room, canvas_width, canvas_height)

    def layout(
        self,
        screen: ScreenDimensions,
        room: RoomDimensions,
        canvas_width: float | None = None,
        canvas_height: float | None = None,
    ) -> DiagramLayout:
        """Compute the drawing.

        Args:
            screen: Screen dimensions in centimeters.
            room: Room dimensions in centimeters.
            canvas_width: Measured container width in pixels, None if unknown.
            canvas_height: Measured container height in pixels, None if unknown.

        Returns:
            The DiagramLayout.
        """
        frame = self._frame(screen, room, canvas_width, canvas_height)
        primitives: list[DrawablePrimitive] = []

        if self.show_grid:
            primitives.extend(self._grid(frame.room))
        primitives.extend(self._room_shell(frame.room))
        primitives.append(frame.screen)

        dimensions = self._callouts(frame, screen, room)
        if self.show_guides:
            primitives.extend(self._guides(frame.screen))
        primitives.extend(self._diagonal(frame.screen, screen.diagonal))
        for dimension in dimensions.values():
            primitives.extend(dimension.primitives)
        primitives.append(self._room_height_caption(dimensions["room_height"]))

        too_tall = screen_exceeds_room_height(screen, room)
        return DiagramLayout(
            mode=frame.mode,
            scale=frame.scale,
            canvas_width=frame.canvas_width,
            canvas_height=frame.canvas_height,
            room_rect=frame.room,
            screen_rect=frame.screen,
            primitives=tuple(primitives),
            dimensions=dimensions,
            screen_exceeds_room_height=too_tall,
            warning=SCREEN_TOO_TALL if too_tall else None,
        )

    def scale_for(
        self,
        room: RoomDimensions,
        canvas_width: float | None,
        canvas_height: float | None,
    ) -> float | None:
        """Pixels per centimeter for a canvas, or None when not measurable."""
        if not canvas_width or not canvas_height or canvas_width <= 0 or canvas_height <= 0:
            return None
        if room.width <= 0 or room.height <= 0:
            return None
        return (
            min(canvas_width / room.width, canvas_height / room.height)
            * self.margin_factor
        )

    def _frame(
        self,
        screen: ScreenDimensions,
        room: RoomDimensions,
        canvas_width: float | None,
        canvas_height: float | None,
    ) -> _Frame:
        scale = self.scale_for(room, canvas_width, canvas_height)

        if scale is None:
            room_rect = Rect(
                Point2D(MARGIN, MARGIN),
                PREVIEW_ROOM_WIDTH,
                PREVIEW_ROOM_HEIGHT,
                LineStyle.DASHED,
                "walls",
            )
            screen_rect = Rect(
                Point2D(
                    MARGIN + (PREVIEW_ROOM_WIDTH - PREVIEW_SCREEN_WIDTH) / 2,
                    MARGIN + PREVIEW_ROOM_HEIGHT * PREVIEW_SCREEN_TOP,
                ),
                PREVIEW_SCREEN_WIDTH,
                PREVIEW_SCREEN_HEIGHT,
                LineStyle.SCREEN,
                "screen",
            )
            return _Frame(
                mode=DiagramMode.PREVIEW,
                scale=1.0,
                canvas_width=PREVIEW_ROOM_WIDTH + 2 * MARGIN,
                canvas_height=PREVIEW_ROOM_HEIGHT + 2 * MARGIN,
                room=room_rect,
                screen=screen_rect,
                # The preview measures the mount height to the top of the floor band
                floor_y=MARGIN + PREVIEW_ROOM_HEIGHT - BAND_THICKNESS,
            )

        assert canvas_width is not None and canvas_height is not None
        room_w = room.width * scale
        room_h = room.height * scale
        origin = Point2D((canvas_width - room_w) / 2, (canvas_height - room_h) / 2)
        floor_y = origin.y + room_h

        screen_w = screen.width * scale
        screen_h = screen.height * scale
        screen_bottom = floor_y - room.screen_mount_height * scale
        screen_rect = Rect(
            Point2D(origin.x + (room_w - screen_w) / 2, screen_bottom - screen_h),
            screen_w,
            screen_h,
            LineStyle.SCREEN,
            "screen",
        )
        return _Frame(
            mode=DiagramMode.SCALED,
            scale=scale,
            canvas_width=canvas_width,
            canvas_height=canvas_height,
            room=Rect(origin, room_w, room_h, LineStyle.DASHED, "walls"),
            screen=screen_rect,
            floor_y=floor_y,
        )

    def _grid(self, room: Rect) -> list[Line]:
        x0, y0 = room.origin.x, room.origin.y
        lines: list[Line] = []
        for i in range(math.floor(room.width / GRID_SPACING) + 1):
            x = x0 + i * GRID_SPACING
            lines.append(
                Line(Point2D(x, y0), Point2D(x, y0 + room.height), LineStyle.GRID, "grid")
            )
        for i in range(math.floor(room.height / GRID_SPACING) + 1):
            y = y0 + i * GRID_SPACING
            lines.append(
                Line(Point2D(x0, y), Point2D(x0 + room.width, y), LineStyle.GRID, "grid")
            )
        return lines

    def _room_shell(self, room: Rect) -> list[DrawablePrimitive]:
        x0, y0 = room.origin.x, room.origin.y
        center_x = x0 + room.width / 2
        bottom = y0 + room.height
        return [
            Rect(Point2D(x0, y0), room.width, BAND_THICKNESS, LineStyle.BAND, "ceiling"),
            Label("CEILING", Point2D(center_x, y0 + 15), role="caption"),
            Rect(
                Point2D(x0, bottom - BAND_THICKNESS),
                room.width,
                BAND_THICKNESS,
                LineStyle.BAND,
                "floor",
            ),
            Label("FLOOR", Point2D(center_x, bottom - 5), role="caption"),
            room,
        ]

    def _callouts(
        self,
        frame: _Frame,
        screen: ScreenDimensions,
        room: RoomDimensions,
    ) -> dict[str, DimensionLine]:
        s = frame.screen
        r = frame.room
        screen_x, screen_y = s.origin.x, s.origin.y
        screen_bottom = screen_y + s.height
        mount_span = max(frame.floor_y - screen_bottom, 0.0)

        return {
            "screen_width": build_dimension_line(
                Point2D(screen_x, screen_y + SCREEN_CALLOUT_INSET),
                s.width,
                Axis.HORIZONTAL,
                format_centimeters(screen.width),
                side=1,
                extension=self.extension,
                arrow_size=self.arrow_size,
                role="screen_width",
            ),
            "screen_height": build_dimension_line(
                Point2D(screen_x + s.width - SCREEN_CALLOUT_INSET, screen_y),
                s.height,
                Axis.VERTICAL,
                format_centimeters(screen.height),
                side=-1,
                extension=self.extension,
                arrow_size=self.arrow_size,
                label_rotation=90.0,
                role="screen_height",
            ),
            "mount_height": build_dimension_line(
                Point2D(screen_x + s.width / 2, screen_bottom),
                mount_span,
                Axis.VERTICAL,
                format_centimeters(room.screen_mount_height),
                side=-1,
                extension=self.extension,
                arrow_size=self.arrow_size,
                label_rotation=-90.0,
                role="mount_height",
            ),
            "room_height": build_dimension_line(
                Point2D(r.origin.x + r.width + ROOM_CALLOUT_GAP, r.origin.y),
                r.height,
                Axis.VERTICAL,
                format_meters(room.height),
                side=1,
                extension=self.extension,
                arrow_size=self.arrow_size,
                label_rotation=-90.0,
                role="room_height",
            ),
        }

    def _room_height_caption(self, dimension: DimensionLine) -> Label:
        label = dimension.label
        position = label.position.offset(dx=DEFAULT_TEXT_GAP * 1.5)
        return Label("Room height", position, -90.0, TextAnchor.MIDDLE, "caption")

    def _guides(self, screen: Rect) -> list[DrawablePrimitive]:
        x0, y0 = screen.origin.x, screen.origin.y
        center_y = y0 + screen.height / 2
        outlet_y = y0 + screen.height - OUTLET_AXIS_OFFSET
        lead_x = x0 - AXIS_LEAD
        right_x = x0 + screen.width
        return [
            Line(Point2D(lead_x, center_y), Point2D(right_x, center_y), LineStyle.GUIDE, "screen_axis"),
            Label("Screen axis", Point2D(lead_x - 5, center_y - 5), 0.0, TextAnchor.END, "screen_axis"),
            Line(Point2D(lead_x, outlet_y), Point2D(right_x, outlet_y), LineStyle.GUIDE, "outlet_axis"),
            Label("Power/data axis", Point2D(lead_x - 5, outlet_y - 5), 0.0, TextAnchor.END, "outlet_axis"),
        ]

    def _diagonal(self, screen: Rect, diagonal_cm: float) -> list[DrawablePrimitive]:
        x0, y0 = screen.origin.x, screen.origin.y
        angle = math.degrees(math.atan2(screen.height, screen.width))
        center = Point2D(x0 + screen.width / 2, y0 + screen.height / 2)
        return [
            Line(
                Point2D(x0, y0 + screen.height),
                Point2D(x0 + screen.width, y0),
                LineStyle.DASHED,
                "diagonal",
            ),
            Label(format_diagonal(diagonal_cm), center, -angle, TextAnchor.MIDDLE, "diagonal"),
        ]


def compute_diagram_layout(
    screen: ScreenDimensions,
    room: RoomDimensions,
    canvas_width: float | None = None,
    canvas_height: float | None = None,
) -> DiagramLayout:
    """Lay out a drawing with the default engine settings."""
    return DiagramLayoutEngine().layout(screen, room, canvas_width, canvas_height)
