"""Value objects for the screen planning domain.

This module provides immutable data types used throughout the planner.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Units, ratios and parsing
from ._units import (
    CM_PER_INCH,
    CM_PER_METER,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_DIAGONAL_UNIT,
    AspectRatio,
    DiagonalUnit,
    cm_to_display_inches,
    cm_to_inches,
    inches_to_cm,
    meters_to_cm,
    parse_measurement,
    round_half_up,
)

# Screen and room dimensions
from ._dimensions import (
    CommittedSnapshot,
    RoomDimensions,
    RoomField,
    ScreenDimensions,
    ScreenField,
)

# 2D drawing primitives
from ._diagram import (
    SCREEN_TOO_TALL,
    Arrowhead,
    DiagramWarning,
    DrawablePrimitive,
    Label,
    Line,
    LineStyle,
    Point2D,
    Rect,
    TextAnchor,
)

# 3D scene
from ._3d_geometry import (
    BoundingBox3D,
    CameraPlacement,
    Position3D,
    Scene3D,
    SceneObject,
)

__all__ = [
    # Units
    "CM_PER_INCH",
    "CM_PER_METER",
    "DEFAULT_ASPECT_RATIO",
    "DEFAULT_DIAGONAL_UNIT",
    "AspectRatio",
    "DiagonalUnit",
    "cm_to_display_inches",
    "cm_to_inches",
    "inches_to_cm",
    "meters_to_cm",
    "parse_measurement",
    "round_half_up",
    # Dimensions
    "CommittedSnapshot",
    "RoomDimensions",
    "RoomField",
    "ScreenDimensions",
    "ScreenField",
    # Diagram
    "SCREEN_TOO_TALL",
    "Arrowhead",
    "DiagramWarning",
    "DrawablePrimitive",
    "Label",
    "Line",
    "LineStyle",
    "Point2D",
    "Rect",
    "TextAnchor",
    # 3D
    "BoundingBox3D",
    "CameraPlacement",
    "Position3D",
    "Scene3D",
    "SceneObject",
]
