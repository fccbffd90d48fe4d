"""Domain layer - core planning logic."""

from .services import (
    DiagramLayout,
    DiagramLayoutEngine,
    ManualScheduler,
    RoomModel,
    SceneLayoutEngine,
    ScreenModel,
    ValidationGate,
    reconcile,
)
from .value_objects import (
    AspectRatio,
    CommittedSnapshot,
    DiagonalUnit,
    RoomDimensions,
    RoomField,
    Scene3D,
    ScreenDimensions,
    ScreenField,
)

__all__ = [
    "AspectRatio",
    "CommittedSnapshot",
    "DiagonalUnit",
    "DiagramLayout",
    "DiagramLayoutEngine",
    "ManualScheduler",
    "RoomDimensions",
    "RoomField",
    "RoomModel",
    "Scene3D",
    "SceneLayoutEngine",
    "ScreenDimensions",
    "ScreenField",
    "ScreenModel",
    "ValidationGate",
    "reconcile",
]
