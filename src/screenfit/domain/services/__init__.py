"""Domain services for screen planning.

This package provides:
- Screen dimension reconciliation and the debounced ScreenModel
- Room unit normalization (RoomModel)
- The ValidationGate holding the committed snapshot
- 2D diagram and 3D scene layout engines
"""

from .diagram_layout import (
    DiagramLayout,
    DiagramLayoutEngine,
    DiagramMode,
    compute_diagram_layout,
    format_centimeters,
    format_diagonal,
    format_meters,
    screen_exceeds_room_height,
)
from .dimension_line import (
    ARROW_SIZE,
    EXTENSION_LINE,
    Axis,
    DimensionLine,
    build_dimension_line,
)
from .reconciliation import reconcile
from .room_model import RoomModel, format_room_field
from .scene_layout import SceneLayoutEngine
from .scheduler import (
    DEBOUNCE_DELAY_MS,
    ManualScheduler,
    ScheduledTask,
    Scheduler,
    ThreadingScheduler,
)
from .screen_model import PendingEdit, ScreenModel, format_screen_field
from .validation_gate import ValidationGate

__all__ = [
    "ARROW_SIZE",
    "DEBOUNCE_DELAY_MS",
    "EXTENSION_LINE",
    "Axis",
    "DiagramLayout",
    "DiagramLayoutEngine",
    "DiagramMode",
    "DimensionLine",
    "ManualScheduler",
    "PendingEdit",
    "RoomModel",
    "SceneLayoutEngine",
    "ScheduledTask",
    "Scheduler",
    "ScreenModel",
    "ThreadingScheduler",
    "ValidationGate",
    "build_dimension_line",
    "compute_diagram_layout",
    "format_centimeters",
    "format_diagonal",
    "format_meters",
    "format_room_field",
    "format_screen_field",
    "reconcile",
    "screen_exceeds_room_height",
]
