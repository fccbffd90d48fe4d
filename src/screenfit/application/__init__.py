"""Application layer - use cases and orchestration."""

from .commands import PlanLayoutCommand
from .dtos import CanvasInput, PlannerOutput, RoomInput, ScreenInput
from .session import PlannerSession, ValidationStatus

__all__ = [
    "CanvasInput",
    "PlanLayoutCommand",
    "PlannerOutput",
    "PlannerSession",
    "RoomInput",
    "ScreenInput",
    "ValidationStatus",
]
