"""Planner session: owns the models and the validation gate."""

from __future__ import annotations

import logging
from enum import Enum

from screenfit.domain.services import (
    DiagramLayout,
    DiagramLayoutEngine,
    RoomModel,
    SceneLayoutEngine,
    Scheduler,
    ScreenModel,
    ValidationGate,
)
from screenfit.domain.value_objects import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_DIAGONAL_UNIT,
    AspectRatio,
    CommittedSnapshot,
    DiagonalUnit,
    RoomDimensions,
    RoomField,
    Scene3D,
    ScreenDimensions,
    ScreenField,
)

logger = logging.getLogger(__name__)


class ValidationStatus(str, Enum):
    """State of the validate action as shown to the user."""

    NOT_VALIDATED = "not_validated"
    NEEDS_UPDATE = "needs_update"
    UP_TO_DATE = "up_to_date"

    @property
    def caption(self) -> str:
        return _CAPTIONS[self]


_CAPTIONS = {
    ValidationStatus.NOT_VALIDATED: "Show visualization",
    ValidationStatus.NEEDS_UPDATE: "Update visualization",
    ValidationStatus.UP_TO_DATE: "Dimensions validated",
}


class PlannerSession:
    """One planning session.

    Wires the screen and room models to the validation gate: every
    recomputation updates the live dimensions and marks the committed
    snapshot stale. Renderers only ever see the committed snapshot.
    """

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        aspect_ratio: AspectRatio = DEFAULT_ASPECT_RATIO,
        unit: DiagonalUnit = DEFAULT_DIAGONAL_UNIT,
        diagram_engine: DiagramLayoutEngine | None = None,
        scene_engine: SceneLayoutEngine | None = None,
    ) -> None:
        self.gate = ValidationGate()
        self.screen_model = ScreenModel(
            on_dimensions_change=self._on_screen_change,
            scheduler=scheduler,
            aspect_ratio=aspect_ratio,
            unit=unit,
        )
        self.room_model = RoomModel(on_dimensions_change=self._on_room_change)
        self.diagram_engine = diagram_engine or DiagramLayoutEngine()
        self.scene_engine = scene_engine or SceneLayoutEngine()
        self._screen = ScreenDimensions.zero()
        self._room = RoomDimensions.zero()
        self._closed = False

    @property
    def screen(self) -> ScreenDimensions:
        """Live screen dimensions (last recomputation)."""
        return self._screen

    @property
    def room(self) -> RoomDimensions:
        """Live room dimensions."""
        return self._room

    @property
    def snapshot(self) -> CommittedSnapshot | None:
        return self.gate.snapshot

    @property
    def status(self) -> ValidationStatus:
        if not self.gate.has_been_validated:
            return ValidationStatus.NOT_VALIDATED
        if self.gate.is_stale:
            return ValidationStatus.NEEDS_UPDATE
        return ValidationStatus.UP_TO_DATE

    @property
    def can_validate(self) -> bool:
        return ValidationGate.can_commit(self._screen, self._room)

    def set_screen_field(
        self,
        field: ScreenField | str,
        raw_text: str,
        unit: DiagonalUnit | None = None,
    ) -> bool:
        return self.screen_model.set_field(field, raw_text, unit)

    def set_room_field(self, field: RoomField | str, raw_text: str) -> bool:
        return self.room_model.set_field(field, raw_text)

    def set_aspect_ratio(self, aspect_ratio: AspectRatio | str) -> None:
        self.screen_model.set_aspect_ratio(aspect_ratio)

    def set_unit(self, unit: DiagonalUnit | str) -> None:
        self.screen_model.set_unit(unit)

    def validate(self) -> bool:
        """Commit the live dimensions.

        Returns:
            True if the snapshot was accepted.
        """
        if self._closed:
            return False
        accepted = self.gate.commit(self._screen, self._room)
        if accepted:
            logger.debug(
                f"Committed screen {self._screen.width:.1f}x{self._screen.height:.1f} cm"
            )
        return accepted

    def diagram(
        self,
        canvas_width: float | None = None,
        canvas_height: float | None = None,
    ) -> DiagramLayout | None:
        """Lay out the committed snapshot, or None before the first commit."""
        snapshot = self.gate.snapshot
        if snapshot is None:
            return None
        return self.diagram_engine.layout_snapshot(snapshot, canvas_width, canvas_height)

    def scene(self) -> Scene3D | None:
        """3D scene for the committed snapshot, or None before the first commit."""
        snapshot = self.gate.snapshot
        if snapshot is None:
            return None
        return self.scene_engine.layout(snapshot)

    def close(self) -> None:
        """Cancel pending recomputation and release every subscription."""
        if self._closed:
            return
        self._closed = True
        self.screen_model.close()
        self.room_model.close()
        self.gate.close()

    def __enter__(self) -> "PlannerSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _on_screen_change(self, dimensions: ScreenDimensions) -> None:
        self._screen = dimensions
        self.gate.mark_stale()

    def _on_room_change(self, dimensions: RoomDimensions) -> None:
        self._room = dimensions
        self.gate.mark_stale()
