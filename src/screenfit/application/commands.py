"""Application commands (use cases) for screen planning."""

from __future__ import annotations

import logging

from screenfit.domain.services import (
    DEBOUNCE_DELAY_MS,
    DiagramLayoutEngine,
    ManualScheduler,
    SceneLayoutEngine,
)
from screenfit.domain.value_objects import AspectRatio, DiagonalUnit, RoomField

from .dtos import CanvasInput, PlannerOutput, RoomInput, ScreenInput
from .session import PlannerSession

logger = logging.getLogger(__name__)


class PlanLayoutCommand:
    """Command to plan a screen wall from typed inputs.

    Drives a PlannerSession the way a user would (type the room, type one
    screen measurement, wait for the debounce, press validate) on a virtual
    clock, then lays out the committed snapshot.
    """

    def __init__(
        self,
        diagram_engine: DiagramLayoutEngine | None = None,
        scene_engine: SceneLayoutEngine | None = None,
    ) -> None:
        self.diagram_engine = diagram_engine or DiagramLayoutEngine()
        self.scene_engine = scene_engine or SceneLayoutEngine()

    def execute(
        self,
        screen_input: ScreenInput,
        room_input: RoomInput,
        canvas_input: CanvasInput | None = None,
    ) -> PlannerOutput:
        """Execute the planning command.

        Args:
            screen_input: Aspect ratio, unit and the one driving measurement.
            room_input: Room size in meters and mount height in centimeters.
            canvas_input: Drawing area in pixels. Without it the diagram is
                produced in preview mode.

        Returns:
            PlannerOutput with the snapshot, diagram and scene.
        """
        errors = screen_input.validate() + room_input.validate()
        if canvas_input is not None:
            errors.extend(canvas_input.validate())
        if errors:
            return PlannerOutput(snapshot=None, errors=errors)

        scheduler = ManualScheduler()
        with PlannerSession(
            scheduler=scheduler,
            aspect_ratio=AspectRatio.from_label(screen_input.aspect_ratio),
            unit=DiagonalUnit(screen_input.unit),
            diagram_engine=self.diagram_engine,
            scene_engine=self.scene_engine,
        ) as session:
            session.set_room_field(RoomField.WIDTH, repr(room_input.width))
            session.set_room_field(RoomField.DEPTH, repr(room_input.depth))
            session.set_room_field(RoomField.HEIGHT, repr(room_input.height))
            session.set_room_field(
                RoomField.SCREEN_MOUNT_HEIGHT, repr(room_input.screen_mount_height)
            )

            driving_field = screen_input.driving_field
            assert driving_field is not None
            session.set_screen_field(driving_field, repr(screen_input.driving_value))
            scheduler.advance(DEBOUNCE_DELAY_MS)

            if not session.validate():
                return PlannerOutput(
                    snapshot=None,
                    errors=["Every screen and room dimension must be greater than zero"],
                )

            canvas_width = canvas_input.width if canvas_input else None
            canvas_height = canvas_input.height if canvas_input else None
            output = PlannerOutput(
                snapshot=session.snapshot,
                diagram=session.diagram(canvas_width, canvas_height),
                scene=session.scene(),
            )

        if output.warnings:
            for warning in output.warnings:
                logger.warning(warning)
        return output
