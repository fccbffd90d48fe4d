"""JSON exporter for screen plans.

Exports the validated dimensions, the screen-height check, the dimension
callout texts and (optionally) the 3D scene boxes.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from screenfit.domain.value_objects import Scene3D
from screenfit.infrastructure.exporters.base import (
    ExporterRegistry,
    require_snapshot,
    scene_for,
)

if TYPE_CHECKING:
    from screenfit.application.dtos import PlannerOutput


logger = logging.getLogger(__name__)


# Current schema version for JSON output
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonPlanExporter:
    """JSON exporter for planner output.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, include_scene: bool = True, indent: int = 2) -> None:
        """Initialize the JSON exporter.

        Args:
            include_scene: Whether to include the 3D scene boxes.
            indent: JSON indentation level (default 2 spaces).
        """
        self.include_scene = include_scene
        self.indent = indent

    def export(self, output: PlannerOutput, path: Path) -> None:
        """Export JSON to file.

        Raises:
            ValueError: If the output has no validated dimensions.
        """
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported JSON plan to {path}")

    def export_string(self, output: PlannerOutput) -> str:
        """Generate the JSON string.

        Raises:
            ValueError: If the output has no validated dimensions.
        """
        return json.dumps(self.build(output), indent=self.indent or None)

    def build(self, output: PlannerOutput) -> dict[str, Any]:
        """Build the JSON-serializable structure."""
        snapshot = require_snapshot(output, self.format_name)
        result: dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "units": "cm",
            "screen": asdict(snapshot.screen),
            "room": asdict(snapshot.room),
            "screen_top": snapshot.screen_top,
            "screen_exceeds_room_height": snapshot.screen_exceeds_room_height,
            "warnings": output.warnings,
        }

        if output.diagram is not None:
            result["diagram"] = {
                "mode": output.diagram.mode.value,
                "scale": output.diagram.scale,
                "canvas": {
                    "width": output.diagram.canvas_width,
                    "height": output.diagram.canvas_height,
                },
                "dimensions": {
                    name: dimension.label.text
                    for name, dimension in output.diagram.dimensions.items()
                },
            }

        if self.include_scene:
            result["scene"] = self._scene_to_dict(scene_for(output, self.format_name))

        return result

    @staticmethod
    def _scene_to_dict(scene: Scene3D) -> dict[str, Any]:
        return {
            "objects": [
                {
                    "name": scene_object.name,
                    "category": scene_object.category,
                    "origin": asdict(scene_object.box.origin),
                    "size": [
                        scene_object.box.size_x,
                        scene_object.box.size_y,
                        scene_object.box.size_z,
                    ],
                }
                for scene_object in scene.objects
            ],
            "camera": {
                "position": asdict(scene.camera.position),
                "target": asdict(scene.camera.target),
            },
        }
