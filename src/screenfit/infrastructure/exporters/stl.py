"""STL format exporter for the 3D room scene."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from screenfit.infrastructure.exporters.base import ExporterRegistry, scene_for
from screenfit.infrastructure.stl_exporter import SceneStlExporter, StlMeshBuilder

if TYPE_CHECKING:
    from screenfit.application.dtos import PlannerOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("stl")
class StlSceneExporter:
    """Exports the room scene to STL for 3D viewing.

    Attributes:
        format_name: "stl"
        file_extension: "stl"
    """

    format_name: ClassVar[str] = "stl"
    file_extension: ClassVar[str] = "stl"

    def __init__(
        self,
        mesh_builder: StlMeshBuilder | None = None,
        include_furniture: bool = True,
    ) -> None:
        """Initialize the STL exporter.

        Args:
            mesh_builder: Optional mesh builder for dependency injection.
            include_furniture: Whether to include the table and chairs.
        """
        self._exporter = SceneStlExporter(mesh_builder=mesh_builder)
        self.include_furniture = include_furniture

    def export(self, output: PlannerOutput, path: Path) -> None:
        """Export the scene to an STL file.

        Raises:
            ValueError: If the output has no validated dimensions.
        """
        scene = scene_for(output, self.format_name)
        categories = None if self.include_furniture else {"structure", "screen"}
        self._exporter.export_to_file(scene, path, categories=categories)
        logger.info(f"Exported STL scene to {path}")

    def export_string(self, output: PlannerOutput) -> str:
        """STL format does not support string export.

        Raises:
            NotImplementedError: Always raises this exception.
        """
        raise NotImplementedError(
            "STL format is binary and does not support string export. "
            "Use export() to write to a file instead."
        )


__all__ = ["StlSceneExporter", "SceneStlExporter", "StlMeshBuilder"]
