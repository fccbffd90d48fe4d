"""SVG exporter for screen wall diagrams."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from screenfit.infrastructure.diagram_renderer import DiagramRenderer
from screenfit.infrastructure.exporters.base import ExporterRegistry, diagram_for

if TYPE_CHECKING:
    from screenfit.application.dtos import PlannerOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for the 2D elevation drawing.

    Uses the diagram already computed for the output. When the output
    carries a snapshot but no diagram, one is laid out in preview mode.

    Attributes:
        format_name: "svg"
        file_extension: "svg"
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        renderer: DiagramRenderer | None = None,
        font_size: float = 12.0,
    ) -> None:
        self.renderer = renderer or DiagramRenderer(font_size=font_size)

    def export(self, output: PlannerOutput, path: Path) -> None:
        """Export the drawing to an SVG file.

        Raises:
            ValueError: If the output has no validated dimensions.
        """
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported SVG diagram to {path}")

    def export_string(self, output: PlannerOutput) -> str:
        """Render the drawing as an SVG string.

        Raises:
            ValueError: If the output has no validated dimensions.
        """
        return self.renderer.render_svg(diagram_for(output, self.format_name))
