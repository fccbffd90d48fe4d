"""DXF format exporter for screen wall diagrams.

Writes the 2D elevation drawing as an R2010 DXF file for CAD software.
Canvas coordinates grow downwards; DXF coordinates grow upwards, so every
y value is flipped around the canvas height.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf

from screenfit.domain.services import DiagramLayout
from screenfit.domain.value_objects import (
    Arrowhead,
    DrawablePrimitive,
    Label,
    Line,
    LineStyle,
    Point2D,
    Rect,
    TextAnchor,
)
from screenfit.infrastructure.exporters.base import ExporterRegistry, diagram_for

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from screenfit.application.dtos import PlannerOutput


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "OUTLINE": {"color": 7, "linetype": "CONTINUOUS"},  # White - room and screen
    "DIMENSIONS": {"color": 1, "linetype": "CONTINUOUS"},  # Red - dimension callouts
    "GUIDES": {"color": 5, "linetype": "DASHED"},  # Blue - reference axes
    "LABELS": {"color": 3, "linetype": "CONTINUOUS"},  # Green - text
    "GRID": {"color": 8, "linetype": "CONTINUOUS"},  # Gray - reference grid
}

LAYER_BY_STYLE: dict[LineStyle, str] = {
    LineStyle.SOLID: "OUTLINE",
    LineStyle.DASHED: "OUTLINE",
    LineStyle.BAND: "OUTLINE",
    LineStyle.SCREEN: "OUTLINE",
    LineStyle.DIMENSION: "DIMENSIONS",
    LineStyle.GUIDE: "GUIDES",
    LineStyle.GRID: "GRID",
}

# MTEXT attachment points
ATTACHMENT_BY_ANCHOR: dict[TextAnchor, int] = {
    TextAnchor.START: 4,  # MIDDLE_LEFT
    TextAnchor.MIDDLE: 5,  # MIDDLE_CENTER
    TextAnchor.END: 6,  # MIDDLE_RIGHT
}


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports the elevation drawing to DXF.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(
        self,
        units: str = "px",
        text_height: float = 10.0,
        include_grid: bool = True,
    ) -> None:
        """Initialize the DXF exporter.

        Args:
            units: Output units - "px" keeps canvas pixels, "cm" divides by
                the drawing scale so the file is in real centimeters.
            text_height: Label height in canvas pixels.
            include_grid: Whether to write the reference grid.
        """
        if units not in ("px", "cm"):
            raise ValueError(f"Invalid units: {units}. Must be 'px' or 'cm'")
        self.units = units
        self.text_height = text_height
        self.include_grid = include_grid

    def export(self, output: PlannerOutput, path: Path) -> None:
        """Export the drawing to a DXF file.

        Raises:
            ValueError: If the output has no validated dimensions.
        """
        doc = self.build_document(diagram_for(output, self.format_name))
        doc.saveas(path)
        logger.info(f"Exported DXF diagram to {path}")

    def export_string(self, output: PlannerOutput) -> str:
        """Export the drawing as a DXF string.

        Raises:
            ValueError: If the output has no validated dimensions.
        """
        doc = self.build_document(diagram_for(output, self.format_name))
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build_document(self, layout: DiagramLayout) -> Drawing:
        """Create a DXF document holding every primitive of a layout."""
        doc = ezdxf.new("R2010")
        self._setup_layers(doc)
        msp = doc.modelspace()

        factor = 1 / layout.scale if self.units == "cm" else 1.0
        height = layout.canvas_height

        def to_dxf(point: Point2D) -> tuple[float, float]:
            return (point.x * factor, (height - point.y) * factor)

        for primitive in layout.primitives:
            self._draw_primitive(msp, primitive, to_dxf, factor)

        if layout.warning is not None:
            msp.add_mtext(
                layout.warning.message,
                dxfattribs={
                    "layer": "LABELS",
                    "char_height": self.text_height * 1.5 * factor,
                    "insert": (layout.canvas_width / 2 * factor, height * factor),
                    "attachment_point": 2,  # TOP_CENTER
                },
            )
        return doc

    def _setup_layers(self, doc: Drawing) -> None:
        for name, props in LAYERS.items():
            layer = doc.layers.add(name, color=cast(int, props["color"]))
            if props["linetype"] == "DASHED":
                if "DASHED" not in doc.linetypes:
                    doc.linetypes.add(
                        "DASHED",
                        pattern=[0.5, 0.25, -0.25],
                        description="Dashed line",
                    )
                layer.dxf.linetype = "DASHED"

    def _draw_primitive(
        self,
        msp: Modelspace,
        primitive: DrawablePrimitive,
        to_dxf,
        factor: float,
    ) -> None:
        if isinstance(primitive, Line):
            layer = LAYER_BY_STYLE[primitive.style]
            if layer == "GRID" and not self.include_grid:
                return
            msp.add_line(
                to_dxf(primitive.start),
                to_dxf(primitive.end),
                dxfattribs={"layer": layer},
            )
        elif isinstance(primitive, Rect):
            points = [to_dxf(corner) for corner in primitive.corners]
            msp.add_lwpolyline(
                points,
                close=True,
                dxfattribs={"layer": LAYER_BY_STYLE[primitive.style]},
            )
        elif isinstance(primitive, Arrowhead):
            msp.add_solid(
                [to_dxf(point) for point in primitive.points()],
                dxfattribs={"layer": "DIMENSIONS"},
            )
        elif isinstance(primitive, Label):
            # y is flipped, so a clockwise canvas rotation is counter-clockwise here
            msp.add_mtext(
                primitive.text.replace("\n", "\\P"),
                dxfattribs={
                    "layer": "LABELS",
                    "char_height": self.text_height * factor,
                    "insert": to_dxf(primitive.position),
                    "attachment_point": ATTACHMENT_BY_ANCHOR[primitive.anchor],
                    "rotation": -primitive.rotation_degrees,
                },
            )


__all__ = ["DxfExporter", "LAYERS"]
