"""SVG rendering of screen wall diagrams.

Turns the primitives of a DiagramLayout into an SVG document. The layout
engine owns every coordinate; this module only maps styles to SVG
attributes.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from screenfit.domain.services import DiagramLayout, DiagramMode
from screenfit.domain.value_objects import (
    Arrowhead,
    DrawablePrimitive,
    Label,
    Line,
    LineStyle,
    Rect,
)

# Stroke attributes per line style
STYLE_STROKES: dict[LineStyle, str] = {
    LineStyle.SOLID: 'stroke="#333333" stroke-width="1.5"',
    LineStyle.DIMENSION: 'stroke="#1F2937" stroke-width="1"',
    LineStyle.DASHED: 'stroke="#666666" stroke-width="1.5" stroke-dasharray="8,4"',
    LineStyle.GUIDE: 'stroke="#2563EB" stroke-width="1" stroke-dasharray="4,4"',
    LineStyle.GRID: 'stroke="#E5E7EB" stroke-width="0.5"',
    LineStyle.BAND: 'stroke="#9CA3AF" stroke-width="1"',
    LineStyle.SCREEN: 'stroke="#111827" stroke-width="2"',
}

# Fill per rectangle style
STYLE_FILLS: dict[LineStyle, str] = {
    LineStyle.BAND: "#E5E7EB",
    LineStyle.SCREEN: "#1F2937",
}

WARNING_BANNER_HEIGHT = 28


class DiagramRenderer:
    """Renders a DiagramLayout as SVG.

    Attributes:
        background: Canvas background color.
        text_color: Color for labels.
        warning_color: Color of the screen-too-high banner.
        font_size: Label font size in pixels.
    """

    def __init__(
        self,
        background: str = "#FFFFFF",
        text_color: str = "#111827",
        warning_color: str = "#DC2626",
        font_size: float = 12.0,
    ) -> None:
        self.background = background
        self.text_color = text_color
        self.warning_color = warning_color
        self.font_size = font_size

    def render_svg(self, layout: DiagramLayout) -> str:
        """Generate the SVG document for a layout.

        Args:
            layout: Computed diagram layout.

        Returns:
            SVG string representation of the layout.
        """
        width = layout.canvas_width
        height = layout.canvas_height

        parts: list[str] = [
            f'<svg width="{width}" height="{height}" '
            f'viewBox="0 0 {width} {height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            "  <!-- Background -->",
            f'  <rect x="0" y="0" width="{width}" height="{height}" '
            f'fill="{self.background}"/>',
            "",
        ]

        if layout.mode is DiagramMode.PREVIEW:
            parts.append("  <!-- Preview: not to scale -->")

        for primitive in layout.primitives:
            parts.append(self._render_primitive(primitive))

        if layout.warning is not None:
            parts.append("")
            parts.append("  <!-- Warning -->")
            parts.append(self._render_warning(layout.warning.message, width))

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_primitive(self, primitive: DrawablePrimitive) -> str:
        if isinstance(primitive, Line):
            return self._render_line(primitive)
        if isinstance(primitive, Arrowhead):
            return self._render_arrowhead(primitive)
        if isinstance(primitive, Label):
            return self._render_label(primitive)
        if isinstance(primitive, Rect):
            return self._render_rect(primitive)
        raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")

    def _render_line(self, line: Line) -> str:
        return (
            f'  <line x1="{line.start.x:.2f}" y1="{line.start.y:.2f}" '
            f'x2="{line.end.x:.2f}" y2="{line.end.y:.2f}" '
            f"{STYLE_STROKES[line.style]}{self._role_attr(line.role)}/>"
        )

    def _render_arrowhead(self, arrow: Arrowhead) -> str:
        points = " ".join(f"{p.x:.2f},{p.y:.2f}" for p in arrow.points())
        return (
            f'  <polygon points="{points}" fill="{self.text_color}"'
            f"{self._role_attr(arrow.role)}/>"
        )

    def _render_rect(self, rect: Rect) -> str:
        fill = STYLE_FILLS.get(rect.style, "none")
        return (
            f'  <rect x="{rect.origin.x:.2f}" y="{rect.origin.y:.2f}" '
            f'width="{rect.width:.2f}" height="{rect.height:.2f}" '
            f'fill="{fill}" {STYLE_STROKES[rect.style]}{self._role_attr(rect.role)}/>'
        )

    def _render_label(self, label: Label) -> str:
        x, y = label.position.x, label.position.y
        transform = ""
        if label.rotation_degrees:
            transform = f' transform="rotate({label.rotation_degrees:.2f} {x:.2f} {y:.2f})"'

        lines = label.lines
        if len(lines) == 1:
            body = escape(lines[0])
        else:
            # Multi-line labels are centered vertically on the anchor point
            first_dy = -(len(lines) - 1) * 0.6
            body = "".join(
                f'<tspan x="{x:.2f}" dy="{first_dy if i == 0 else 1.2:.2f}em">'
                f"{escape(text)}</tspan>"
                for i, text in enumerate(lines)
            )
        return (
            f'  <text x="{x:.2f}" y="{y:.2f}" text-anchor="{label.anchor.value}" '
            f'dominant-baseline="middle" font-family="Arial, sans-serif" '
            f'font-size="{self.font_size:g}" fill="{self.text_color}"'
            f"{transform}{self._role_attr(label.role)}>{body}</text>"
        )

    def _render_warning(self, message: str, width: float) -> str:
        return (
            f'  <rect x="0" y="0" width="{width}" height="{WARNING_BANNER_HEIGHT}" '
            f'fill="{self.warning_color}" fill-opacity="0.9"/>\n'
            f'  <text x="{width / 2:.2f}" y="{WARNING_BANNER_HEIGHT / 2}" '
            f'text-anchor="middle" dominant-baseline="middle" '
            f'font-family="Arial, sans-serif" font-size="14" font-weight="bold" '
            f'fill="#FFFFFF">{escape(message)}</text>'
        )

    @staticmethod
    def _role_attr(role: str) -> str:
        return f' data-role="{role}"' if role else ""
