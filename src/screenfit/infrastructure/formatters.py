"""Text formatters for planner output."""

from __future__ import annotations

from screenfit.application.dtos import PlannerOutput
from screenfit.domain.services import format_centimeters, format_meters
from screenfit.domain.value_objects import AspectRatio, cm_to_display_inches


class PlanSummaryFormatter:
    """Formats a PlannerOutput as a plain text report."""

    def format(self, output: PlannerOutput, aspect_ratio: AspectRatio | None = None) -> str:
        """Format the validated dimensions and any warnings.

        Args:
            output: Planner output with a committed snapshot.
            aspect_ratio: Ratio to show in the header, if known.
        """
        if output.snapshot is None:
            return "No validated dimensions."

        screen = output.snapshot.screen
        room = output.snapshot.room
        header = "SCREEN PLAN"
        if aspect_ratio is not None:
            header = f"{header} ({aspect_ratio.label})"

        lines = [
            header,
            "=" * 50,
            "Screen",
            "-" * 50,
            f"  {'Width:':<22} {screen.width:>8.1f} cm",
            f"  {'Height:':<22} {screen.height:>8.1f} cm",
            f"  {'Diagonal:':<22} {screen.diagonal:>8.1f} cm"
            f"  ({cm_to_display_inches(screen.diagonal):.1f}\")",
            "",
            "Room",
            "-" * 50,
            f"  {'Width:':<22} {format_meters(room.width):>11}",
            f"  {'Depth:':<22} {format_meters(room.depth):>11}",
            f"  {'Height:':<22} {format_meters(room.height):>11}",
            f"  {'Screen mount height:':<22} {format_centimeters(room.screen_mount_height):>11}",
            f"  {'Screen top edge:':<22} {format_centimeters(output.snapshot.screen_top):>11}",
        ]

        if output.diagram is not None:
            mode = "to scale" if output.diagram.is_to_scale else "preview, not to scale"
            lines.append("")
            lines.append(f"Diagram: {mode} ({output.diagram.scale:.3f} px/cm)")

        if output.warnings:
            lines.append("")
            lines.append("WARNINGS")
            lines.append("-" * 50)
            lines.extend(f"  ! {warning}" for warning in output.warnings)

        return "\n".join(lines)
