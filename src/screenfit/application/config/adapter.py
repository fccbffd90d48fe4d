"""Adapter to convert PlannerConfiguration to application DTOs.

Transforms the Pydantic configuration into the ScreenInput, RoomInput and
CanvasInput DTOs used by PlanLayoutCommand, and the SVG settings into a
configured DiagramLayoutEngine.
"""

from screenfit.application.config.schema import PlannerConfiguration
from screenfit.application.dtos import CanvasInput, RoomInput, ScreenInput
from screenfit.domain.services import DiagramLayoutEngine


def config_to_inputs(
    config: PlannerConfiguration,
) -> tuple[ScreenInput, RoomInput, CanvasInput | None]:
    """Convert a PlannerConfiguration to command DTOs.

    Args:
        config: A validated PlannerConfiguration instance

    Returns:
        A tuple of (ScreenInput, RoomInput, CanvasInput or None) ready for
        PlanLayoutCommand

    Example:
        >>> config = load_config(Path("living-room.json"))
        >>> screen_input, room_input, canvas_input = config_to_inputs(config)
        >>> result = PlanLayoutCommand().execute(screen_input, room_input, canvas_input)
    """
    screen = config.screen
    screen_input = ScreenInput(
        aspect_ratio=screen.aspect_ratio.value,
        unit=screen.unit.value,
        width=screen.width,
        height=screen.height,
        diagonal=screen.diagonal,
    )

    room = config.room
    room_input = RoomInput(
        width=room.width,
        depth=room.depth,
        height=room.height,
        screen_mount_height=room.screen_mount_height,
    )

    canvas_input = None
    if config.canvas is not None:
        canvas_input = CanvasInput(width=config.canvas.width, height=config.canvas.height)

    return screen_input, room_input, canvas_input


def config_to_diagram_engine(config: PlannerConfiguration) -> DiagramLayoutEngine:
    """Build a DiagramLayoutEngine honoring the SVG output options."""
    svg = config.output.svg
    if svg is None:
        return DiagramLayoutEngine()
    return DiagramLayoutEngine(show_grid=svg.show_grid, show_guides=svg.show_guides)


def config_to_exporter_options(config: PlannerConfiguration) -> dict[str, dict]:
    """Constructor keyword arguments per export format from the output section."""
    options: dict[str, dict] = {}
    json_options = config.output.json_options
    if json_options is not None:
        options["json"] = {
            "include_scene": json_options.include_scene,
            "indent": json_options.indent,
        }
    return options
