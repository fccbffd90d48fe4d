"""3D scene layout for a committed screen and room."""

from __future__ import annotations

from screenfit.domain.value_objects import (
    BoundingBox3D,
    CameraPlacement,
    CommittedSnapshot,
    Position3D,
    Scene3D,
    SceneObject,
)

FLOOR_THICKNESS = 5.0
WALL_THICKNESS = 10.0
SCREEN_THICKNESS = 5.0
SCREEN_WALL_GAP = 2.0

TABLE_WIDTH = 120.0
TABLE_DEPTH = 60.0
TABLE_TOP_THICKNESS = 5.0
TABLE_HEIGHT = 30.0
CHAIR_WIDTH = 40.0
CHAIR_DEPTH = 40.0
CHAIR_HEIGHT = 50.0
CHAIR_SPREAD = 30.0
CHAIR_SETBACK = 40.0

CAMERA_SPREAD = 1.5
CAMERA_RISE = 1.2


class SceneLayoutEngine:
    """Places the room shell, the screen and sample furniture in 3D.

    Coordinates are room space in centimeters, Z-up: x runs along the room
    width from the left wall, y along the depth from the back wall (the one
    carrying the screen) and z up from the floor.

    Furniture is placed relative to the room's center and is only there to
    give a sense of scale.
    """

    def __init__(self, include_furniture: bool = True) -> None:
        self.include_furniture = include_furniture

    def layout(self, snapshot: CommittedSnapshot) -> Scene3D:
        """Build the scene for a snapshot.

        Args:
            snapshot: Validated screen and room dimensions.

        Returns:
            Scene3D with the floor, walls, screen and optional furniture.
        """
        room = snapshot.room
        screen = snapshot.screen
        objects = [
            SceneObject(
                "floor",
                BoundingBox3D(
                    Position3D(0, 0, -FLOOR_THICKNESS),
                    room.width,
                    room.depth,
                    FLOOR_THICKNESS,
                ),
            ),
            SceneObject(
                "back_wall",
                BoundingBox3D(
                    Position3D(0, -WALL_THICKNESS, 0),
                    room.width,
                    WALL_THICKNESS,
                    room.height,
                ),
            ),
            SceneObject(
                "left_wall",
                BoundingBox3D(
                    Position3D(-WALL_THICKNESS, 0, 0),
                    WALL_THICKNESS,
                    room.depth,
                    room.height,
                ),
            ),
            SceneObject(
                "screen",
                BoundingBox3D(
                    Position3D(
                        (room.width - screen.width) / 2,
                        SCREEN_WALL_GAP,
                        room.screen_mount_height,
                    ),
                    screen.width,
                    SCREEN_THICKNESS,
                    screen.height,
                ),
                category="screen",
            ),
        ]
        if self.include_furniture:
            objects.extend(self._furniture(room.width / 2, room.depth / 2))

        return Scene3D(objects=tuple(objects), camera=self.camera_for(snapshot))

    def camera_for(self, snapshot: CommittedSnapshot) -> CameraPlacement:
        """Camera up and to the front right, looking at the room center."""
        room = snapshot.room
        return CameraPlacement(
            position=Position3D(
                room.width * CAMERA_SPREAD,
                room.depth * CAMERA_SPREAD,
                room.height * CAMERA_RISE,
            ),
            target=Position3D(room.width / 2, room.depth / 2, room.height / 2),
        )

    def _furniture(self, center_x: float, center_y: float) -> list[SceneObject]:
        table = SceneObject(
            "table",
            BoundingBox3D.centered(
                Position3D(center_x, center_y, TABLE_HEIGHT),
                TABLE_WIDTH,
                TABLE_DEPTH,
                TABLE_TOP_THICKNESS,
            ),
            category="furniture",
        )
        chairs = [
            SceneObject(
                name,
                BoundingBox3D(
                    Position3D(
                        center_x + offset - CHAIR_WIDTH / 2,
                        center_y + CHAIR_SETBACK - CHAIR_DEPTH / 2,
                        0,
                    ),
                    CHAIR_WIDTH,
                    CHAIR_DEPTH,
                    CHAIR_HEIGHT,
                ),
                category="furniture",
            )
            for name, offset in (("chair_left", -CHAIR_SPREAD), ("chair_right", CHAIR_SPREAD))
        ]
        return [table, *chairs]
