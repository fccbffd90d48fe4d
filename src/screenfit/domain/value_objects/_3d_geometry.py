"""3D scene value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position3D:
    """Point in room space, centimeters, Z-up.

    Walls and the floor slab sit just outside the room volume, so negative
    coordinates are valid.
    """

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class BoundingBox3D:
    """Axis-aligned box in room space."""

    origin: Position3D
    size_x: float  # Width (left to right)
    size_y: float  # Depth (back wall towards viewer)
    size_z: float  # Height (floor to ceiling)

    def __post_init__(self) -> None:
        if self.size_x <= 0 or self.size_y <= 0 or self.size_z <= 0:
            raise ValueError("Bounding box dimensions must be positive")

    @classmethod
    def centered(
        cls,
        center: Position3D,
        size_x: float,
        size_y: float,
        size_z: float,
    ) -> "BoundingBox3D":
        """Build a box from its center point."""
        origin = Position3D(
            center.x - size_x / 2,
            center.y - size_y / 2,
            center.z - size_z / 2,
        )
        return cls(origin=origin, size_x=size_x, size_y=size_y, size_z=size_z)

    @property
    def center(self) -> Position3D:
        return Position3D(
            self.origin.x + self.size_x / 2,
            self.origin.y + self.size_y / 2,
            self.origin.z + self.size_z / 2,
        )

    @property
    def top(self) -> float:
        """Z coordinate of the top face."""
        return self.origin.z + self.size_z

    def get_vertices(self) -> list[tuple[float, float, float]]:
        """Return 8 corner vertices of the box."""
        x0, y0, z0 = self.origin.x, self.origin.y, self.origin.z
        x1, y1, z1 = x0 + self.size_x, y0 + self.size_y, z0 + self.size_z
        return [
            (x0, y0, z0),  # 0: back-bottom-left
            (x1, y0, z0),  # 1: back-bottom-right
            (x1, y1, z0),  # 2: front-bottom-right
            (x0, y1, z0),  # 3: front-bottom-left
            (x0, y0, z1),  # 4: back-top-left
            (x1, y0, z1),  # 5: back-top-right
            (x1, y1, z1),  # 6: front-top-right
            (x0, y1, z1),  # 7: front-top-left
        ]

    def get_triangles(self) -> list[tuple[int, int, int]]:
        """Return 12 triangles (vertex indices) covering the 6 faces.

        Winding is clockwise seen from outside in Z-up coordinates and turns
        counter-clockwise after the (x, y, z) -> (x, z, y) swap applied by the
        STL writer.
        """
        return [
            # z = min
            (0, 1, 2),
            (0, 2, 3),
            # z = max
            (4, 6, 5),
            (4, 7, 6),
            # y = min
            (0, 5, 1),
            (0, 4, 5),
            # y = max
            (2, 7, 3),
            (2, 6, 7),
            # x = min
            (0, 7, 4),
            (0, 3, 7),
            # x = max
            (1, 6, 2),
            (1, 5, 6),
        ]


@dataclass(frozen=True)
class SceneObject:
    """A named box placed in the scene."""

    name: str
    box: BoundingBox3D
    category: str = "structure"


@dataclass(frozen=True)
class CameraPlacement:
    """Suggested viewpoint for a scene."""

    position: Position3D
    target: Position3D


@dataclass(frozen=True)
class Scene3D:
    """3D layout of the room, screen and furniture."""

    objects: tuple[SceneObject, ...]
    camera: CameraPlacement

    def get(self, name: str) -> SceneObject:
        """Look up an object by name.

        Raises:
            KeyError: If no object has that name.
        """
        for scene_object in self.objects:
            if scene_object.name == name:
                return scene_object
        raise KeyError(f"No scene object named '{name}'")

    @property
    def names(self) -> list[str]:
        return [scene_object.name for scene_object in self.objects]
