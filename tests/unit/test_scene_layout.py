"""Tests for the 3D scene layout."""

from __future__ import annotations

import pytest

from screenfit.domain.services import SceneLayoutEngine
from screenfit.domain.value_objects import CommittedSnapshot, Position3D


class TestSceneLayoutEngine:
    """Tests for SceneLayoutEngine.layout."""

    def test_object_names(self, snapshot: CommittedSnapshot) -> None:
        scene = SceneLayoutEngine().layout(snapshot)
        assert scene.names == [
            "floor",
            "back_wall",
            "left_wall",
            "screen",
            "table",
            "chair_left",
            "chair_right",
        ]

    def test_without_furniture(self, snapshot: CommittedSnapshot) -> None:
        scene = SceneLayoutEngine(include_furniture=False).layout(snapshot)
        assert scene.names == ["floor", "back_wall", "left_wall", "screen"]

    def test_floor_below_origin(self, snapshot: CommittedSnapshot) -> None:
        """The floor slab's top face is at z = 0 and spans the room."""
        floor = SceneLayoutEngine().layout(snapshot).get("floor").box
        assert floor.top == pytest.approx(0)
        assert (floor.size_x, floor.size_y) == (400, 500)

    def test_walls_outside_room(self, snapshot: CommittedSnapshot) -> None:
        """Walls sit behind and left of the room volume."""
        scene = SceneLayoutEngine().layout(snapshot)
        back = scene.get("back_wall").box
        left = scene.get("left_wall").box

        assert back.origin.y + back.size_y == pytest.approx(0)
        assert back.size_z == pytest.approx(243.8)
        assert left.origin.x + left.size_x == pytest.approx(0)
        assert left.size_y == 500

    def test_screen_on_back_wall_at_mount_height(self, snapshot: CommittedSnapshot) -> None:
        """The screen is centered on the back wall with its bottom at the mount height."""
        screen = SceneLayoutEngine().layout(snapshot).get("screen")
        box = screen.box

        assert screen.category == "screen"
        assert box.origin.z == pytest.approx(100)
        assert box.center.x == pytest.approx(200)
        assert box.size_x == pytest.approx(snapshot.screen.width)
        assert box.size_z == pytest.approx(snapshot.screen.height)
        assert box.origin.y > 0

    def test_furniture_around_room_center(self, snapshot: CommittedSnapshot) -> None:
        scene = SceneLayoutEngine().layout(snapshot)
        table = scene.get("table")
        left = scene.get("chair_left").box
        right = scene.get("chair_right").box

        assert table.category == "furniture"
        assert table.box.center == Position3D(200, 250, 30)
        assert left.center.x == pytest.approx(170)
        assert right.center.x == pytest.approx(230)
        assert left.origin.z == 0

    def test_camera_looks_at_room_center(self, snapshot: CommittedSnapshot) -> None:
        camera = SceneLayoutEngine().layout(snapshot).camera
        assert (camera.target.x, camera.target.y) == (200, 250)
        assert camera.target.z == pytest.approx(121.9)
        assert camera.position.x == pytest.approx(600)
        assert camera.position.y == pytest.approx(750)
        assert camera.position.z == pytest.approx(243.8 * 1.2)
