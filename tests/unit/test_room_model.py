"""Tests for RoomModel unit normalization."""

from __future__ import annotations

import pytest

from screenfit.domain.services import RoomModel, format_room_field
from screenfit.domain.value_objects import RoomDimensions, RoomField


@pytest.fixture
def notifications() -> list[RoomDimensions]:
    return []


@pytest.fixture
def model(notifications: list[RoomDimensions]) -> RoomModel:
    return RoomModel(on_dimensions_change=notifications.append)


class TestRoomModel:
    """Tests for RoomModel.set_field."""

    @pytest.mark.parametrize(
        "field", [RoomField.WIDTH, RoomField.DEPTH, RoomField.HEIGHT]
    )
    def test_meter_fields_stored_in_cm(self, model: RoomModel, field: RoomField) -> None:
        """Width, depth and height are typed in meters and stored in cm."""
        assert model.set_field(field, "2.438")
        assert model.dimensions.get(field) == pytest.approx(243.8)

    def test_mount_height_stored_verbatim(self, model: RoomModel) -> None:
        """The mount height is typed in centimeters."""
        model.set_field(RoomField.SCREEN_MOUNT_HEIGHT, "100")
        assert model.dimensions.screen_mount_height == 100.0

    def test_notifies_synchronously_with_full_state(
        self, model: RoomModel, notifications: list[RoomDimensions]
    ) -> None:
        """Every accepted edit notifies immediately with all four fields."""
        model.set_field("width", "4")
        model.set_field("depth", "5")

        assert len(notifications) == 2
        assert notifications[-1] == RoomDimensions(width=400, depth=500)

    def test_rejected_text_changes_nothing(
        self, model: RoomModel, notifications: list[RoomDimensions]
    ) -> None:
        """Invalid text is rejected silently."""
        model.set_field(RoomField.WIDTH, "4")
        assert not model.set_field(RoomField.WIDTH, "four")

        assert model.dimensions.width == 400
        assert len(notifications) == 1

    def test_empty_text_means_zero(self, model: RoomModel) -> None:
        """Clearing a field stores zero."""
        model.set_field(RoomField.HEIGHT, "2.5")
        model.set_field(RoomField.HEIGHT, "")
        assert model.dimensions.height == 0.0

    def test_close_detaches_listener(
        self, model: RoomModel, notifications: list[RoomDimensions]
    ) -> None:
        """No notification fires after close()."""
        model.close()
        assert not model.set_field(RoomField.WIDTH, "4")
        assert notifications == []


class TestFormatRoomField:
    """Tests for format_room_field."""

    def test_meters_and_centimeters(self) -> None:
        """Meter fields show two decimals, the mount height whole centimeters."""
        room = RoomDimensions(width=400, depth=512, height=243.8, screen_mount_height=100)
        assert format_room_field(room, RoomField.DEPTH) == "5.12"
        assert format_room_field(room, RoomField.HEIGHT) == "2.44"
        assert format_room_field(room, RoomField.SCREEN_MOUNT_HEIGHT) == "100"
