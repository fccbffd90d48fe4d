"""Tests for the 2D elevation layout."""

from __future__ import annotations

from dataclasses import replace

import pytest

from screenfit.domain.services import (
    DiagramLayoutEngine,
    DiagramMode,
    compute_diagram_layout,
    format_centimeters,
    format_diagonal,
    format_meters,
    screen_exceeds_room_height,
)
from screenfit.domain.services.diagram_layout import SCALE_MARGIN_FACTOR
from screenfit.domain.value_objects import (
    SCREEN_TOO_TALL,
    Label,
    RoomDimensions,
    ScreenDimensions,
)


class TestFormatters:
    """Tests for callout text formatting."""

    def test_format_meters(self) -> None:
        assert format_meters(243.8) == "2.44 m"

    def test_format_centimeters_rounds_half_up(self) -> None:
        assert format_centimeters(68.489) == "68 cm"
        assert format_centimeters(67.5) == "68 cm"

    def test_format_diagonal_two_lines(self) -> None:
        """The diagonal label shows cm with one decimal, then whole inches."""
        assert format_diagonal(139.7) == '139.7 cm\n55"'


class TestScaledLayout:
    """Tests for layouts on a measured canvas."""

    def setup_method(self) -> None:
        self.screen = ScreenDimensions(width=121.76, height=68.49, diagonal=139.7)
        self.room = RoomDimensions(
            width=400, depth=500, height=243.8, screen_mount_height=100
        )
        self.layout = DiagramLayoutEngine().layout(self.screen, self.room, 1200, 900)

    def test_scale_uses_tighter_axis(self) -> None:
        """Scale is the smaller canvas/room ratio times the margin factor."""
        expected = min(1200 / 400, 900 / 243.8) * SCALE_MARGIN_FACTOR
        assert self.layout.mode is DiagramMode.SCALED
        assert self.layout.is_to_scale
        assert self.layout.scale == pytest.approx(expected)

    def test_room_centered(self) -> None:
        """The room outline is centered in the canvas."""
        room = self.layout.room_rect
        assert room.origin.x + room.width / 2 == pytest.approx(600)
        assert room.origin.y + room.height / 2 == pytest.approx(450)
        assert room.width == pytest.approx(400 * self.layout.scale)

    def test_screen_bottom_at_mount_height(self) -> None:
        """The screen's bottom edge sits mount_height above the floor line."""
        scale = self.layout.scale
        room = self.layout.room_rect
        screen = self.layout.screen_rect
        floor_y = room.origin.y + room.height

        assert screen.origin.y + screen.height == pytest.approx(floor_y - 100 * scale)
        assert screen.width == pytest.approx(121.76 * scale)
        assert screen.origin.x + screen.width / 2 == pytest.approx(600)

    def test_callout_texts(self) -> None:
        """Callouts show rounded cm for the screen and meters for the room."""
        assert self.layout.dimension("screen_width").label.text == "122 cm"
        assert self.layout.dimension("screen_height").label.text == "68 cm"
        assert self.layout.dimension("mount_height").label.text == "100 cm"
        assert self.layout.dimension("room_height").label.text == "2.44 m"

    def test_callout_rotations(self) -> None:
        assert self.layout.dimension("screen_width").label.rotation_degrees == 0
        assert self.layout.dimension("screen_height").label.rotation_degrees == 90
        assert self.layout.dimension("mount_height").label.rotation_degrees == -90

    def test_mount_span_matches_scaled_mount(self) -> None:
        mount = self.layout.dimension("mount_height")
        assert mount.length == pytest.approx(100 * self.layout.scale)

    def test_diagonal_label_rotated_along_diagonal(self) -> None:
        """The diagonal label follows the rising diagonal."""
        (label,) = [p for p in self.layout.by_role("diagonal") if isinstance(p, Label)]
        assert label.text == '139.7 cm\n55"'
        assert label.rotation_degrees < 0

    def test_bands_and_captions(self) -> None:
        captions = [p.text for p in self.layout.by_role("caption") if isinstance(p, Label)]
        assert captions == ["CEILING", "FLOOR", "Room height"]
        assert len(self.layout.by_role("ceiling")) == 1
        assert len(self.layout.by_role("floor")) == 1

    def test_no_warning_when_screen_fits(self) -> None:
        assert not self.layout.screen_exceeds_room_height
        assert self.layout.warning is None

    def test_dimension_primitives_included(self) -> None:
        """Each callout contributes three lines, two arrowheads and a label."""
        assert len(self.layout.by_kind("arrowhead")) == 8
        assert len(self.layout.by_role("room_height")) == 6


class TestHeightWarning:
    """Tests for the screen-too-high advisory."""

    def test_warning_when_top_passes_ceiling(
        self, screen_55: ScreenDimensions, living_room: RoomDimensions
    ) -> None:
        """A 200 cm mount pushes a 68.5 cm tall screen past 243.8 cm."""
        room = replace(living_room, screen_mount_height=200)
        layout = compute_diagram_layout(screen_55, room, 1200, 900)

        assert layout.screen_exceeds_room_height
        assert layout.warning == SCREEN_TOO_TALL
        assert layout.warning.message == "Screen is too high for the room!"

    def test_warning_ignores_unknown_room_height(self, screen_55: ScreenDimensions) -> None:
        assert not screen_exceeds_room_height(
            screen_55, RoomDimensions(screen_mount_height=500)
        )

    def test_exactly_at_ceiling_is_not_a_warning(self) -> None:
        screen = ScreenDimensions(width=80, height=60, diagonal=100)
        room = RoomDimensions(width=300, depth=300, height=200, screen_mount_height=140)
        assert not screen_exceeds_room_height(screen, room)


class TestPreviewLayout:
    """Tests for the not-to-scale fallback."""

    @pytest.mark.parametrize(
        "canvas", [(None, None), (0, 900), (1200, 0)]
    )
    def test_unmeasured_canvas_uses_preview(
        self,
        screen_55: ScreenDimensions,
        living_room: RoomDimensions,
        canvas: tuple[float | None, float | None],
    ) -> None:
        layout = compute_diagram_layout(screen_55, living_room, *canvas)

        assert layout.mode is DiagramMode.PREVIEW
        assert not layout.is_to_scale
        assert layout.room_rect.width == 800
        assert layout.room_rect.height == 600
        assert layout.screen_rect.width == 400
        assert layout.screen_rect.height == 200

    def test_zero_room_uses_preview(self, screen_55: ScreenDimensions) -> None:
        layout = compute_diagram_layout(screen_55, RoomDimensions.zero(), 1200, 900)
        assert layout.mode is DiagramMode.PREVIEW

    def test_preview_labels_show_real_values(
        self, screen_55: ScreenDimensions, living_room: RoomDimensions
    ) -> None:
        """Labels still report the real measurements."""
        layout = compute_diagram_layout(screen_55, living_room)
        assert layout.dimension("screen_width").label.text == "122 cm"
        assert layout.dimension("room_height").label.text == "2.44 m"

    def test_preview_canvas_size(
        self, screen_55: ScreenDimensions, living_room: RoomDimensions
    ) -> None:
        layout = compute_diagram_layout(screen_55, living_room)
        assert (layout.canvas_width, layout.canvas_height) == (1000, 800)


class TestEngineOptions:
    """Tests for grid and guide toggles."""

    def test_guides_toggle(
        self, screen_55: ScreenDimensions, living_room: RoomDimensions
    ) -> None:
        with_guides = DiagramLayoutEngine().layout(screen_55, living_room, 1200, 900)
        without = DiagramLayoutEngine(show_guides=False).layout(
            screen_55, living_room, 1200, 900
        )

        assert len(with_guides.by_role("screen_axis")) == 2
        assert len(with_guides.by_role("outlet_axis")) == 2
        assert without.by_role("screen_axis") == []

    def test_grid_toggle(
        self, screen_55: ScreenDimensions, living_room: RoomDimensions
    ) -> None:
        assert DiagramLayoutEngine().layout(screen_55, living_room).by_role("grid")
        assert (
            DiagramLayoutEngine(show_grid=False)
            .layout(screen_55, living_room)
            .by_role("grid")
            == []
        )

    def test_invalid_margin_factor(self) -> None:
        with pytest.raises(ValueError):
            DiagramLayoutEngine(margin_factor=0)

    def test_layout_snapshot_matches_layout(self, snapshot) -> None:
        engine = DiagramLayoutEngine()
        assert engine.layout_snapshot(snapshot, 1200, 900) == engine.layout(
            snapshot.screen, snapshot.room, 1200, 900
        )
