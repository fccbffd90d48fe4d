"""Tests for the debounced ScreenModel."""

from __future__ import annotations

import threading

import pytest

from screenfit.domain.services import (
    DEBOUNCE_DELAY_MS,
    ManualScheduler,
    ScreenModel,
    format_screen_field,
)
from screenfit.domain.value_objects import (
    AspectRatio,
    DiagonalUnit,
    ScreenDimensions,
    ScreenField,
)


@pytest.fixture
def notifications() -> list[ScreenDimensions]:
    return []


@pytest.fixture
def model(scheduler: ManualScheduler, notifications: list[ScreenDimensions]) -> ScreenModel:
    return ScreenModel(
        on_dimensions_change=notifications.append,
        scheduler=scheduler,
        unit=DiagonalUnit.METRIC,
    )


class TestDebounce:
    """Tests for the trailing debounce."""

    def test_no_recompute_before_window_closes(
        self,
        model: ScreenModel,
        scheduler: ManualScheduler,
        notifications: list[ScreenDimensions],
    ) -> None:
        """Nothing should change until the debounce delay has elapsed."""
        model.set_field(ScreenField.WIDTH, "120")
        scheduler.advance(DEBOUNCE_DELAY_MS - 1)

        assert notifications == []
        assert model.dimensions == ScreenDimensions.zero()
        assert model.pending_edit is not None

    def test_burst_of_edits_recomputes_once(
        self,
        model: ScreenModel,
        scheduler: ManualScheduler,
        notifications: list[ScreenDimensions],
    ) -> None:
        """Edits at 0, 200, 400 and 600 ms recompute once, at 1600 ms, with the last value."""
        for at_ms, text in ((0, "1"), (200, "12"), (400, "120"), (600, "121")):
            scheduler.advance_to(at_ms)
            assert model.set_field(ScreenField.WIDTH, text)

        scheduler.advance_to(1599)
        assert notifications == []

        scheduler.advance_to(1600)
        assert len(notifications) == 1

        scheduler.advance_to(5000)
        assert len(notifications) == 1
        assert notifications[0].width == 121.0
        assert model.pending_edit is None

    def test_rejected_text_does_not_restart_timer(
        self,
        model: ScreenModel,
        scheduler: ManualScheduler,
        notifications: list[ScreenDimensions],
    ) -> None:
        """A rejected keystroke leaves the pending edit and its timer alone."""
        model.set_field(ScreenField.WIDTH, "100")
        scheduler.advance(500)
        assert not model.set_field(ScreenField.WIDTH, "100x")

        scheduler.advance(500)
        assert len(notifications) == 1
        assert notifications[0].width == 100.0

    def test_last_field_drives(
        self,
        model: ScreenModel,
        scheduler: ManualScheduler,
        notifications: list[ScreenDimensions],
    ) -> None:
        """When different fields are edited in one window, the last one drives."""
        model.set_field(ScreenField.WIDTH, "160")
        model.set_field(ScreenField.HEIGHT, "45")
        scheduler.advance(DEBOUNCE_DELAY_MS)

        assert len(notifications) == 1
        assert notifications[0].height == 45.0
        assert notifications[0].width == pytest.approx(80.0)

    def test_clearing_a_field_notifies_zeros(
        self,
        model: ScreenModel,
        scheduler: ManualScheduler,
        notifications: list[ScreenDimensions],
    ) -> None:
        """An emptied field recomputes to all zeros and still notifies."""
        model.set_field(ScreenField.DIAGONAL, "")
        scheduler.advance(DEBOUNCE_DELAY_MS)

        assert notifications == [ScreenDimensions.zero()]

    def test_huge_width_notifies(
        self,
        model: ScreenModel,
        scheduler: ManualScheduler,
        notifications: list[ScreenDimensions],
    ) -> None:
        """An accepted but very large value still recomputes and notifies."""
        assert model.set_field(ScreenField.WIDTH, "1e200")
        scheduler.advance(DEBOUNCE_DELAY_MS)

        assert len(notifications) == 1
        assert notifications[0].width == 1e200


class TestUnits:
    """Tests for diagonal unit handling."""

    def test_imperial_diagonal_converted_to_cm(
        self, scheduler: ManualScheduler, notifications: list[ScreenDimensions]
    ) -> None:
        """A diagonal typed in inches is stored in centimeters."""
        model = ScreenModel(
            on_dimensions_change=notifications.append,
            scheduler=scheduler,
            unit=DiagonalUnit.IMPERIAL,
        )
        model.set_field(ScreenField.DIAGONAL, "55")
        scheduler.advance(DEBOUNCE_DELAY_MS)

        assert model.dimensions.diagonal == pytest.approx(139.7)
        assert model.display_value(ScreenField.DIAGONAL) == "55.0"
        assert model.display_value(ScreenField.WIDTH) == "121.8"

    def test_explicit_unit_overrides_model_unit(
        self, model: ScreenModel, scheduler: ManualScheduler
    ) -> None:
        """The unit argument applies to that edit only."""
        model.set_field(ScreenField.DIAGONAL, "10", unit=DiagonalUnit.IMPERIAL)
        scheduler.advance(DEBOUNCE_DELAY_MS)

        assert model.dimensions.diagonal == pytest.approx(25.4)
        assert model.unit is DiagonalUnit.METRIC

    def test_width_is_never_converted(
        self, scheduler: ManualScheduler, notifications: list[ScreenDimensions]
    ) -> None:
        """Width and height are always centimeters, whatever the unit."""
        model = ScreenModel(scheduler=scheduler, unit=DiagonalUnit.IMPERIAL)
        model.set_field(ScreenField.WIDTH, "100")
        scheduler.advance(DEBOUNCE_DELAY_MS)

        assert model.dimensions.width == 100.0

    def test_unit_change_keeps_state_and_is_silent(
        self,
        model: ScreenModel,
        scheduler: ManualScheduler,
        notifications: list[ScreenDimensions],
    ) -> None:
        """Switching units changes display only."""
        model.set_field(ScreenField.DIAGONAL, "139.7")
        scheduler.advance(DEBOUNCE_DELAY_MS)
        before = model.dimensions

        model.set_unit(DiagonalUnit.IMPERIAL)

        assert model.dimensions == before
        assert len(notifications) == 1
        assert model.display_value(ScreenField.DIAGONAL) == "55.0"


class TestAspectRatioChange:
    """Tests for aspect-ratio selection."""

    def test_recomputes_immediately_from_diagonal(
        self,
        model: ScreenModel,
        scheduler: ManualScheduler,
        notifications: list[ScreenDimensions],
    ) -> None:
        """A new ratio re-derives width and height from the diagonal, without waiting."""
        model.set_field(ScreenField.DIAGONAL, "100")
        scheduler.advance(DEBOUNCE_DELAY_MS)

        model.set_aspect_ratio(AspectRatio.STANDARD_4_3)

        assert len(notifications) == 2
        assert model.dimensions.diagonal == pytest.approx(100)
        assert model.dimensions.width == pytest.approx(80)
        assert model.dimensions.height == pytest.approx(60)

    def test_no_op_without_diagonal(
        self, model: ScreenModel, notifications: list[ScreenDimensions]
    ) -> None:
        """Without a diagonal only the selection changes."""
        model.set_aspect_ratio("21:9")

        assert model.aspect_ratio is AspectRatio.ULTRAWIDE_21_9
        assert notifications == []

    def test_pending_edit_uses_ratio_at_fire_time(
        self,
        model: ScreenModel,
        scheduler: ManualScheduler,
        notifications: list[ScreenDimensions],
    ) -> None:
        """A pending edit survives a ratio change and reads the new ratio when it fires."""
        model.set_field(ScreenField.WIDTH, "120")
        model.set_aspect_ratio(AspectRatio.STANDARD_4_3)
        scheduler.advance(DEBOUNCE_DELAY_MS)

        assert model.dimensions.height == pytest.approx(90)

    def test_ratio_change_waits_for_inflight_recompute(
        self, scheduler: ManualScheduler
    ) -> None:
        """A ratio change from another thread waits until a firing edit is published."""
        changer_done = threading.Event()
        blocked_during_notify: list[bool] = []
        changers: list[threading.Thread] = []

        def change_ratio() -> None:
            model.set_aspect_ratio(AspectRatio.STANDARD_4_3)
            changer_done.set()

        def on_change(dims: ScreenDimensions) -> None:
            if blocked_during_notify:
                return
            changer = threading.Thread(target=change_ratio)
            changer.start()
            changers.append(changer)
            blocked_during_notify.append(not changer_done.wait(timeout=0.1))

        model = ScreenModel(
            on_dimensions_change=on_change,
            scheduler=scheduler,
            unit=DiagonalUnit.METRIC,
        )
        model.set_field(ScreenField.DIAGONAL, "100")
        scheduler.advance(DEBOUNCE_DELAY_MS)
        changers[0].join(timeout=5)

        assert blocked_during_notify == [True]
        assert model.aspect_ratio is AspectRatio.STANDARD_4_3
        assert model.dimensions.is_consistent(4 / 3)
        assert model.dimensions.width == pytest.approx(80)

    def test_unknown_label_raises(self, model: ScreenModel) -> None:
        """Unknown ratio labels are rejected."""
        with pytest.raises(ValueError):
            model.set_aspect_ratio("2:1")


class TestTeardown:
    """Tests for close()."""

    def test_close_cancels_pending_edit(
        self,
        model: ScreenModel,
        scheduler: ManualScheduler,
        notifications: list[ScreenDimensions],
    ) -> None:
        """No notification fires after close(), even if a timer was pending."""
        model.set_field(ScreenField.WIDTH, "120")
        model.close()
        scheduler.advance(10 * DEBOUNCE_DELAY_MS)

        assert notifications == []
        assert scheduler.pending_count == 0
        assert model.is_closed

    def test_edits_after_close_are_ignored(
        self, model: ScreenModel, scheduler: ManualScheduler
    ) -> None:
        """set_field returns False once the model is closed."""
        model.close()
        model.close()

        assert not model.set_field(ScreenField.WIDTH, "120")
        assert scheduler.pending_count == 0


class TestFormatScreenField:
    """Tests for format_screen_field."""

    def test_one_decimal(self) -> None:
        """Values are shown with one decimal."""
        dims = ScreenDimensions(width=121.758, height=68.489, diagonal=139.7)
        assert format_screen_field(dims, ScreenField.WIDTH) == "121.8"
        assert format_screen_field(dims, ScreenField.HEIGHT) == "68.5"

    def test_imperial_diagonal(self) -> None:
        """The diagonal is shown in inches when imperial is selected."""
        dims = ScreenDimensions(width=121.758, height=68.489, diagonal=139.7)
        assert format_screen_field(dims, ScreenField.DIAGONAL, DiagonalUnit.IMPERIAL) == "55.0"
