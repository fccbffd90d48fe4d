"""Screen model with debounced dimension reconciliation."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from screenfit.domain.services.reconciliation import reconcile
from screenfit.domain.services.scheduler import (
    DEBOUNCE_DELAY_MS,
    ScheduledTask,
    Scheduler,
    ThreadingScheduler,
)
from screenfit.domain.value_objects import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_DIAGONAL_UNIT,
    AspectRatio,
    DiagonalUnit,
    ScreenDimensions,
    ScreenField,
    cm_to_display_inches,
    inches_to_cm,
    parse_measurement,
)

logger = logging.getLogger(__name__)

ScreenDimensionsListener = Callable[[ScreenDimensions], None]


def format_screen_field(
    dimensions: ScreenDimensions,
    field: ScreenField,
    unit: DiagonalUnit = DiagonalUnit.METRIC,
) -> str:
    """Display text for one screen field.

    Width and height are always shown in centimeters. The diagonal is shown
    in the selected unit; imperial values are rounded to a tenth of an inch.

    Args:
        dimensions: Current numeric state.
        field: Field to format.
        unit: Unit selected for the diagonal.

    Returns:
        The value formatted with one decimal.
    """
    value = dimensions.get(field)
    if field is ScreenField.DIAGONAL and unit is DiagonalUnit.IMPERIAL:
        value = cm_to_display_inches(value)
    return f"{value:.1f}"


@dataclass(frozen=True)
class PendingEdit:
    """An accepted edit waiting for the debounce window to close."""

    field: ScreenField
    value_cm: float
    generation: int


class ScreenModel:
    """Keeps width, height and diagonal consistent under single-field edits.

    Each accepted edit restarts a single trailing debounce timer. When the
    timer fires the edited field drives a reconciliation and the listener
    receives the full new ScreenDimensions. Aspect-ratio changes reconcile
    immediately from the current diagonal.

    Attributes:
        debounce_ms: Quiet period after the last edit before recomputing.
    """

    def __init__(
        self,
        on_dimensions_change: ScreenDimensionsListener | None = None,
        scheduler: Scheduler | None = None,
        aspect_ratio: AspectRatio = DEFAULT_ASPECT_RATIO,
        unit: DiagonalUnit = DEFAULT_DIAGONAL_UNIT,
        debounce_ms: int = DEBOUNCE_DELAY_MS,
    ) -> None:
        """Initialize the model with all-zero dimensions.

        Args:
            on_dimensions_change: Called with the full dimensions after every
                recomputation.
            scheduler: Timer source for the debounce (defaults to a
                ThreadingScheduler).
            aspect_ratio: Initial aspect ratio.
            unit: Initial unit for diagonal input and display.
            debounce_ms: Debounce delay in milliseconds.
        """
        self._listener = on_dimensions_change
        self._scheduler: Scheduler = scheduler or ThreadingScheduler()
        self._aspect_ratio = aspect_ratio
        self._unit = unit
        self.debounce_ms = debounce_ms
        self._dimensions = ScreenDimensions.zero()
        self._pending: PendingEdit | None = None
        self._task: ScheduledTask | None = None
        self._generation = 0
        self._closed = False
        self._lock = threading.RLock()

    @property
    def dimensions(self) -> ScreenDimensions:
        return self._dimensions

    @property
    def aspect_ratio(self) -> AspectRatio:
        return self._aspect_ratio

    @property
    def unit(self) -> DiagonalUnit:
        return self._unit

    @property
    def pending_edit(self) -> PendingEdit | None:
        """The edit waiting on the debounce timer, if any."""
        return self._pending

    @property
    def is_closed(self) -> bool:
        return self._closed

    def set_field(
        self,
        field: ScreenField | str,
        raw_text: str,
        unit: DiagonalUnit | None = None,
    ) -> bool:
        """Accept a keystroke on one of the screen fields.

        The value is parsed and converted to centimeters now; reconciliation
        runs once the debounce window closes. Rejected text leaves the model
        untouched and does not restart the timer.

        Args:
            field: Field being edited.
            raw_text: Text currently in the field.
            unit: Unit of a diagonal value (defaults to the model's unit).

        Returns:
            True if the edit was accepted and scheduled.
        """
        field = ScreenField(field)
        if self._closed:
            logger.debug(f"Ignoring edit of {field.value} on closed screen model")
            return False

        value = parse_measurement(raw_text)
        if value is None:
            logger.debug(f"Rejected {field.value} input {raw_text!r}")
            return False

        effective_unit = unit or self._unit
        if field is ScreenField.DIAGONAL and effective_unit is DiagonalUnit.IMPERIAL:
            value = inches_to_cm(value)

        with self._lock:
            if self._task is not None:
                self._task.cancel()
            self._generation += 1
            generation = self._generation
            self._pending = PendingEdit(field, value, generation)
            self._task = self._scheduler.call_later(
                self.debounce_ms, lambda: self._fire(generation)
            )
        logger.debug(
            f"Scheduled {field.value}={value:.3f} cm in {self.debounce_ms} ms"
        )
        return True

    def set_aspect_ratio(self, aspect_ratio: AspectRatio | str) -> None:
        """Select a new aspect ratio and re-derive from the diagonal.

        Recomputes immediately when a diagonal is known; otherwise only the
        selection changes.
        """
        if isinstance(aspect_ratio, str) and not isinstance(aspect_ratio, AspectRatio):
            aspect_ratio = AspectRatio.from_label(aspect_ratio)
        with self._lock:
            if self._closed:
                return
            self._aspect_ratio = aspect_ratio
            diagonal = self._dimensions.diagonal
            if diagonal > 0:
                self._apply(
                    reconcile(ScreenField.DIAGONAL, diagonal, aspect_ratio.ratio)
                )

    def set_unit(self, unit: DiagonalUnit | str) -> None:
        """Select the diagonal unit. Numeric state is unchanged."""
        self._unit = DiagonalUnit(unit)

    def display_value(self, field: ScreenField | str) -> str:
        """Display text for a field in the current unit."""
        return format_screen_field(self._dimensions, ScreenField(field), self._unit)

    def close(self) -> None:
        """Discard any pending recomputation and stop notifying."""
        with self._lock:
            if self._task is not None:
                self._task.cancel()
            self._task = None
            self._pending = None
            self._closed = True
            self._listener = None

    def _fire(self, generation: int) -> None:
        with self._lock:
            pending = self._pending
            if self._closed or pending is None or pending.generation != generation:
                # Superseded or torn down since this task was scheduled
                return
            self._pending = None
            self._task = None
            # The ratio read here is still current when the result is published
            self._apply(
                reconcile(pending.field, pending.value_cm, self._aspect_ratio.ratio)
            )

    def _apply(self, dimensions: ScreenDimensions) -> None:
        self._dimensions = dimensions
        listener = self._listener
        if listener is not None and not self._closed:
            listener(dimensions)
