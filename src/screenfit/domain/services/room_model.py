"""Room model: unit normalization for room measurements."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from screenfit.domain.value_objects import (
    RoomDimensions,
    RoomField,
    meters_to_cm,
    parse_measurement,
)

logger = logging.getLogger(__name__)

RoomDimensionsListener = Callable[[RoomDimensions], None]


def format_room_field(dimensions: RoomDimensions, field: RoomField) -> str:
    """Display text for a room field in its entry unit (m or cm)."""
    value = dimensions.get(field)
    if field.entered_in_meters:
        return f"{value / 100:.2f}"
    return f"{value:.0f}"


class RoomModel:
    """Stores room measurements in centimeters.

    Width, depth and height are typed in meters; the screen mount height is
    typed in centimeters. Every accepted edit notifies the listener
    synchronously.
    """

    def __init__(self, on_dimensions_change: RoomDimensionsListener | None = None) -> None:
        self._listener = on_dimensions_change
        self._dimensions = RoomDimensions.zero()
        self._closed = False

    @property
    def dimensions(self) -> RoomDimensions:
        return self._dimensions

    def set_field(self, field: RoomField | str, raw_text: str) -> bool:
        """Accept a keystroke on a room field.

        Args:
            field: Field being edited.
            raw_text: Text currently in the field.

        Returns:
            True if the value was accepted and stored.
        """
        field = RoomField(field)
        if self._closed:
            return False
        value = parse_measurement(raw_text)
        if value is None:
            logger.debug(f"Rejected room {field.value} input {raw_text!r}")
            return False

        if field.entered_in_meters:
            value = meters_to_cm(value)
        self._dimensions = replace(self._dimensions, **{field.value: value})

        if self._listener is not None:
            self._listener(self._dimensions)
        return True

    def display_value(self, field: RoomField | str) -> str:
        return format_room_field(self._dimensions, RoomField(field))

    def close(self) -> None:
        """Detach the listener and ignore further edits."""
        self._listener = None
        self._closed = True
