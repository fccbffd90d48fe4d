"""Units, aspect ratios and measurement parsing."""

from __future__ import annotations

import math
import re
from enum import Enum

CM_PER_INCH = 2.54
CM_PER_METER = 100.0

# Decimal literal as typed into a numeric field: "12", "12.5", ".5", "1e3"
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class DiagonalUnit(str, Enum):
    """Unit used to enter and display the screen diagonal."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def symbol(self) -> str:
        """Short unit symbol for display."""
        return "cm" if self is DiagonalUnit.METRIC else "in"


class AspectRatio(str, Enum):
    """Catalog of supported screen aspect ratios (width / height)."""

    WIDESCREEN_16_9 = "16:9"
    STANDARD_4_3 = "4:3"
    ULTRAWIDE_21_9 = "21:9"
    WIDESCREEN_16_10 = "16:10"
    SQUARE_5_4 = "5:4"

    @property
    def label(self) -> str:
        """Human readable label, e.g. ``16:9``."""
        return self.value

    @property
    def ratio(self) -> float:
        """Numeric width / height value."""
        width, height = self.value.split(":")
        return int(width) / int(height)

    @classmethod
    def from_label(cls, label: str) -> "AspectRatio":
        """Look up a catalog entry by its label.

        Args:
            label: Ratio label such as ``"16:9"`` (whitespace is ignored).

        Returns:
            The matching AspectRatio.

        Raises:
            ValueError: If the label is not in the catalog.
        """
        normalized = label.replace(" ", "")
        for aspect in cls:
            if aspect.value == normalized:
                return aspect
        available = ", ".join(aspect.value for aspect in cls)
        raise ValueError(
            f"Unknown aspect ratio '{label}'. Available ratios: {available}"
        )


DEFAULT_ASPECT_RATIO = AspectRatio.WIDESCREEN_16_9
DEFAULT_DIAGONAL_UNIT = DiagonalUnit.IMPERIAL


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * CM_PER_INCH


def cm_to_inches(cm: float) -> float:
    """Convert centimeters to inches at full precision."""
    return cm / CM_PER_INCH


def round_half_up(value: float, decimals: int = 1) -> float:
    """Round to ``decimals`` places with halves rounded up.

    Display rounding for typed fields follows ``floor(x * 10 + 0.5) / 10``
    rather than Python's round-half-to-even.
    """
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor


def cm_to_display_inches(cm: float) -> float:
    """Convert centimeters to inches rounded to one decimal for display."""
    return round_half_up(cm_to_inches(cm), 1)


def meters_to_cm(meters: float) -> float:
    """Convert meters to centimeters."""
    return meters * CM_PER_METER


def parse_measurement(raw_text: str) -> float | None:
    """Parse a typed measurement.

    An empty (or whitespace-only) string means zero. Anything that is not a
    plain decimal literal, or that parses to a negative or non-finite
    number, is rejected.

    Args:
        raw_text: Text as typed into a numeric field.

    Returns:
        The parsed value, or None if the text is rejected.
    """
    text = raw_text.strip()
    if text == "":
        return 0.0
    if not _DECIMAL_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value) or value < 0:
        return None
    return value
