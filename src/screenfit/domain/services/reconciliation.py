"""Screen dimension reconciliation.

A screen is described by three coupled measurements. Whichever one the
user edits drives the other two through the aspect ratio:

    diagonal d:  width = d * cos(atan(1 / r)),  height = width / r
    width w:     height = w / r,                diagonal = sqrt(w^2 + height^2)
    height h:    width = h * r,                 diagonal = sqrt(width^2 + h^2)

This is the only place that produces ScreenDimensions from user input, so
the three fields can never be set independently of each other.
"""

from __future__ import annotations

import math

from screenfit.domain.value_objects import ScreenDimensions, ScreenField


def reconcile(
    driving_field: ScreenField,
    value: float,
    aspect_ratio: float,
) -> ScreenDimensions:
    """Derive a consistent width/height/diagonal triple.

    Args:
        driving_field: The field the user edited.
        value: Its value in centimeters (zero is allowed and yields zeros).
        aspect_ratio: Width / height, must be positive.

    Returns:
        ScreenDimensions satisfying both the Pythagorean and aspect-ratio
        invariants.

    Raises:
        ValueError: If the aspect ratio is not positive or the value is
            negative.
    """
    if aspect_ratio <= 0:
        raise ValueError("Aspect ratio must be positive")
    if value < 0:
        raise ValueError("Screen measurements cannot be negative")

    if driving_field is ScreenField.DIAGONAL:
        width = value * math.cos(math.atan(1 / aspect_ratio))
        height = width / aspect_ratio
        return ScreenDimensions(width=width, height=height, diagonal=value)

    if driving_field is ScreenField.WIDTH:
        height = value / aspect_ratio
        return ScreenDimensions(
            width=value, height=height, diagonal=math.hypot(value, height)
        )

    width = value * aspect_ratio
    return ScreenDimensions(
        width=width, height=value, diagonal=math.hypot(width, value)
    )
