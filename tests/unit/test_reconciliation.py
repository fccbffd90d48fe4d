"""Tests for screen dimension reconciliation."""

from __future__ import annotations

import math

import pytest

from screenfit.domain.services import reconcile
from screenfit.domain.value_objects import AspectRatio, ScreenField, inches_to_cm


class TestReconcile:
    """Tests for reconcile()."""

    def test_55_inch_widescreen(self) -> None:
        """A 55 inch 16:9 screen is about 121.8 x 68.5 cm."""
        dims = reconcile(ScreenField.DIAGONAL, inches_to_cm(55), 16 / 9)
        assert dims.diagonal == pytest.approx(139.7)
        assert round(dims.width, 1) == 121.8
        assert round(dims.height, 1) == 68.5

    @pytest.mark.parametrize("aspect", list(AspectRatio))
    def test_diagonal_round_trip(self, aspect: AspectRatio) -> None:
        """Re-deriving the diagonal from width and height returns the input."""
        for diagonal in (10.0, 139.7, 254.0, 1000.0):
            dims = reconcile(ScreenField.DIAGONAL, diagonal, aspect.ratio)
            assert math.hypot(dims.width, dims.height) == pytest.approx(diagonal, rel=1e-12)

    @pytest.mark.parametrize("aspect", list(AspectRatio))
    def test_width_driven_keeps_ratio(self, aspect: AspectRatio) -> None:
        """A width edit keeps width / height on the selected ratio."""
        dims = reconcile(ScreenField.WIDTH, 120.0, aspect.ratio)
        assert dims.width == 120.0
        assert abs(dims.width / dims.height - aspect.ratio) < 1e-9
        assert dims.is_consistent(aspect.ratio)

    def test_height_driven(self) -> None:
        """A height edit derives width from the ratio and the diagonal from both."""
        dims = reconcile(ScreenField.HEIGHT, 90.0, 16 / 9)
        assert dims.height == 90.0
        assert dims.width == pytest.approx(160.0)
        assert dims.diagonal == pytest.approx(math.hypot(160, 90))

    @pytest.mark.parametrize("field", list(ScreenField))
    def test_zero_yields_zeros(self, field: ScreenField) -> None:
        """Clearing any field zeroes the whole triple."""
        dims = reconcile(field, 0.0, 4 / 3)
        assert (dims.width, dims.height, dims.diagonal) == (0.0, 0.0, 0.0)

    def test_non_positive_ratio_raises(self) -> None:
        """A zero aspect ratio is rejected."""
        with pytest.raises(ValueError, match="Aspect ratio"):
            reconcile(ScreenField.WIDTH, 100.0, 0.0)

    def test_negative_value_raises(self) -> None:
        """Negative measurements are rejected."""
        with pytest.raises(ValueError):
            reconcile(ScreenField.DIAGONAL, -1.0, 16 / 9)

    @pytest.mark.parametrize("field", [ScreenField.WIDTH, ScreenField.HEIGHT])
    def test_huge_values_stay_finite(self, field: ScreenField) -> None:
        """Very large typed values reconcile without overflowing the diagonal."""
        dims = reconcile(field, 1e200, 16 / 9)

        assert math.isfinite(dims.diagonal)
        assert dims.diagonal == pytest.approx(math.hypot(dims.width, dims.height))
        assert dims.width / dims.height == pytest.approx(16 / 9)
