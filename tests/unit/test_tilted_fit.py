from __future__ import annotations

import math

import pytest

from src.domain.algorithms.tilted_fit import (
    NO_CORRECTION,
    PerspectiveCalibration,
    TiltCorrection,
    ground_size_px,
    tilt_correction,
)
from src.domain.exceptions import InvalidTiltError

# 480 px tall viewport with the default calibration.
PERSPECTIVE = -1.0 / 900.0


def test_calibration_divisor_scales_with_viewport_height() -> None:
    cal = PerspectiveCalibration()

    assert cal.divisor(480.0) == pytest.approx(-1.0 / 900.0)
    assert cal.divisor(960.0) == pytest.approx(-1.0 / 1800.0)


def test_custom_calibration() -> None:
    cal = PerspectiveCalibration(focal_scale=1000.0, reference_viewport_height=500.0)
    assert cal.divisor(500.0) == pytest.approx(-1.0 / 1000.0)


def test_no_tilt_needs_no_correction() -> None:
    c = tilt_correction(400.0, 300.0, 0.0, PERSPECTIVE, 380.0)

    assert c == NO_CORRECTION
    assert c.scale_y == 1.0
    assert c.translate_y == 0.0
    assert c.zoom_delta == 0.0


def test_wide_bounds_are_width_bound() -> None:
    c = tilt_correction(400.0, 300.0, 30.0, PERSPECTIVE, 400.0)

    assert c.fit_axis == "width"
    assert c.scale_y == pytest.approx(0.928571, rel=1e-5)
    assert c.translate_y == pytest.approx(-11.53846, rel=1e-5)
    assert c.zoom_delta < 0.0


def test_tall_bounds_are_height_bound() -> None:
    c = tilt_correction(200.0, 300.0, 30.0, PERSPECTIVE, 400.0)

    assert c.fit_axis == "height"
    assert c.scale_y == pytest.approx(1.16549, rel=1e-4)
    assert c.translate_y == pytest.approx(-14.43376, rel=1e-5)
    assert c.zoom_delta > 0.0


def test_width_bound_scale_strictly_decreases_with_tilt() -> None:
    scales = [
        tilt_correction(400.0, 300.0, angle, PERSPECTIVE, 400.0).scale_y
        for angle in (0.0, 15.0, 30.0, 45.0, 60.0)
    ]

    assert scales[0] == 1.0
    assert all(later < earlier for earlier, later in zip(scales, scales[1:]))


def test_zoom_delta_is_log2_of_scale() -> None:
    assert TiltCorrection(scale_y=2.0, translate_y=0.0, fit_axis="width").zoom_delta == 1.0
    assert TiltCorrection(scale_y=0.5, translate_y=0.0, fit_axis="height").zoom_delta == -1.0


def test_ground_size_rounds_up_to_whole_pixels() -> None:
    assert ground_size_px(1000.5, 10.0) == 101.0
    assert ground_size_px(1000.0, 10.0) == 100.0


# 1000 px tall viewport with the default calibration.
STEEP_PERSPECTIVE = -1.0 / 1875.0


def test_tilt_past_horizon_is_rejected() -> None:
    with pytest.raises(InvalidTiltError, match="80"):
        tilt_correction(1000.0, 1000.0, 80.0, STEEP_PERSPECTIVE, 1000.0)


def test_steep_tilt_before_horizon_is_width_bound() -> None:
    c = tilt_correction(1000.0, 1000.0, 75.0, STEEP_PERSPECTIVE, 1000.0)

    assert c.fit_axis == "width"
    assert 0.0 < c.scale_y < 1.0
    assert math.isfinite(c.zoom_delta)


@pytest.mark.parametrize("tilt", [75.0, 80.0, 85.0])
@pytest.mark.parametrize(
    ("width_px", "height_px"), [(1000.0, 1000.0), (200.0, 1000.0), (1000.0, 100.0)]
)
def test_steep_tilts_give_positive_scale_or_explicit_error(
    width_px: float, height_px: float, tilt: float
) -> None:
    try:
        c = tilt_correction(width_px, height_px, tilt, STEEP_PERSPECTIVE, 1000.0)
    except InvalidTiltError:
        return

    assert math.isfinite(c.scale_y)
    assert c.scale_y > 0.0
    assert math.isfinite(c.zoom_delta)
    assert math.isfinite(c.translate_y)
