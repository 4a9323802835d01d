"""Perspective correction for fitting bounds under a tilted camera.

A tilted camera foreshortens the far edge of the ground rectangle into a
trapezoid, so the untilted fit zoom over- or under-fills the viewport. The
correction below derives a vertical scale (turned into a zoom delta) and a
vertical translation (turned into a target offset) from the projection of a
tilted plane through a perspective divisor.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from src.domain.exceptions import InvalidTiltError

FitAxis = Literal["width", "height"]


@dataclass(frozen=True, slots=True)
class PerspectiveCalibration:
    """Field-of-view calibration of the rendering engine.

    The defaults reproduce the renderer the correction was measured against:
    a focal scale of 900 at a 480 px tall viewport.
    """

    focal_scale: float = 900.0
    reference_viewport_height: float = 480.0

    def divisor(self, viewport_height: float) -> float:
        return -1.0 / (
            self.focal_scale * (viewport_height / self.reference_viewport_height)
        )


@dataclass(frozen=True, slots=True)
class TiltCorrection:
    scale_y: float
    translate_y: float  # pixels, along the camera's forward direction
    fit_axis: FitAxis

    @property
    def zoom_delta(self) -> float:
        return math.log2(self.scale_y)


NO_CORRECTION = TiltCorrection(scale_y=1.0, translate_y=0.0, fit_axis="height")


def ground_size_px(meters: float, meters_per_pixel: float) -> float:
    return float(math.ceil(meters / meters_per_pixel))


def tilt_correction(
    bounds_width_px: float,
    bounds_height_px: float,
    tilt_deg: float,
    perspective: float,
    container_width_px: float,
) -> TiltCorrection:
    """Scale and translation that keep the tilted bounds inside the container.

    Two constraints limit the scale: the trapezoid's near (wider) edge must fit
    the container width, and the foreshortened height must fit vertically.
    The smaller scale is binding.

    Raises `InvalidTiltError` when the tilt pushes the far edge of the bounds
    to or past the horizon, where no finite scale fits the height.
    """

    if tilt_deg == 0.0:
        return NO_CORRECTION

    angle = math.radians(tilt_deg)
    sin_a = math.sin(angle)
    cos_a = math.cos(angle)
    tan_a = math.tan(angle)

    factor_h = bounds_height_px * bounds_height_px * perspective * tan_a
    factor_w = bounds_height_px * perspective * sin_a * container_width_px

    scale_width_fit = (
        0.5
        * container_width_px
        * (1.0 / bounds_width_px + 1.0 / (bounds_width_px - factor_w))
    )
    height_denominator = cos_a - 0.25 * factor_h * perspective * sin_a
    if height_denominator <= 0.0:
        # The far edge projects at or beyond the horizon.
        raise InvalidTiltError(
            f"Tilt {tilt_deg} deg is too steep for {bounds_width_px:.0f}x"
            f"{bounds_height_px:.0f} px bounds (width x height); lower the tilt"
        )
    scale_height_fit = 1.0 / height_denominator

    if scale_width_fit < scale_height_fit:
        translate = (factor_w * bounds_height_px) / (
            4.0 * bounds_width_px - 2.0 * factor_w
        )
        if not (math.isfinite(scale_width_fit) and scale_width_fit > 0.0):
            raise InvalidTiltError(
                f"Tilt {tilt_deg} deg yields no finite scale for "
                f"{bounds_width_px:.0f}x{bounds_height_px:.0f} px bounds"
            )
        return TiltCorrection(
            scale_y=scale_width_fit, translate_y=translate, fit_axis="width"
        )
    return TiltCorrection(
        scale_y=scale_height_fit, translate_y=0.25 * factor_h, fit_axis="height"
    )
