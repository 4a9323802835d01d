from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from src.app.ports.output import IGeodesyProvider
from src.domain.algorithms.bounds_geometry import center, zoom_to_fit
from src.domain.algorithms.mercator import MAX_ZOOM, meters_per_pixel
from src.domain.algorithms.tilted_fit import (
    PerspectiveCalibration,
    TiltCorrection,
    ground_size_px,
    tilt_correction,
)
from src.domain.exceptions import InvalidBoundsError, InvalidTiltError
from src.domain.models import CameraPose, GeoBounds, Padding, ViewportSize

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TiltedFit:
    """A tilted camera pose together with the values it was derived from."""

    pose: CameraPose
    bounds_zoom: float
    correction: TiltCorrection


@dataclass(slots=True)
class CameraFitService:
    """Application service (use case) computing camera poses that fit bounds.

    Ground distances and great-circle math come from the geodesy port; the
    projection algebra lives in the domain.
    """

    geodesy: IGeodesyProvider
    calibration: PerspectiveCalibration = field(default_factory=PerspectiveCalibration)

    max_zoom: float = MAX_ZOOM
    max_tilt_deg: float = 85.0

    def fit_bounds(
        self,
        *,
        bounds: GeoBounds,
        viewport: ViewportSize,
        padding: Padding | None = None,
    ) -> CameraPose:
        zoom = zoom_to_fit(bounds, viewport, padding, max_zoom=self.max_zoom)
        target = center(bounds, interpolate=self.geodesy.interpolate)
        return CameraPose(target=target, zoom=max(0.0, zoom), bearing=0.0, tilt=0.0)

    def fit_tilted_bounds(
        self,
        *,
        bounds: GeoBounds,
        viewport: ViewportSize,
        tilt_deg: float,
        padding: Padding | None = None,
    ) -> CameraPose:
        return self.plan_tilted_fit(
            bounds=bounds, viewport=viewport, tilt_deg=tilt_deg, padding=padding
        ).pose

    def plan_tilted_fit(
        self,
        *,
        bounds: GeoBounds,
        viewport: ViewportSize,
        tilt_deg: float,
        padding: Padding | None = None,
    ) -> TiltedFit:
        padding = padding or Padding()
        self._validate_tilt(tilt_deg)

        width_m = self.geodesy.distance_m(bounds.south_east, bounds.south_west)
        height_m = self.geodesy.distance_m(bounds.north_west, bounds.south_west)
        if width_m <= 0.0 or height_m <= 0.0:
            raise InvalidBoundsError(
                f"Bounds have no ground extent ({width_m:.3f}m x {height_m:.3f}m)"
            )

        bounds_zoom = zoom_to_fit(bounds, viewport, padding, max_zoom=self.max_zoom)
        target = center(bounds, interpolate=self.geodesy.interpolate)
        mpp = meters_per_pixel(target.lat, bounds_zoom)

        # The divisor is calibrated on the full view height, padding included.
        perspective = self.calibration.divisor(viewport.height)
        container_width = viewport.width - padding.horizontal

        correction = tilt_correction(
            ground_size_px(width_m, mpp),
            ground_size_px(height_m, mpp),
            tilt_deg,
            perspective,
            container_width,
        )

        zoom = min(max(bounds_zoom + correction.zoom_delta, 0.0), self.max_zoom)
        target = self.geodesy.offset(target, correction.translate_y * mpp, 0.0)

        logger.debug(
            "Fitted bounds at tilt %.1f: %s-bound, bounds_zoom=%.3f zoom=%.3f",
            tilt_deg,
            correction.fit_axis,
            bounds_zoom,
            zoom,
        )

        return TiltedFit(
            pose=CameraPose(target=target, zoom=zoom, bearing=0.0, tilt=tilt_deg),
            bounds_zoom=bounds_zoom,
            correction=correction,
        )

    def _validate_tilt(self, tilt_deg: float) -> None:
        if not math.isfinite(tilt_deg) or not (0.0 <= tilt_deg <= self.max_tilt_deg):
            raise InvalidTiltError(
                f"Tilt must be within [0, {self.max_tilt_deg}] degrees, got {tilt_deg}"
            )
