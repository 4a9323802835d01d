from __future__ import annotations

import os

from src.adapters.geodesy.spherical_geodesy_adapter import SphericalGeodesyAdapter
from src.app.ports.output import IGeodesyProvider
from src.app.services.camera_fit_service import CameraFitService
from src.domain.algorithms.tilted_fit import PerspectiveCalibration


def get_camera_fit_service() -> CameraFitService:
    geodesy: IGeodesyProvider = SphericalGeodesyAdapter()
    if os.getenv("EARTH_RADIUS_M"):
        geodesy = SphericalGeodesyAdapter(radius_m=float(os.environ["EARTH_RADIUS_M"]))

    # Recalibrate for a different renderer without changing code.
    calibration = PerspectiveCalibration()
    if os.getenv("CAMERA_FOCAL_SCALE") or os.getenv("CAMERA_REFERENCE_VIEWPORT_HEIGHT"):
        calibration = PerspectiveCalibration(
            focal_scale=float(os.getenv("CAMERA_FOCAL_SCALE") or 900.0),
            reference_viewport_height=float(
                os.getenv("CAMERA_REFERENCE_VIEWPORT_HEIGHT") or 480.0
            ),
        )

    service = CameraFitService(geodesy=geodesy, calibration=calibration)

    if os.getenv("CAMERA_MAX_TILT_DEG"):
        service.max_tilt_deg = float(os.environ["CAMERA_MAX_TILT_DEG"])
    if os.getenv("CAMERA_MAX_ZOOM"):
        service.max_zoom = float(os.environ["CAMERA_MAX_ZOOM"])

    return service
