from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_camera_fit_service
from src.adapters.api.schemas.camera import (
    CameraPoseSchema,
    FitBoundsRequestSchema,
    FitTiltedBoundsRequestSchema,
    GeoPointSchema,
    TiltedCameraPoseSchema,
)
from src.app.services.camera_fit_service import CameraFitService
from src.domain.models import CameraPose, GeoBounds, GeoPoint, Padding, ViewportSize

router = APIRouter(prefix="/camera", tags=["camera"])


def _request_to_domain(
    req: FitBoundsRequestSchema,
) -> tuple[GeoBounds, ViewportSize, Padding]:
    bounds = GeoBounds(
        south_west=GeoPoint(
            lat=req.bounds.south_west.lat, lon=req.bounds.south_west.lon
        ),
        north_east=GeoPoint(
            lat=req.bounds.north_east.lat, lon=req.bounds.north_east.lon
        ),
    )
    viewport = ViewportSize(width=req.viewport.width, height=req.viewport.height)
    padding = (
        Padding(
            top=req.padding.top,
            left=req.padding.left,
            bottom=req.padding.bottom,
            right=req.padding.right,
        )
        if req.padding
        else Padding()
    )
    return bounds, viewport, padding


def _target_to_schema(pose: CameraPose) -> GeoPointSchema:
    return GeoPointSchema(lat=pose.target.lat, lon=pose.target.lon)


@router.post("/fit", response_model=TiltedCameraPoseSchema)
def fit_tilted_bounds(
    req: FitTiltedBoundsRequestSchema,
    service: CameraFitService = Depends(get_camera_fit_service),
) -> TiltedCameraPoseSchema:
    bounds, viewport, padding = _request_to_domain(req)
    fit = service.plan_tilted_fit(
        bounds=bounds, viewport=viewport, tilt_deg=req.tilt_deg, padding=padding
    )
    return TiltedCameraPoseSchema(
        target=_target_to_schema(fit.pose),
        zoom=fit.pose.zoom,
        bearing=fit.pose.bearing,
        tilt=fit.pose.tilt,
        bounds_zoom=fit.bounds_zoom,
        fit_axis=fit.correction.fit_axis,
    )


@router.post("/fit-untilted", response_model=CameraPoseSchema)
def fit_bounds(
    req: FitBoundsRequestSchema,
    service: CameraFitService = Depends(get_camera_fit_service),
) -> CameraPoseSchema:
    bounds, viewport, padding = _request_to_domain(req)
    pose = service.fit_bounds(bounds=bounds, viewport=viewport, padding=padding)
    return CameraPoseSchema(
        target=_target_to_schema(pose),
        zoom=pose.zoom,
        bearing=pose.bearing,
        tilt=pose.tilt,
    )
