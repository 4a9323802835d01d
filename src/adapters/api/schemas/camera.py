from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class GeoBoundsSchema(BaseModel):
    south_west: GeoPointSchema
    north_east: GeoPointSchema


class ViewportSchema(BaseModel):
    width: float = Field(..., ge=0.0)
    height: float = Field(..., ge=0.0)


class PaddingSchema(BaseModel):
    top: float = Field(0.0, ge=0.0)
    left: float = Field(0.0, ge=0.0)
    bottom: float = Field(0.0, ge=0.0)
    right: float = Field(0.0, ge=0.0)


class FitBoundsRequestSchema(BaseModel):
    bounds: GeoBoundsSchema
    viewport: ViewportSchema
    padding: PaddingSchema | None = None


class FitTiltedBoundsRequestSchema(FitBoundsRequestSchema):
    tilt_deg: float = Field(..., ge=0.0, le=90.0)


class CameraPoseSchema(BaseModel):
    target: GeoPointSchema
    zoom: float
    bearing: float
    tilt: float


class TiltedCameraPoseSchema(CameraPoseSchema):
    bounds_zoom: float
    fit_axis: Literal["width", "height"]
