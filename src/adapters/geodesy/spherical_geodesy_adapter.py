from __future__ import annotations

from dataclasses import dataclass

from src.app.ports.output import IGeodesyProvider
from src.domain.algorithms import geo_utils
from src.domain.models import GeoPoint


@dataclass(slots=True)
class SphericalGeodesyAdapter(IGeodesyProvider):
    """Geodesy on a sphere of `radius_m` (mean Earth radius by default)."""

    radius_m: float = geo_utils.EARTH_MEAN_RADIUS_M

    def distance_m(self, a: GeoPoint, b: GeoPoint) -> float:
        return geo_utils.haversine_distance_m(a, b, radius_m=self.radius_m)

    def interpolate(self, a: GeoPoint, b: GeoPoint, fraction: float) -> GeoPoint:
        return geo_utils.interpolate(a, b, fraction)

    def offset(self, origin: GeoPoint, distance_m: float, heading_deg: float) -> GeoPoint:
        return geo_utils.offset(
            origin, distance_m, heading_deg, radius_m=self.radius_m
        )
