from __future__ import annotations

import math

from src.domain.models import GeoPoint

EARTH_MEAN_RADIUS_M = 6371000.0


def haversine_distance_m(
    a: GeoPoint, b: GeoPoint, *, radius_m: float = EARTH_MEAN_RADIUS_M
) -> float:
    """Great-circle distance in meters."""

    lat1 = math.radians(a.lat)
    lon1 = math.radians(a.lon)
    lat2 = math.radians(b.lat)
    lon2 = math.radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    return 2.0 * radius_m * math.asin(math.sqrt(min(1.0, s)))


def normalize_longitude(lon: float) -> float:
    """Wrap a longitude into [-180, 180)."""

    return (lon + 180.0) % 360.0 - 180.0


def interpolate(a: GeoPoint, b: GeoPoint, fraction: float) -> GeoPoint:
    """Point at `fraction` of the way from `a` to `b` along the great circle.

    Uses spherical linear interpolation over unit vectors, so the midpoint of
    two points on the same parallel bends toward the pole rather than
    averaging lat/lon.
    """

    lat1 = math.radians(a.lat)
    lon1 = math.radians(a.lon)
    lat2 = math.radians(b.lat)
    lon2 = math.radians(b.lon)

    cos_lat1 = math.cos(lat1)
    cos_lat2 = math.cos(lat2)

    # Angular distance between the endpoints (haversine form).
    h = (
        math.sin((lat2 - lat1) / 2.0) ** 2
        + cos_lat1 * cos_lat2 * math.sin((lon2 - lon1) / 2.0) ** 2
    )
    angle = 2.0 * math.asin(math.sqrt(min(1.0, h)))
    sin_angle = math.sin(angle)
    if sin_angle < 1e-12:
        # Coincident (or antipodal) endpoints: no unique great circle.
        return a if fraction < 0.5 else b

    wa = math.sin((1.0 - fraction) * angle) / sin_angle
    wb = math.sin(fraction * angle) / sin_angle

    x = wa * cos_lat1 * math.cos(lon1) + wb * cos_lat2 * math.cos(lon2)
    y = wa * cos_lat1 * math.sin(lon1) + wb * cos_lat2 * math.sin(lon2)
    z = wa * math.sin(lat1) + wb * math.sin(lat2)

    lat = math.degrees(math.atan2(z, math.sqrt(x * x + y * y)))
    lon = math.degrees(math.atan2(y, x))
    return GeoPoint(lat=max(-90.0, min(90.0, lat)), lon=lon)


def offset(
    origin: GeoPoint,
    distance_m: float,
    heading_deg: float,
    *,
    radius_m: float = EARTH_MEAN_RADIUS_M,
) -> GeoPoint:
    """Destination reached by travelling `distance_m` along an initial heading.

    Heading is in degrees clockwise from north. Negative distances travel
    backwards along the heading.
    """

    if distance_m == 0.0:
        return origin

    delta = distance_m / radius_m
    theta = math.radians(heading_deg)
    lat1 = math.radians(origin.lat)
    lon1 = math.radians(origin.lon)

    sin_lat2 = math.sin(lat1) * math.cos(delta) + math.cos(lat1) * math.sin(
        delta
    ) * math.cos(theta)
    lat2 = math.asin(max(-1.0, min(1.0, sin_lat2)))
    lon2 = lon1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * sin_lat2,
    )

    return GeoPoint(
        lat=math.degrees(lat2), lon=normalize_longitude(math.degrees(lon2))
    )
