"""Corner/center derivations and untilted fit zoom for geographic bounds."""

from __future__ import annotations

import math
from typing import Callable

from src.domain.exceptions import InvalidBoundsError
from src.domain.models import GeoBounds, GeoPoint, Padding, ViewportSize

from .geo_utils import interpolate as great_circle_interpolate
from .mercator import MAX_ZOOM, TILE_SIZE, latitude_fraction, zoom_for_fraction

Interpolator = Callable[[GeoPoint, GeoPoint, float], GeoPoint]


def north_west(bounds: GeoBounds) -> GeoPoint:
    return bounds.north_west


def south_east(bounds: GeoBounds) -> GeoPoint:
    return bounds.south_east


def center(
    bounds: GeoBounds, interpolate: Interpolator = great_circle_interpolate
) -> GeoPoint:
    """Great-circle midpoint between the north-east and south-west corners."""

    return interpolate(bounds.north_east, bounds.south_west, 0.5)


def latitude_world_fraction(bounds: GeoBounds) -> float:
    ne_phi = math.radians(bounds.north_east.lat)
    sw_phi = math.radians(bounds.south_west.lat)
    return (latitude_fraction(ne_phi) - latitude_fraction(sw_phi)) / math.pi


def longitude_world_fraction(bounds: GeoBounds) -> float:
    # The span is already unwrapped for bounds crossing the antimeridian.
    return bounds.longitude_span / 360.0


def zoom_to_fit(
    bounds: GeoBounds,
    viewport: ViewportSize,
    padding: Padding | None = None,
    *,
    max_zoom: float = MAX_ZOOM,
    tile_size: float = TILE_SIZE,
) -> float:
    """Minimum zoom at which the untilted bounds fit the padded viewport.

    Each axis yields the zoom that makes its world fraction span the usable
    pixels; the smaller one wins so that both axes fit.
    """

    if bounds.is_degenerate:
        raise InvalidBoundsError(f"Bounds have zero width or height: {bounds}")

    usable = (padding or Padding()).apply(viewport)

    fraction_lat = latitude_world_fraction(bounds)
    fraction_lon = longitude_world_fraction(bounds)

    if fraction_lat <= 0.0 or fraction_lon <= 0.0:
        # Both edges beyond the Mercator cutoff collapse to the same y.
        raise InvalidBoundsError(f"Bounds have no projected extent: {bounds}")

    zoom_lat = zoom_for_fraction(usable.height, fraction_lat, tile_size)
    zoom_lon = zoom_for_fraction(usable.width, fraction_lon, tile_size)
    return min(zoom_lat, zoom_lon, max_zoom)
