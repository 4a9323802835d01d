"""Web-Mercator (slippy map) helpers.

Zoom 0 renders the whole world into a single `TILE_SIZE` x `TILE_SIZE` tile;
every zoom level doubles the pixel size of the world.
"""

from __future__ import annotations

import math

EARTH_RADIUS_M = 6378137.0
TILE_SIZE = 256.0
MAX_ZOOM = 21.0


def latitude_fraction(phi_rad: float) -> float:
    """Inverse-Mercator y of a latitude (radians), clamped to [-pi/2, pi/2]."""

    sin_phi = math.sin(phi_rad)
    # Poles project to +/- infinity before clamping.
    if sin_phi >= 1.0:
        return math.pi / 2.0
    if sin_phi <= -1.0:
        return -math.pi / 2.0
    y = math.log((1.0 + sin_phi) / (1.0 - sin_phi)) / 2.0
    return max(min(y, math.pi), -math.pi) / 2.0


def zoom_for_fraction(
    pixels: float, fraction: float, tile_size: float = TILE_SIZE
) -> float:
    """Zoom at which `fraction` of the world spans exactly `pixels`."""

    return math.log2(pixels / tile_size / fraction)


def meters_per_pixel(
    latitude_deg: float, zoom: float, tile_size: float = TILE_SIZE
) -> float:
    """Ground resolution at a latitude and zoom."""

    return (
        math.cos(math.radians(latitude_deg))
        * 2.0
        * math.pi
        * EARTH_RADIUS_M
        / (tile_size * 2.0**zoom)
    )
