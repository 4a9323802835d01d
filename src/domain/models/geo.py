from __future__ import annotations

from dataclasses import dataclass

from src.domain.exceptions import InvalidBoundsError


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")


@dataclass(frozen=True, slots=True)
class GeoBounds:
    """Axis-aligned geographic rectangle.

    Defined by its south-west and north-east corners. The north-east longitude
    may be numerically smaller than the south-west one, meaning the bounds
    cross the antimeridian.
    """

    south_west: GeoPoint
    north_east: GeoPoint

    def __post_init__(self) -> None:
        if self.south_west.lat > self.north_east.lat:
            raise InvalidBoundsError(
                f"South-west latitude {self.south_west.lat} is north of "
                f"north-east latitude {self.north_east.lat}"
            )

    @classmethod
    def from_coordinates(cls, a: GeoPoint, b: GeoPoint) -> GeoBounds:
        """Smallest bounds containing both coordinates.

        Longitudes take the shorter east-going arc between the two points,
        which may cross the antimeridian.
        """

        south = min(a.lat, b.lat)
        north = max(a.lat, b.lat)

        span_ab = (b.lon - a.lon) % 360.0
        span_ba = (a.lon - b.lon) % 360.0
        if span_ab < span_ba:
            west, east = a.lon, b.lon
        elif span_ba < span_ab:
            west, east = b.lon, a.lon
        else:
            west, east = min(a.lon, b.lon), max(a.lon, b.lon)

        return cls(
            south_west=GeoPoint(lat=south, lon=west),
            north_east=GeoPoint(lat=north, lon=east),
        )

    @property
    def north_west(self) -> GeoPoint:
        return GeoPoint(lat=self.north_east.lat, lon=self.south_west.lon)

    @property
    def south_east(self) -> GeoPoint:
        return GeoPoint(lat=self.south_west.lat, lon=self.north_east.lon)

    @property
    def corners(self) -> tuple[GeoPoint, GeoPoint, GeoPoint, GeoPoint]:
        """Outline in drawing order: NW, NE, SE, SW."""

        return (self.north_west, self.north_east, self.south_east, self.south_west)

    @property
    def latitude_span(self) -> float:
        return self.north_east.lat - self.south_west.lat

    @property
    def longitude_span(self) -> float:
        delta = self.north_east.lon - self.south_west.lon
        return delta + 360.0 if delta < 0 else delta

    @property
    def is_degenerate(self) -> bool:
        return self.latitude_span == 0.0 or self.longitude_span == 0.0
