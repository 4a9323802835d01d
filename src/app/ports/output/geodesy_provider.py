from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import GeoPoint


class IGeodesyProvider(ABC):
    """Port for ground-distance and great-circle primitives."""

    @abstractmethod
    def distance_m(self, a: GeoPoint, b: GeoPoint) -> float:
        """Return the great-circle ground distance between two points in meters."""

    @abstractmethod
    def interpolate(self, a: GeoPoint, b: GeoPoint, fraction: float) -> GeoPoint:
        """Return the point at `fraction` of the great circle from `a` to `b`."""

    @abstractmethod
    def offset(self, origin: GeoPoint, distance_m: float, heading_deg: float) -> GeoPoint:
        """Return `origin` displaced `distance_m` meters along `heading_deg`."""
