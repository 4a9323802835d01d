from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class CameraPose:
    target: GeoPoint
    zoom: float
    bearing: float = 0.0
    tilt: float = 0.0  # degrees from straight down
