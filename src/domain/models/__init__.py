from .camera import CameraPose
from .geo import GeoBounds, GeoPoint
from .viewport import Padding, ViewportSize

__all__ = [
    "CameraPose",
    "GeoBounds",
    "GeoPoint",
    "Padding",
    "ViewportSize",
]
