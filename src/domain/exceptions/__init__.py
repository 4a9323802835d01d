from .camera import (
    CameraFitError,
    InvalidBoundsError,
    InvalidInputError,
    InvalidPaddingError,
    InvalidTiltError,
    InvalidViewportError,
)

__all__ = [
    "CameraFitError",
    "InvalidInputError",
    "InvalidBoundsError",
    "InvalidViewportError",
    "InvalidPaddingError",
    "InvalidTiltError",
]
