class CameraFitError(Exception):
    """Base exception for camera fitting failures."""


class InvalidInputError(CameraFitError, ValueError):
    """Raised when a fit request cannot produce a finite camera pose."""


class InvalidBoundsError(InvalidInputError):
    """Raised when bounds are inverted or have zero width/height."""


class InvalidViewportError(InvalidInputError):
    """Raised when a viewport dimension is negative."""


class InvalidPaddingError(InvalidInputError):
    """Raised when padding is negative or consumes a whole viewport dimension."""


class InvalidTiltError(InvalidInputError):
    """Raised when the tilt angle is outside the supported range."""
