from __future__ import annotations

from dataclasses import dataclass

from src.domain.exceptions import InvalidPaddingError, InvalidViewportError


@dataclass(frozen=True, slots=True)
class ViewportSize:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidViewportError(
                f"Viewport size must be non-negative, got {self.width}x{self.height}"
            )


@dataclass(frozen=True, slots=True)
class Padding:
    """Pixel insets subtracted from the viewport before fitting."""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    def __post_init__(self) -> None:
        if min(self.top, self.left, self.bottom, self.right) < 0:
            raise InvalidPaddingError(f"Padding insets must be non-negative: {self}")

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def apply(self, viewport: ViewportSize) -> ViewportSize:
        width = viewport.width - self.horizontal
        height = viewport.height - self.vertical
        if width <= 0 or height <= 0:
            raise InvalidPaddingError(
                f"Padding {self} leaves no usable area in a "
                f"{viewport.width}x{viewport.height} viewport"
            )
        return ViewportSize(width=width, height=height)
