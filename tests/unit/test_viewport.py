from __future__ import annotations

import pytest

from src.domain.exceptions import InvalidPaddingError, InvalidViewportError
from src.domain.models import Padding, ViewportSize


def test_padding_is_subtracted_from_viewport() -> None:
    usable = Padding(top=50, left=10, bottom=100, right=10).apply(
        ViewportSize(width=400, height=800)
    )
    assert usable == ViewportSize(width=380, height=650)


@pytest.mark.parametrize(
    "padding",
    [
        Padding(left=200, right=200),
        Padding(top=500, bottom=400),
    ],
)
def test_padding_consuming_a_dimension_is_rejected(padding: Padding) -> None:
    with pytest.raises(InvalidPaddingError):
        padding.apply(ViewportSize(width=400, height=800))


def test_negative_padding_is_rejected() -> None:
    with pytest.raises(InvalidPaddingError):
        Padding(top=-1)


def test_negative_viewport_is_rejected() -> None:
    with pytest.raises(InvalidViewportError):
        ViewportSize(width=-1, height=100)
