from __future__ import annotations

import math

import pytest

from src.domain.algorithms.mercator import (
    latitude_fraction,
    meters_per_pixel,
    zoom_for_fraction,
)


def test_latitude_fraction_is_zero_at_equator() -> None:
    assert latitude_fraction(0.0) == 0.0


def test_latitude_fraction_is_odd() -> None:
    phi = math.radians(42.0)
    assert latitude_fraction(-phi) == pytest.approx(-latitude_fraction(phi))


@pytest.mark.parametrize("lat", [89.0, 90.0])
def test_latitude_fraction_clamps_beyond_mercator_cutoff(lat: float) -> None:
    assert latitude_fraction(math.radians(lat)) == pytest.approx(math.pi / 2.0)
    assert latitude_fraction(math.radians(-lat)) == pytest.approx(-math.pi / 2.0)


def test_zoom_for_fraction_whole_world_in_one_tile_is_zero() -> None:
    assert zoom_for_fraction(256.0, 1.0) == 0.0
    assert zoom_for_fraction(512.0, 1.0) == pytest.approx(1.0)
    assert zoom_for_fraction(256.0, 0.25) == pytest.approx(2.0)


def test_meters_per_pixel_at_equator_zoom_zero() -> None:
    assert meters_per_pixel(0.0, 0.0) == pytest.approx(156_543.03392, rel=1e-9)


def test_meters_per_pixel_halves_per_zoom_and_with_latitude() -> None:
    base = meters_per_pixel(0.0, 10.0)

    assert meters_per_pixel(0.0, 11.0) == pytest.approx(base / 2.0)
    assert meters_per_pixel(60.0, 10.0) == pytest.approx(base / 2.0)
