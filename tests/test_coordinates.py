from __future__ import annotations

import random

import pytest

from radioglobe.core.centroids import COUNTRY_CENTROIDS
from radioglobe.core.coordinates import resolve_coordinates


@pytest.mark.parametrize(
    ("lat", "lng"),
    [(0.0, 0.0), (90.0, 180.0), (-90.0, -180.0), (46.5, 6.6), ("48.85", "2.35")],
)
def test_resolve_coordinates_keeps_valid_pair(lat: object, lng: object) -> None:
    assert resolve_coordinates(lat, lng, "FR") == (float(lat), float(lng))


@pytest.mark.parametrize(
    ("lat", "lng"),
    [("999", "10"), (None, None), ("", "2.3"), ("abc", "2.3"), (10.0, -180.5), (True, 5)],
)
def test_resolve_coordinates_uses_country_centroid(lat: object, lng: object) -> None:
    assert resolve_coordinates(lat, lng, "FR") == (46.6034, 1.8883)


def test_resolve_coordinates_centroid_is_deterministic() -> None:
    first = resolve_coordinates("nan", "nan", "JP", random.Random(1))
    second = resolve_coordinates("nan", "nan", "JP", random.Random(2))

    assert first == second == COUNTRY_CENTROIDS["JP"]


def test_resolve_coordinates_matches_lowercase_code() -> None:
    assert resolve_coordinates(None, None, " de ") == COUNTRY_CENTROIDS["DE"]


def test_resolve_coordinates_random_fallback_stays_in_range() -> None:
    rng = random.Random(7)
    for _ in range(1000):
        lat, lng = resolve_coordinates("x", "y", "ZZ", rng)

        assert -90 <= lat < 90
        assert -180 <= lng < 180


def test_resolve_coordinates_random_fallback_without_code() -> None:
    lat, lng = resolve_coordinates(None, None, None, random.Random(3))

    assert -90 <= lat < 90
    assert -180 <= lng < 180
