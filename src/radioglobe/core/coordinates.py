"""Latitude/longitude validation with country-centroid and random fallbacks.

Upstream feeds frequently carry blank, textual or out-of-range coordinates.
``resolve_coordinates`` never fails: a valid pair is returned unchanged, an
invalid one is replaced by the country's centroid, and a station from an
unknown country lands on a random point.  The random point is drawn linearly
in latitude and longitude, so it is not uniform over the sphere surface.
"""
from __future__ import annotations

import random

from ..ingest.validators import is_valid_coordinate, parse_coordinate
from .centroids import COUNTRY_CENTROIDS


def resolve_coordinates(
    raw_lat: object,
    raw_lng: object,
    country_code: object,
    rng: random.Random | None = None,
) -> tuple[float, float]:
    lat = parse_coordinate(raw_lat)
    lng = parse_coordinate(raw_lng)
    if is_valid_coordinate(lat, lng):
        return lat, lng

    centroid = country_centroid(country_code)
    if centroid is not None:
        return centroid
    return random_coordinates(rng)


def country_centroid(country_code: object) -> tuple[float, float] | None:
    if not isinstance(country_code, str):
        return None
    return COUNTRY_CENTROIDS.get(country_code.strip().upper())


def random_coordinates(rng: random.Random | None = None) -> tuple[float, float]:
    source = rng or random
    lat = (source.random() - 0.5) * 180
    lng = (source.random() - 0.5) * 360
    return lat, lng
