from __future__ import annotations

import random
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ..ingest.validators import text_or_none
from .coordinates import resolve_coordinates

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Station:
    id: str
    name: str
    stream_url: str
    latitude: float
    longitude: float
    icon_url: str = ""
    country_name: str = UNKNOWN
    country_code: str = ""
    region_or_city: str = UNKNOWN
    language: Any = None
    bitrate_kbps: Any = None
    codec: Any = None
    vote_count: Any = None


@dataclass(frozen=True)
class NormalizationResult:
    stations: list[Station]
    rejected: int


def normalize_station(
    record: Mapping[str, Any],
    rng: random.Random | None = None,
) -> Station | None:
    name = text_or_none(record.get("name"))
    stream_url = text_or_none(record.get("url_resolved")) or text_or_none(
        record.get("url")
    )
    if name is None or stream_url is None:
        return None

    country_code = text_or_none(record.get("countrycode")) or ""
    latitude, longitude = resolve_coordinates(
        record.get("geo_lat"), record.get("geo_long"), country_code, rng
    )
    country_name = text_or_none(record.get("country")) or UNKNOWN
    region_or_city = text_or_none(record.get("state")) or country_name

    return Station(
        id=text_or_none(record.get("stationuuid")) or _synthesized_id(name, rng),
        name=name,
        stream_url=stream_url,
        latitude=latitude,
        longitude=longitude,
        icon_url=text_or_none(record.get("favicon")) or "",
        country_name=country_name,
        country_code=country_code,
        region_or_city=region_or_city,
        language=record.get("language"),
        bitrate_kbps=record.get("bitrate"),
        codec=record.get("codec"),
        vote_count=record.get("votes"),
    )


def normalize_records(
    records: Iterable[Mapping[str, Any]],
    rng: random.Random | None = None,
) -> NormalizationResult:
    stations: list[Station] = []
    rejected = 0
    for record in records:
        station = normalize_station(record, rng) if isinstance(record, Mapping) else None
        if station is None:
            rejected += 1
            continue
        stations.append(station)
    return NormalizationResult(stations=stations, rejected=rejected)


def find_station(stations: Iterable[Station], station_id: str) -> Station | None:
    for station in stations:
        if station.id == station_id:
            return station
    return None


# Session-scoped only: neither unique nor stable across runs.
def _synthesized_id(name: str, rng: random.Random | None) -> str:
    source = rng or random
    return f"{name}-{source.random()}"
