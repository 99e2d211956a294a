from __future__ import annotations

from collections.abc import Iterable

from .station import Station


def matches_term(station: Station, term: str) -> bool:
    needle = term.strip().lower()
    if not needle:
        return True
    fields = (station.name, station.country_name, station.region_or_city)
    return any(needle in field.lower() for field in fields if field)


def search_stations(stations: Iterable[Station], term: str) -> list[Station]:
    return [station for station in stations if matches_term(station, term)]
