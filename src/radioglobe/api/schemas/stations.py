from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from ...core.projection import to_sphere_xyz
from ...core.station import Station


class StationOut(BaseModel):
    id: str
    name: str
    stream_url: str
    icon_url: str = ""
    country_name: str
    country_code: str = ""
    region_or_city: str
    latitude: float
    longitude: float
    position: tuple[float, float, float]
    language: Any = None
    bitrate_kbps: Any = None
    codec: Any = None
    vote_count: Any = None

    @classmethod
    def from_station(cls, station: Station) -> StationOut:
        return cls(
            id=station.id,
            name=station.name,
            stream_url=station.stream_url,
            icon_url=station.icon_url,
            country_name=station.country_name,
            country_code=station.country_code,
            region_or_city=station.region_or_city,
            latitude=station.latitude,
            longitude=station.longitude,
            position=to_sphere_xyz(station.latitude, station.longitude),
            language=station.language,
            bitrate_kbps=station.bitrate_kbps,
            codec=station.codec,
            vote_count=station.vote_count,
        )


class PopulationOut(BaseModel):
    source: str
    count: int
    stations: list[StationOut]
