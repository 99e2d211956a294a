from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ...core.errors import EmptyPopulationError
from ...core.search import search_stations
from ...core.station import Station
from ...services.population_service import PopulationStore
from ..dependencies import get_store
from ..schemas.stations import PopulationOut, StationOut


router = APIRouter()


@router.get("/stations")
async def list_stations(store: PopulationStore = Depends(get_store)) -> PopulationOut:
    snapshot = await store.snapshot()
    return _population(snapshot.source, snapshot.stations)


@router.post("/stations/refresh")
async def refresh_stations(
    store: PopulationStore = Depends(get_store),
) -> PopulationOut:
    snapshot = await store.refresh()
    return _population(snapshot.source, snapshot.stations)


@router.get("/stations/search")
async def find_stations(
    q: str = "", store: PopulationStore = Depends(get_store)
) -> PopulationOut:
    snapshot = await store.snapshot()
    return _population(snapshot.source, search_stations(snapshot.stations, q))


@router.get("/stations/random")
async def random_station(store: PopulationStore = Depends(get_store)) -> StationOut:
    try:
        station = await store.random_station()
    except EmptyPopulationError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return StationOut.from_station(station)


@router.get("/stations/{station_id}")
async def get_station(
    station_id: str, store: PopulationStore = Depends(get_store)
) -> StationOut:
    station = await store.get(station_id)
    if station is None:
        raise HTTPException(status_code=404, detail="station not found")
    return StationOut.from_station(station)


def _population(source: str, stations: list[Station]) -> PopulationOut:
    return PopulationOut(
        source=source,
        count=len(stations),
        stations=[StationOut.from_station(station) for station in stations],
    )
