from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from ...core.guessing import score_guess
from ...services.population_service import PopulationStore
from ..dependencies import get_store
from ..schemas.guess import GuessRequest, GuessResponse


router = APIRouter()


@router.post("/guess")
async def submit_guess(
    payload: GuessRequest, store: PopulationStore = Depends(get_store)
) -> GuessResponse:
    station = await store.get(payload.station_id)
    if station is None:
        raise HTTPException(status_code=404, detail="station not found")
    return GuessResponse(**asdict(score_guess(station, payload.guess)))
