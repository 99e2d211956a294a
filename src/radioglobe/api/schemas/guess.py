from __future__ import annotations

from pydantic import BaseModel


class GuessRequest(BaseModel):
    station_id: str
    guess: str


class GuessResponse(BaseModel):
    station_id: str
    station_name: str
    country_name: str
    guess: str
    is_correct: bool
