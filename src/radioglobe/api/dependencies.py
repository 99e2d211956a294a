from __future__ import annotations

from fastapi import Request

from ..services.population_service import PopulationStore


def get_store(request: Request) -> PopulationStore:
    return request.app.state.population_store
