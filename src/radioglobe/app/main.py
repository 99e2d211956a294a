from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..api.routes import guess, metrics, stations
from ..ingest.config import Settings, cors_origins, load_settings
from ..ingest.pipeline import load_population
from ..services.population_service import PopulationLoader, PopulationStore


def create_app(
    settings: Settings | None = None,
    loader: PopulationLoader = load_population,
) -> FastAPI:
    app = FastAPI(title="Radio Globe API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.population_store = PopulationStore(settings or load_settings(), loader)
    app.include_router(stations.router)
    app.include_router(guess.router)
    app.include_router(metrics.router)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"status": "ok", "service": "radio-globe"}

    return app


app = create_app()
