from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from ...services.population_service import PopulationStore
from ..dependencies import get_store
from ..schemas.metrics import EndpointAttemptOut, FeedHealthOut


router = APIRouter()


@router.get("/metrics")
async def get_metrics(store: PopulationStore = Depends(get_store)) -> FeedHealthOut:
    snapshot = await store.snapshot()
    health = snapshot.health()
    return FeedHealthOut(
        source=health.source,
        is_degraded=health.is_degraded,
        accepted_endpoint=health.accepted_endpoint,
        failed_endpoints=health.failed_endpoints,
        kept_records=health.kept_records,
        rejected_records=health.rejected_records,
        population_size=health.population_size,
        attempts=[EndpointAttemptOut(**asdict(attempt)) for attempt in snapshot.attempts],
    )
