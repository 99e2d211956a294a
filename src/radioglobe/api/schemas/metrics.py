from __future__ import annotations

from pydantic import BaseModel


class EndpointAttemptOut(BaseModel):
    endpoint: str
    accepted: bool
    reason: str | None = None
    record_count: int = 0


class FeedHealthOut(BaseModel):
    source: str
    is_degraded: bool
    accepted_endpoint: str | None = None
    failed_endpoints: list[str]
    kept_records: int
    rejected_records: int
    population_size: int
    attempts: list[EndpointAttemptOut]
