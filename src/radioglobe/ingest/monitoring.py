from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..core.errors import EndpointAttempt


@dataclass(frozen=True)
class FeedHealth:
    source: str
    accepted_endpoint: str | None
    failed_endpoints: list[str]
    kept_records: int
    rejected_records: int
    population_size: int

    @property
    def is_degraded(self) -> bool:
        return self.source != "upstream"


def compute_health(
    source: str,
    attempts: Sequence[EndpointAttempt],
    kept_records: int,
    rejected_records: int,
    population_size: int,
) -> FeedHealth:
    accepted = [attempt.endpoint for attempt in attempts if attempt.accepted]
    return FeedHealth(
        source=source,
        accepted_endpoint=accepted[0] if accepted else None,
        failed_endpoints=[
            attempt.endpoint for attempt in attempts if not attempt.accepted
        ],
        kept_records=kept_records,
        rejected_records=rejected_records,
        population_size=population_size,
    )
