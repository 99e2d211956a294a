from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

import httpx

from ..core.errors import AllEndpointsFailedError, EndpointAttempt
from ..core.sampler import build_population
from ..core.station import Station, normalize_records
from .config import Settings
from .demo import demo_stations
from .monitoring import FeedHealth, compute_health
from .radio_browser_client import fetch_stations

log = logging.getLogger(__name__)

SOURCE_UPSTREAM = "upstream"
SOURCE_DEMO = "demo"


@dataclass(frozen=True)
class PopulationSnapshot:
    stations: list[Station]
    source: str
    kept_records: int = 0
    rejected_records: int = 0
    attempts: list[EndpointAttempt] = field(default_factory=list)

    def health(self) -> FeedHealth:
        return compute_health(
            self.source,
            self.attempts,
            kept_records=self.kept_records,
            rejected_records=self.rejected_records,
            population_size=len(self.stations),
        )


async def load_population(
    settings: Settings,
    client: httpx.AsyncClient | None = None,
    rng: random.Random | None = None,
) -> PopulationSnapshot:
    try:
        result = await fetch_stations(
            settings.endpoints,
            settings.timeout_seconds,
            max_records=settings.max_records,
            client=client,
            user_agent=settings.user_agent,
        )
    except AllEndpointsFailedError as exc:
        log.error("Falling back to demo stations: %s", exc)
        stations = demo_stations(rng)
        return PopulationSnapshot(
            stations=build_population(
                stations,
                settings.rarity_class,
                settings.rarity_fraction,
                rng=rng,
            ),
            source=SOURCE_DEMO,
            kept_records=len(stations),
            attempts=exc.attempts,
        )

    normalized = normalize_records(result.records, rng)
    if normalized.rejected:
        log.info("Dropped %d records missing a name or stream url", normalized.rejected)
    population = build_population(
        normalized.stations,
        settings.rarity_class,
        settings.rarity_fraction,
        rng=rng,
    )
    log.info(
        "Built population of %d stations from %d normalized records",
        len(population),
        len(normalized.stations),
    )
    return PopulationSnapshot(
        stations=population,
        source=SOURCE_UPSTREAM,
        kept_records=len(normalized.stations),
        rejected_records=normalized.rejected,
        attempts=result.attempts,
    )
