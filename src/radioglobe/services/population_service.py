from __future__ import annotations

import asyncio
import random
from collections.abc import Awaitable, Callable

from ..core.selector import pick_weighted
from ..core.station import Station, find_station
from ..ingest.config import Settings
from ..ingest.pipeline import PopulationSnapshot, load_population

PopulationLoader = Callable[[Settings], Awaitable[PopulationSnapshot]]


class PopulationStore:
    def __init__(
        self,
        settings: Settings,
        loader: PopulationLoader = load_population,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings
        self._loader = loader
        self._rng = rng
        self._snapshot: PopulationSnapshot | None = None
        self._lock = asyncio.Lock()

    async def snapshot(self) -> PopulationSnapshot:
        if self._snapshot is None:
            async with self._lock:
                if self._snapshot is None:
                    self._snapshot = await self._loader(self.settings)
        return self._snapshot

    async def refresh(self) -> PopulationSnapshot:
        async with self._lock:
            self._snapshot = await self._loader(self.settings)
        return self._snapshot

    async def stations(self) -> list[Station]:
        return (await self.snapshot()).stations

    async def get(self, station_id: str) -> Station | None:
        return find_station(await self.stations(), station_id)

    async def random_station(self) -> Station:
        return pick_weighted(
            await self.stations(),
            self.settings.rarity_class,
            rare_weight=self.settings.rare_weight,
            common_weight=self.settings.common_weight,
            rng=self._rng,
        )
