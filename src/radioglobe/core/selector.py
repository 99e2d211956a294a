from __future__ import annotations

import random
from collections.abc import Sequence

from .errors import EmptyPopulationError
from .station import Station

DEFAULT_RARE_WEIGHT = 1
DEFAULT_COMMON_WEIGHT = 5


def station_weight(
    station: Station, rarity_class: str, rare_weight: int, common_weight: int
) -> int:
    if station.country_name == rarity_class:
        return rare_weight
    return common_weight


def pick_weighted(
    population: Sequence[Station],
    rarity_class: str,
    rare_weight: int = DEFAULT_RARE_WEIGHT,
    common_weight: int = DEFAULT_COMMON_WEIGHT,
    rng: random.Random | None = None,
) -> Station:
    """Draw one station from the virtual multiset where every station
    appears ``rare_weight`` or ``common_weight`` times.

    The multiset is never materialised: a single index is drawn over the
    total weight and located by walking the cumulative weights.
    """
    if not population:
        raise EmptyPopulationError("cannot pick a station from an empty population")
    if rare_weight < 0 or common_weight < 0:
        raise ValueError("weights must be non-negative")

    weights = [
        station_weight(station, rarity_class, rare_weight, common_weight)
        for station in population
    ]
    total = sum(weights)
    if total == 0:
        raise EmptyPopulationError("every station in the population has zero weight")

    source = rng or random
    index = source.randrange(total)
    for station, weight in zip(population, weights):
        if index < weight:
            return station
        index -= weight
    raise AssertionError("weighted index out of range")
