"""Rarity clamp over an over-represented country.

The upstream feed is heavily skewed toward a single country.  The clamp keeps
at most ``max(1, floor(len(common) * rarity_fraction))`` stations of the rare
class, chosen as a uniformly random subset (shuffle then slice), and
optionally shuffles the combined population for display variety.
"""
from __future__ import annotations

import math
import random
from collections.abc import Sequence

from .station import Station

DEFAULT_RARITY_FRACTION = 0.1


def partition(
    stations: Sequence[Station], rarity_class: str
) -> tuple[list[Station], list[Station]]:
    rare = [station for station in stations if station.country_name == rarity_class]
    common = [station for station in stations if station.country_name != rarity_class]
    return rare, common


def rarity_cap(common_count: int, rarity_fraction: float = DEFAULT_RARITY_FRACTION) -> int:
    return max(1, math.floor(common_count * rarity_fraction))


def build_population(
    stations: Sequence[Station],
    rarity_class: str,
    rarity_fraction: float = DEFAULT_RARITY_FRACTION,
    shuffle: bool = True,
    rng: random.Random | None = None,
) -> list[Station]:
    if rarity_fraction < 0:
        raise ValueError("rarity_fraction must be non-negative")
    source = rng or random
    rare, common = partition(stations, rarity_class)

    # Fisher-Yates via Random.shuffle, then keep the first max_rare.
    source.shuffle(rare)
    kept_rare = rare[: rarity_cap(len(common), rarity_fraction)]

    population = common + kept_rare
    if shuffle:
        source.shuffle(population)
    return population
