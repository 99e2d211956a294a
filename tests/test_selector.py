from __future__ import annotations

import random

import pytest

from radioglobe.core.errors import EmptyPopulationError
from radioglobe.core.selector import pick_weighted
from radioglobe.core.station import Station


def _station(station_id: str, country: str) -> Station:
    return Station(
        id=station_id,
        name=station_id,
        stream_url=f"http://{station_id}",
        latitude=0.0,
        longitude=0.0,
        country_name=country,
    )


def test_pick_weighted_favors_common_class() -> None:
    common = _station("common", "Brazil")
    rare = _station("rare", "Mexico")
    rng = random.Random(20240601)
    draws = 10_000

    hits = sum(
        pick_weighted([common, rare], "Mexico", rng=rng) is common for _ in range(draws)
    )

    assert abs(hits / draws - 5 / 6) <= 0.03


def test_pick_weighted_respects_custom_weights() -> None:
    common = _station("common", "Brazil")
    rare = _station("rare", "Mexico")

    picks = {
        pick_weighted([common, rare], "Mexico", rare_weight=1, common_weight=0).id
        for _ in range(50)
    }

    assert picks == {"rare"}


def test_pick_weighted_single_station() -> None:
    only = _station("only", "Mexico")

    assert pick_weighted([only], "Mexico") is only


def test_pick_weighted_empty_population_raises() -> None:
    with pytest.raises(EmptyPopulationError):
        pick_weighted([], "Mexico")


def test_pick_weighted_all_zero_weights_raises() -> None:
    with pytest.raises(EmptyPopulationError):
        pick_weighted([_station("a", "Mexico")], "Mexico", rare_weight=0)


def test_pick_weighted_rejects_negative_weight() -> None:
    with pytest.raises(ValueError):
        pick_weighted([_station("a", "Peru")], "Mexico", common_weight=-1)
