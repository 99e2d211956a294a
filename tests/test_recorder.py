from __future__ import annotations

from pathlib import Path

from radioglobe.core.errors import mark_accepted
from radioglobe.ingest.demo import demo_stations
from radioglobe.ingest.pipeline import PopulationSnapshot
from radioglobe.ingest.recorder import read_stations, snapshot_payload, write_snapshot


def test_write_snapshot_round_trips_stations(tmp_path: Path) -> None:
    stations = demo_stations()
    snapshot = PopulationSnapshot(
        stations=stations,
        source="upstream",
        kept_records=len(stations),
        attempts=[mark_accepted("https://mirror.example", len(stations))],
    )

    path = write_snapshot(tmp_path / "out" / "population.json", snapshot)

    assert read_stations(path) == stations


def test_snapshot_payload_includes_attempts() -> None:
    snapshot = PopulationSnapshot(
        stations=[], source="demo", attempts=[mark_accepted("https://m", 0)]
    )

    payload = snapshot_payload(snapshot)

    assert payload["source"] == "demo"
    assert payload["attempts"][0]["endpoint"] == "https://m"
