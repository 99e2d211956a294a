from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from ..core.station import Station
from .pipeline import PopulationSnapshot


def snapshot_payload(snapshot: PopulationSnapshot) -> dict[str, Any]:
    return {
        "source": snapshot.source,
        "kept_records": snapshot.kept_records,
        "rejected_records": snapshot.rejected_records,
        "attempts": [asdict(attempt) for attempt in snapshot.attempts],
        "stations": [asdict(station) for station in snapshot.stations],
    }


def write_snapshot(path: Path, snapshot: PopulationSnapshot) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(snapshot_payload(snapshot), indent=2))
    return path


def read_stations(path: Path) -> list[Station]:
    payload = json.loads(path.read_text())
    return [Station(**row) for row in payload.get("stations", [])]
