from __future__ import annotations

from typing import Any


def station_records(payload: Any) -> list[dict[str, Any]]:
    if not isinstance(payload, list):
        raise ValueError("station payload is not a JSON array")
    if not payload:
        raise ValueError("station payload is empty")
    return payload


def truncate_records(records: list[dict[str, Any]], limit: int) -> list[dict[str, Any]]:
    if limit < 0:
        raise ValueError("record limit must be non-negative")
    return records[:limit]
