from __future__ import annotations

import pytest

from radioglobe.ingest import config


def test_station_endpoints_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RADIO_BROWSER_HOSTS", raising=False)
    monkeypatch.delenv("RADIO_BROWSER_LIMIT", raising=False)

    assert config.station_endpoints() == [
        "https://de1.api.radio-browser.info/json/stations?limit=1000",
        "https://all.api.radio-browser.info/json/stations?limit=1000",
        "https://fr1.api.radio-browser.info/json/stations?limit=1000",
    ]


def test_station_endpoints_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RADIO_BROWSER_HOSTS", "https://a.example/, https://b.example")
    monkeypatch.setenv("RADIO_BROWSER_LIMIT", "50")

    assert config.station_endpoints() == [
        "https://a.example/json/stations?limit=50",
        "https://b.example/json/stations?limit=50",
    ]


def test_load_settings_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RADIO_RARITY_CLASS", "Brazil")
    monkeypatch.setenv("RADIO_RARITY_FRACTION", "0.2")
    monkeypatch.setenv("RADIO_FETCH_TIMEOUT_SECONDS", "3")

    settings = config.load_settings()

    assert settings.rarity_class == "Brazil"
    assert settings.rarity_fraction == 0.2
    assert settings.timeout_seconds == 3.0
    assert settings.max_records == 300
    assert (settings.rare_weight, settings.common_weight) == (1, 5)
