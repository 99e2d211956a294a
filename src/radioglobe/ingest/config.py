from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_HOSTS = (
    "https://de1.api.radio-browser.info",
    "https://all.api.radio-browser.info",
    "https://fr1.api.radio-browser.info",
)


def _get_env(name: str, default: str | None = None) -> str:
    value = os.getenv(name, default)
    if value is None:
        raise ValueError(f"Missing required environment variable: {name}")
    return value


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def radio_browser_hosts() -> list[str]:
    return _split_list(_get_env("RADIO_BROWSER_HOSTS", ",".join(DEFAULT_HOSTS)))


def radio_browser_limit() -> int:
    return int(_get_env("RADIO_BROWSER_LIMIT", "1000"))


def station_list_url(host: str, limit: int) -> str:
    return f"{host.rstrip('/')}/json/stations?limit={limit}"


def station_endpoints() -> list[str]:
    limit = radio_browser_limit()
    return [station_list_url(host, limit) for host in radio_browser_hosts()]


def fetch_timeout_seconds() -> float:
    return float(_get_env("RADIO_FETCH_TIMEOUT_SECONDS", "15"))


def max_records() -> int:
    return int(_get_env("RADIO_MAX_RECORDS", "300"))


def rarity_class() -> str:
    return _get_env("RADIO_RARITY_CLASS", "Mexico")


def rarity_fraction() -> float:
    return float(_get_env("RADIO_RARITY_FRACTION", "0.1"))


def rare_weight() -> int:
    return int(_get_env("RADIO_RARE_WEIGHT", "1"))


def common_weight() -> int:
    return int(_get_env("RADIO_COMMON_WEIGHT", "5"))


def user_agent() -> str:
    return _get_env("RADIO_USER_AGENT", "RadioGlobe/1.0")


def cors_origins() -> list[str]:
    return _split_list(
        _get_env("RADIO_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    )


@dataclass(frozen=True)
class Settings:
    endpoints: list[str]
    timeout_seconds: float
    max_records: int
    rarity_class: str
    rarity_fraction: float
    rare_weight: int
    common_weight: int
    user_agent: str


def load_settings() -> Settings:
    return Settings(
        endpoints=station_endpoints(),
        timeout_seconds=fetch_timeout_seconds(),
        max_records=max_records(),
        rarity_class=rarity_class(),
        rarity_fraction=rarity_fraction(),
        rare_weight=rare_weight(),
        common_weight=common_weight(),
        user_agent=user_agent(),
    )
