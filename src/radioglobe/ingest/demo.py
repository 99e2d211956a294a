from __future__ import annotations

import random
from typing import Any

from ..core.station import Station, normalize_records

DEMO_RECORDS: list[dict[str, Any]] = [
    {
        "stationuuid": "demo-bbc-radio-1",
        "name": "BBC Radio 1",
        "url": "http://stream.live.vc.bbcmedia.co.uk/bbc_radio_one",
        "country": "The United Kingdom Of Great Britain And Northern Ireland",
        "countrycode": "GB",
        "state": "London",
        "geo_lat": 51.5072,
        "geo_long": -0.1276,
        "language": "english",
        "codec": "MP3",
        "bitrate": 128,
    },
    {
        "stationuuid": "demo-fip",
        "name": "FIP",
        "url": "https://icecast.radiofrance.fr/fip-midfi.mp3",
        "country": "France",
        "countrycode": "FR",
        "state": "Paris",
        "geo_lat": 48.8566,
        "geo_long": 2.3522,
        "language": "french",
        "codec": "MP3",
        "bitrate": 128,
    },
    {
        "stationuuid": "demo-kexp",
        "name": "KEXP 90.3 FM",
        "url": "https://kexp-mp3-128.streamguys1.com/kexp128.mp3",
        "country": "The United States Of America",
        "countrycode": "US",
        "state": "Washington",
        "geo_lat": 47.6062,
        "geo_long": -122.3321,
        "language": "english",
        "codec": "MP3",
        "bitrate": 128,
    },
    {
        "stationuuid": "demo-radio-swiss-jazz",
        "name": "Radio Swiss Jazz",
        "url": "https://stream.srg-ssr.ch/m/rsj/mp3_128",
        "country": "Switzerland",
        "countrycode": "CH",
        "state": "Bern",
        "language": "german",
        "codec": "MP3",
        "bitrate": 128,
    },
    {
        "stationuuid": "demo-abc-jazz",
        "name": "ABC Jazz",
        "url": "https://live-radio01.mediahubaustralia.com/JAZW/mp3/",
        "country": "Australia",
        "countrycode": "AU",
        "state": "New South Wales",
        "geo_lat": -33.8688,
        "geo_long": 151.2093,
        "language": "english",
        "codec": "MP3",
        "bitrate": 96,
    },
]


def demo_stations(rng: random.Random | None = None) -> list[Station]:
    return normalize_records(DEMO_RECORDS, rng).stations
