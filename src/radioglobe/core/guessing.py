from __future__ import annotations

from dataclasses import dataclass

from .station import Station


@dataclass(frozen=True)
class GuessOutcome:
    station_id: str
    station_name: str
    country_name: str
    guess: str
    is_correct: bool


def is_correct_guess(guess: str, country_name: str) -> bool:
    guessed = guess.strip().lower()
    actual = country_name.strip().lower()
    if not guessed or not actual:
        return False
    return guessed in actual or actual in guessed


def score_guess(station: Station, guess: str) -> GuessOutcome:
    return GuessOutcome(
        station_id=station.id,
        station_name=station.name,
        country_name=station.country_name,
        guess=guess,
        is_correct=is_correct_guess(guess, station.country_name),
    )
