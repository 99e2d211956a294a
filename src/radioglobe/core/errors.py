from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


class EmptyPopulationError(ValueError):
    pass


@dataclass(frozen=True)
class EndpointAttempt:
    endpoint: str
    accepted: bool
    reason: str | None = None
    record_count: int = 0


def mark_accepted(endpoint: str, record_count: int) -> EndpointAttempt:
    return EndpointAttempt(endpoint=endpoint, accepted=True, record_count=record_count)


def mark_failed(endpoint: str, reason: str) -> EndpointAttempt:
    return EndpointAttempt(endpoint=endpoint, accepted=False, reason=reason)


class AllEndpointsFailedError(RuntimeError):
    def __init__(
        self,
        attempts: Sequence[EndpointAttempt],
        last_error: BaseException | None = None,
    ) -> None:
        self.attempts = list(attempts)
        self.last_error = last_error
        if last_error is None:
            message = "All station endpoints failed"
        else:
            message = f"All station endpoints failed: {last_error}"
        super().__init__(message)
