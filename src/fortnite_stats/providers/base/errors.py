from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class StatsError(RuntimeError):
    """Base exception for every failure that ends a stats lookup."""

    def __init__(self, message: str, *, hints: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.hints = tuple(hints)


class ConfigurationError(StatsError):
    """Required configuration (e.g. the API credential) is missing."""


class InvalidInputError(StatsError):
    """CLI input failed validation (missing identifier, unknown account type, ...)."""


class UpstreamError(StatsError):
    """Base for failures talking to the stats provider."""


class TransportError(UpstreamError):
    """Network layer failures (timeouts, DNS, connection resets)."""


class UpstreamDataError(UpstreamError):
    """Provider answered 2xx but the player data we need is not there."""


class UpstreamHttpError(UpstreamError):
    """Provider answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str, *, body: Any = None) -> None:
        super().__init__(f"{status_code} - {message}")
        self.status_code = status_code
        self.reason = message
        self.body = body
