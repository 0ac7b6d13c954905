from __future__ import annotations

from typing import Protocol

from .types import Json, PayloadShape, PlayerQuery, PlayerStats


class StatsFetcher(Protocol):
    """
    The CLI depends on this, not on any HTTP client.

    Implementations issue the request(s) for one player and hand back the raw
    provider payload; they never interpret it beyond deciding on a fallback.
    """

    shape: PayloadShape

    def fetch(self, query: PlayerQuery) -> Json:
        ...


class StatsNormalizer(Protocol):
    """Turns one raw provider payload into display-ready `PlayerStats`."""

    shape: PayloadShape

    def normalize(self, payload: Json) -> PlayerStats:
        ...
