from __future__ import annotations

from fortnite_stats.providers.base.adapter import StatsFetcher
from fortnite_stats.providers.base.errors import UpstreamDataError
from fortnite_stats.providers.base.types import PlayerQuery, PlayerStats
from fortnite_stats.stats.normalize import normalize


def lookup_player(fetcher: StatsFetcher, query: PlayerQuery) -> PlayerStats:
    """Fetch (with the source's own fallback rules) and normalize one player's stats."""

    payload = fetcher.fetch(query)
    try:
        return normalize(payload, shape=fetcher.shape)
    except UpstreamDataError as e:
        raise UpstreamDataError(f"No stats found for player {query.identifier}") from e
