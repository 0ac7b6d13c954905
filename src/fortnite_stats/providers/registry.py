from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from fortnite_stats.core.config import Settings
from fortnite_stats.providers.base.adapter import StatsFetcher
from fortnite_stats.providers.base.client import BaseHttpClient
from fortnite_stats.providers.base.errors import InvalidInputError
from fortnite_stats.providers.fortnite_api.client import FortniteApiClient
from fortnite_stats.providers.fortniteapi_io.client import FortniteApiIoClient

FetcherFactory = Callable[[BaseHttpClient, Settings], StatsFetcher]


@dataclass(frozen=True)
class StatsSource:
    key: str
    base_url: Callable[[Settings], str]
    factory: FetcherFactory


class SourceRegistry:
    def __init__(self) -> None:
        self._sources: dict[str, StatsSource] = {}

    def register(self, source: StatsSource) -> None:
        if source.key in self._sources:
            raise ValueError(f"Duplicate source registration: {source.key}")
        self._sources[source.key] = source

    def keys(self) -> list[str]:
        return list(self._sources)

    def get(self, key: str) -> StatsSource:
        source = self._sources.get(key)
        if source is None:
            raise InvalidInputError(
                f"Unknown stats source '{key}'",
                hints=[f"Supported sources: {', '.join(self.keys())}"],
            )
        return source


registry = SourceRegistry()
registry.register(
    StatsSource(
        key="fortnite-api",
        base_url=lambda s: s.fortnite_api_base_url,
        factory=lambda http, s: FortniteApiClient(http=http, image=s.fortnite_stats_image),
    )
)
registry.register(
    StatsSource(
        key="fortniteapi-io",
        base_url=lambda s: s.fortniteapi_io_base_url,
        factory=lambda http, s: FortniteApiIoClient(http=http),
    )
)
