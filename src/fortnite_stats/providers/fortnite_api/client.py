from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fortnite_stats.providers.base.client import BaseHttpClient
from fortnite_stats.providers.base.types import Json, PayloadShape, PlayerQuery, TimeWindow

logger = logging.getLogger(__name__)

STATS_PATH = "/stats/br/v2"


def needs_lifetime_fallback(payload: Json) -> bool:
    """Season window is empty when the `all` bucket is missing or has no matches and no kills."""

    data = payload.get("data")
    stats = data.get("stats") if isinstance(data, dict) else None
    overall = stats.get("all") if isinstance(stats, dict) else None
    if not isinstance(overall, dict):
        return True
    return overall.get("matches") == 0 and overall.get("kills") == 0


@dataclass
class FortniteApiClient:
    """
    fortnite-api.com BR stats (v2).

    Endpoint: GET /v2/stats/br/v2?name=...&accountType=...  (display name)
              GET /v2/stats/br/v2/{accountId}                (account id)
    """

    http: BaseHttpClient
    image: str = "all"
    shape: PayloadShape = PayloadShape.A

    def _path(self, query: PlayerQuery) -> str:
        if query.is_account_id:
            return f"{STATS_PATH}/{query.identifier}"
        return STATS_PATH

    def _params(self, query: PlayerQuery) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if not query.is_account_id:
            params["name"] = query.identifier
            params["accountType"] = query.account_type.value
        params["timeWindow"] = query.time_window.value
        params["image"] = self.image
        return params

    def get_stats(self, query: PlayerQuery) -> Json:
        return self.http.get_json(self._path(query), params=self._params(query))

    def fetch(self, query: PlayerQuery) -> Json:
        payload = self.get_stats(query)

        if query.time_window is TimeWindow.LIFETIME or not needs_lifetime_fallback(payload):
            return payload

        logger.info("No season stats found, trying lifetime stats...")
        return self.get_stats(query.with_time_window(TimeWindow.LIFETIME))
