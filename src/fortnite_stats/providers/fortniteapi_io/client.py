from __future__ import annotations

from dataclasses import dataclass

from fortnite_stats.providers.base.client import BaseHttpClient
from fortnite_stats.providers.base.errors import UpstreamDataError
from fortnite_stats.providers.base.types import Json, PayloadShape, PlayerQuery


@dataclass
class FortniteApiIoClient:
    """
    fortniteapi.io player stats.

    Endpoint: GET /v1/stats?account=...
    Only raw per-mode counters are returned and there is no time window, so a
    lookup is always a single request.
    """

    http: BaseHttpClient
    shape: PayloadShape = PayloadShape.B

    def fetch(self, query: PlayerQuery) -> Json:
        payload = self.http.get_json("/stats", params={"account": query.identifier})

        if payload.get("result") is False:
            error = payload.get("error")
            raise UpstreamDataError(
                f"No stats found for player {query.identifier}"
                + (f" ({error})" if isinstance(error, str) and error else "")
            )

        return payload
