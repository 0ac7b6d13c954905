from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from fortnite_stats.providers.base.errors import UpstreamDataError
from fortnite_stats.providers.base.types import PayloadShape, PlayerQuery
from fortnite_stats.stats.lookup import lookup_player


@dataclass
class StaticFetcher:
    payload: dict[str, Any]
    shape: PayloadShape

    def fetch(self, query: PlayerQuery) -> dict[str, Any]:
        return self.payload


@pytest.mark.parametrize(
    ("payload", "shape"),
    [
        ({"status": 200, "data": None}, PayloadShape.A),
        ({"result": True, "global_stats": {}}, PayloadShape.B),
    ],
)
def test_missing_player_data_is_reported_as_player_not_found(
    payload: dict[str, Any], shape: PayloadShape
) -> None:
    with pytest.raises(UpstreamDataError, match="^No stats found for player ghost$") as excinfo:
        lookup_player(StaticFetcher(payload, shape), PlayerQuery(identifier="ghost"))

    assert isinstance(excinfo.value.__cause__, UpstreamDataError)


def test_lookup_normalizes_with_the_fetcher_shape() -> None:
    fetcher = StaticFetcher(
        {"account": {"level": 3}, "global_stats": {"solo": {"placetop1": 1, "matchesplayed": 2}}},
        PayloadShape.B,
    )

    stats = lookup_player(fetcher, PlayerQuery(identifier="Ninja"))

    assert stats.shape is PayloadShape.B
    assert stats.per_mode["solo"].wins == 1
