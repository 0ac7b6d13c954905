from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fortnite_stats.core.numbers import as_float, as_int, is_number
from fortnite_stats.providers.base.errors import UpstreamDataError
from fortnite_stats.providers.base.types import MODES, Json, ModeStats, PayloadShape, PlayerStats


def mode_stats_from_bucket(bucket: dict[str, Any]) -> ModeStats:
    """Read a fortnite-api.com stats bucket; every missing value reads as 0."""

    return ModeStats(
        wins=as_int(bucket.get("wins")),
        matches=as_int(bucket.get("matches")),
        win_rate=as_float(bucket.get("winRate")),
        kills=as_int(bucket.get("kills")),
        kd_ratio=as_float(bucket.get("kd")),
        minutes_played=as_int(bucket.get("minutesPlayed")),
    )


def has_activity(bucket: dict[str, Any]) -> bool:
    return any(is_number(v) and v > 0 for v in bucket.values())


def _level(obj: Any) -> int | None:
    if not isinstance(obj, dict):
        return None
    level = obj.get("level")
    return as_int(level) if is_number(level) else None


@dataclass(frozen=True)
class FortniteApiNormalizer:
    shape: PayloadShape = PayloadShape.A

    def normalize(self, payload: Json) -> PlayerStats:
        data = payload.get("data")
        if not isinstance(data, dict):
            raise UpstreamDataError("Response has no `data` object")

        stats = data.get("stats")
        if not isinstance(stats, dict):
            stats = {}

        overall_bucket = stats.get("all")
        overall = mode_stats_from_bucket(overall_bucket) if isinstance(overall_bucket, dict) else None

        # Modes the player never touched come back as all-zero buckets (or null); hide them.
        per_mode: dict[str, ModeStats] = {}
        for mode in MODES:
            bucket = stats.get(mode)
            if isinstance(bucket, dict) and has_activity(bucket):
                per_mode[mode] = mode_stats_from_bucket(bucket)

        account = data.get("account")
        name = account.get("name") if isinstance(account, dict) else None

        return PlayerStats(
            shape=self.shape,
            overall=overall,
            per_mode=per_mode,
            account_name=name if isinstance(name, str) and name else None,
            account_level=_level(account),
            battle_pass_level=_level(data.get("battlePass")),
        )
