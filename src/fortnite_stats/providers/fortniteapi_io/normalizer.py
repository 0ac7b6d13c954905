from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fortnite_stats.core.numbers import as_int, is_number
from fortnite_stats.providers.base.errors import UpstreamDataError
from fortnite_stats.providers.base.types import MODES, Json, ModeStats, PayloadShape, PlayerStats


def derive_mode_stats(wins: int, matches: int, kills: int, minutes_played: int = 0) -> ModeStats:
    """Build ModeStats from raw counters.

    The provider does not report deaths, so a death is approximated as a match
    that was not won: `kd = kills / max(1, matches - wins)`.
    """

    return ModeStats(
        wins=wins,
        matches=matches,
        win_rate=wins / max(matches, 1),
        kills=kills,
        kd_ratio=kills / max(1, matches - wins),
        minutes_played=minutes_played,
    )


def mode_stats_from_counters(bucket: dict[str, Any]) -> ModeStats:
    return derive_mode_stats(
        wins=as_int(bucket.get("placetop1")),
        matches=as_int(bucket.get("matchesplayed")),
        kills=as_int(bucket.get("kills")),
        minutes_played=as_int(bucket.get("minutesplayed")),
    )


def combine_modes(modes: list[ModeStats]) -> ModeStats | None:
    if not modes:
        return None
    return derive_mode_stats(
        wins=sum(m.wins for m in modes),
        matches=sum(m.matches for m in modes),
        kills=sum(m.kills for m in modes),
        minutes_played=sum(m.minutes_played for m in modes),
    )


@dataclass(frozen=True)
class FortniteApiIoNormalizer:
    shape: PayloadShape = PayloadShape.B

    def normalize(self, payload: Json) -> PlayerStats:
        account = payload.get("account")
        if not isinstance(account, dict):
            raise UpstreamDataError("Response has no `account` object")

        global_stats = payload.get("global_stats")
        if not isinstance(global_stats, dict):
            global_stats = {}

        # Unlike fortnite-api.com, a mode is shown whenever the provider sends it, zeros included.
        per_mode: dict[str, ModeStats] = {}
        for mode in MODES:
            bucket = global_stats.get(mode)
            if isinstance(bucket, dict):
                per_mode[mode] = mode_stats_from_counters(bucket)

        name = payload.get("name")
        level = account.get("level")

        return PlayerStats(
            shape=self.shape,
            overall=combine_modes(list(per_mode.values())),
            per_mode=per_mode,
            account_name=name if isinstance(name, str) and name else None,
            account_level=as_int(level) if is_number(level) else None,
        )
