from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any

Json = dict[str, Any]

ACCOUNT_ID_MIN_LENGTH = 21


class AccountType(StrEnum):
    EPIC = "epic"
    PSN = "psn"
    XBL = "xbl"


class TimeWindow(StrEnum):
    SEASON = "season"
    LIFETIME = "lifetime"


class PayloadShape(StrEnum):
    # Upstream already computes win rate / K/D per mode.
    A = "A"
    # Raw counters only (placetop1, matchesplayed, kills).
    B = "B"


MODES: tuple[str, ...] = ("solo", "duo", "trio", "squad")


def looks_like_account_id(identifier: str) -> bool:
    return len(identifier) >= ACCOUNT_ID_MIN_LENGTH


@dataclass(frozen=True)
class PlayerQuery:
    """
    One stats lookup. The season -> lifetime fallback derives a new query
    through `with_time_window`; nothing else changes between the two requests.
    """

    identifier: str
    account_type: AccountType = AccountType.EPIC
    time_window: TimeWindow = TimeWindow.SEASON

    @property
    def is_account_id(self) -> bool:
        return looks_like_account_id(self.identifier)

    def with_time_window(self, time_window: TimeWindow) -> PlayerQuery:
        return replace(self, time_window=time_window)


@dataclass(frozen=True)
class ModeStats:
    wins: int = 0
    matches: int = 0
    win_rate: float = 0.0
    kills: int = 0
    kd_ratio: float = 0.0
    minutes_played: int = 0


@dataclass(frozen=True)
class PlayerStats:
    shape: PayloadShape
    overall: ModeStats | None
    per_mode: dict[str, ModeStats] = field(default_factory=dict)
    account_name: str | None = None
    account_level: int | None = None
    battle_pass_level: int | None = None
