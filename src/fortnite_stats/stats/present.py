from __future__ import annotations

from typing import NamedTuple

from fortnite_stats.providers.base.types import ModeStats, PlayerStats


class Line(NamedTuple):
    """One line of terminal output. `color` is a display hint only."""

    text: str
    color: str | None = None


def format_count(value: int | None) -> str:
    return str(value or 0)


def format_rate(fraction: float) -> str:
    return f"{fraction * 100:.2f}%"


def format_ratio(value: float) -> str:
    return f"{value:.2f}"


def format_hours(minutes: int) -> str:
    return str(minutes // 60)


def _mode_lines(stats: ModeStats) -> list[Line]:
    return [
        Line(f"Wins: {format_count(stats.wins)}"),
        Line(f"Win Rate: {format_rate(stats.win_rate)}"),
        Line(f"Matches: {format_count(stats.matches)}"),
        Line(f"Kills: {format_count(stats.kills)}"),
        Line(f"K/D: {format_ratio(stats.kd_ratio)}"),
    ]


def render_player_stats(stats: PlayerStats, identifier: str) -> list[Line]:
    lines = [Line(""), Line(f"=== {stats.account_name or identifier} ===", "green")]

    if stats.account_level:
        lines.append(Line(f"Account Level: {stats.account_level}", "blue"))
    if stats.battle_pass_level:
        lines.append(Line(f"Battle Pass Level: {stats.battle_pass_level}", "blue"))

    lines.append(Line(""))
    if stats.overall is not None:
        lines.append(Line("OVERALL STATS", "cyan"))
        lines.extend(_mode_lines(stats.overall))
        lines.append(Line(f"Time Played: {format_hours(stats.overall.minutes_played)} hours"))
    else:
        lines.append(Line("No overall stats available", "yellow"))

    if not stats.per_mode:
        lines.extend([Line(""), Line("No mode-specific stats available", "yellow")])
        return lines

    for mode, mode_stats in stats.per_mode.items():
        lines.append(Line(""))
        lines.append(Line(mode.upper(), "cyan"))
        lines.extend(_mode_lines(mode_stats))

    return lines
