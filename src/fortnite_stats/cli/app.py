from __future__ import annotations

import logging

import typer

from fortnite_stats.cli.common import echo_lines, fetcher_scope, report_error
from fortnite_stats.core.config import load_settings
from fortnite_stats.core.log import configure_logging
from fortnite_stats.providers.base.types import TimeWindow
from fortnite_stats.providers.registry import registry
from fortnite_stats.stats.lookup import lookup_player
from fortnite_stats.stats.present import render_player_stats
from fortnite_stats.stats.resolver import resolve_query

logger = logging.getLogger(__name__)

app = typer.Typer(help="Print Fortnite Battle Royale stats for a player.", add_completion=False)


@app.command()
def stats(
    identifier: str | None = typer.Argument(
        None, help="Epic display name, or an account id (longer than 20 characters)."
    ),
    account_type: str | None = typer.Argument(
        None, help="Account type: epic, psn or xbl (default: epic)."
    ),
    source: str | None = typer.Option(
        None,
        "--source",
        help=f"Stats provider: {' or '.join(registry.keys())} (default from FORTNITE_STATS_SOURCE).",
    ),
    lifetime: bool = typer.Option(
        False,
        "--lifetime/--season",
        help="Start from lifetime stats instead of the current season.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colors."),
) -> None:
    """Fetch stats for IDENTIFIER and print an overall and per-mode summary."""

    configure_logging(verbose)
    color = False if no_color else None

    try:
        settings = load_settings()
        settings.require_fortnite_api_key()

        query = resolve_query(
            identifier,
            account_type,
            time_window=TimeWindow.LIFETIME if lifetime else TimeWindow.SEASON,
        )
        source_key = source or settings.fortnite_stats_source

        typer.secho(
            f"Fetching stats for {query.identifier} using account type {query.account_type}...",
            fg="blue",
            err=True,
            color=color,
        )
        with fetcher_scope(settings, source_key) as fetcher:
            result = lookup_player(fetcher, query)
    except Exception as exc:
        logger.debug("Lookup failed", exc_info=True)
        report_error(exc, color=color)
        raise typer.Exit(code=1) from exc

    echo_lines(render_player_stats(result, query.identifier), color=color)
