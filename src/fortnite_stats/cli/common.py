from __future__ import annotations

import json
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

import httpx
import typer

from fortnite_stats.core.config import Settings
from fortnite_stats.providers.base.adapter import StatsFetcher
from fortnite_stats.providers.base.client import BaseHttpClient
from fortnite_stats.providers.base.errors import StatsError, UpstreamHttpError
from fortnite_stats.providers.registry import registry


def http_client(
    settings: Settings, base_url: str, transport: httpx.BaseTransport | None = None
) -> BaseHttpClient:
    return BaseHttpClient(
        base_url=base_url,
        api_key=settings.require_fortnite_api_key(),
        timeout_s=settings.http_timeout_s,
        connect_timeout_s=settings.http_connect_timeout_s,
        transport=transport,
    )


@contextmanager
def fetcher_scope(
    settings: Settings,
    source_key: str,
    transport: httpx.BaseTransport | None = None,
) -> Iterator[StatsFetcher]:
    """
    Context-managed stats fetcher for CLI commands.
    The credential is checked before any client is built; the client is always closed.
    """
    source = registry.get(source_key)
    with http_client(settings, source.base_url(settings), transport=transport) as http:
        yield source.factory(http, settings)


def echo_lines(lines: Sequence[tuple[str, str | None]], *, err: bool = False, color: bool | None = None) -> None:
    for text, fg in lines:
        typer.secho(text, fg=fg, err=err, color=color)


def report_error(exc: Exception, *, color: bool | None = None) -> None:
    """Single place that turns an exception into stderr diagnostics."""

    if isinstance(exc, StatsError):
        lines: list[tuple[str, str | None]] = [(f"Error: {exc.message}", "red")]
        if isinstance(exc, UpstreamHttpError) and exc.body is not None:
            lines.append((f"API Response: {_compact(exc.body)}", "yellow"))
        lines.extend((hint, "yellow") for hint in exc.hints)
    else:
        lines = [(f"Unexpected error: {exc}", "red")]
    echo_lines(lines, err=True, color=color)


def _compact(body: object) -> str:
    if isinstance(body, str):
        return body
    return json.dumps(body, separators=(",", ":"))
