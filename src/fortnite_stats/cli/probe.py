from __future__ import annotations

import json
from dataclasses import dataclass, field

import httpx
import typer

from fortnite_stats.cli.common import http_client, report_error
from fortnite_stats.core.config import Settings, load_settings
from fortnite_stats.core.log import configure_logging
from fortnite_stats.providers.base.errors import StatsError, UpstreamHttpError

app = typer.Typer(help="Probe stats endpoints and dump their raw responses.", add_completion=False)


@dataclass(frozen=True)
class Endpoint:
    url: str
    params: dict[str, str] = field(default_factory=dict)


LEGACY_ENDPOINTS: tuple[Endpoint, ...] = (
    Endpoint("https://fortnite-api.com/v1/stats/br", {"name": "Ninja", "platform": "epic"}),
    Endpoint("https://fortnite-api.com/v1/stats/br/search", {"name": "Ninja", "platform": "epic"}),
    Endpoint("https://fortnite-api.com/v1/stats/br/account", {"name": "Ninja", "platform": "epic"}),
)


def probe_endpoint(
    settings: Settings, endpoint: Endpoint, transport: httpx.BaseTransport | None = None
) -> bool:
    """GET one endpoint and print what came back. Returns False instead of raising on failure."""

    url = httpx.URL(endpoint.url)
    # Query string in the URL first; explicit params win.
    params = {**dict(url.params), **endpoint.params}

    typer.secho(f"Testing endpoint: {endpoint.url}", fg="blue")
    typer.secho(f"Params: {json.dumps(params)}", fg="blue")

    try:
        with http_client(settings, f"{url.scheme}://{url.netloc.decode()}", transport=transport) as http:
            data, status = http.get_json_with_status(url.path, params=params)
    except UpstreamHttpError as e:
        typer.secho(f"Error: {e.reason}", fg="red", err=True)
        typer.secho(f"Status: {e.status_code}", fg="red", err=True)
        typer.secho(f"Response: {json.dumps(e.body, indent=2)}", fg="red", err=True)
        return False
    except StatsError as e:
        typer.secho(f"Error: {e.message}", fg="red", err=True)
        return False

    typer.secho(f"Status: {status}", fg="green")
    typer.secho(f"Response: {json.dumps(data, indent=2)}", fg="green")
    return True


def _parse_param(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise typer.BadParameter(f"Expected KEY=VALUE, got {raw!r}")
    return key, value


@app.command()
def probe(
    urls: list[str] | None = typer.Argument(
        None, help="Endpoints to test (default: the legacy v1 stats endpoints)."
    ),
    param: list[str] | None = typer.Option(
        None, "--param", "-p", help="Query parameter KEY=VALUE applied to every URL."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests."),
) -> None:
    """Call each endpoint with the configured credential and print status plus JSON body."""

    configure_logging(verbose)

    try:
        settings = load_settings()
        settings.require_fortnite_api_key()
    except StatsError as exc:
        report_error(exc)
        raise typer.Exit(code=1) from exc

    if urls:
        params = dict(_parse_param(p) for p in param or [])
        endpoints = [Endpoint(url, params) for url in urls]
    else:
        endpoints = list(LEGACY_ENDPOINTS)

    typer.secho("Testing Fortnite API endpoints...", fg="blue")
    results = []
    for endpoint in endpoints:
        results.append(probe_endpoint(settings, endpoint))
        typer.secho("-----------------------------------", fg="yellow")

    if not all(results):
        raise typer.Exit(code=1)
