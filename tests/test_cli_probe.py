from __future__ import annotations

import httpx
import pytest
from typer.testing import CliRunner

import fortnite_stats.cli.probe as probe_module
from fortnite_stats.cli.probe import Endpoint, app, probe_endpoint
from fortnite_stats.core.config import Settings

SETTINGS = Settings(_env_file=None, fortnite_api_key="k")


def test_probe_endpoint_prints_status_and_body(capsys: pytest.CaptureFixture[str]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/stats/br"
        assert dict(request.url.params) == {"name": "Ninja", "platform": "epic"}
        return httpx.Response(200, json={"status": 200, "data": {"ok": True}})

    ok = probe_endpoint(
        SETTINGS,
        Endpoint("https://fortnite-api.com/v1/stats/br", {"name": "Ninja", "platform": "epic"}),
        transport=httpx.MockTransport(handler),
    )

    out = capsys.readouterr().out
    assert ok is True
    assert "Testing endpoint: https://fortnite-api.com/v1/stats/br" in out
    assert "Status: 200" in out
    assert '"ok": true' in out


def test_probe_endpoint_reports_failures_without_raising(
    capsys: pytest.CaptureFixture[str],
) -> None:
    transport = httpx.MockTransport(
        lambda request: httpx.Response(410, json={"status": 410, "error": "gone"})
    )

    ok = probe_endpoint(SETTINGS, Endpoint("https://fortnite-api.com/v1/stats/br"), transport=transport)

    err = capsys.readouterr().err
    assert ok is False
    assert "Status: 410" in err
    assert '"error": "gone"' in err


def test_probe_requires_credential(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        probe_module, "load_settings", lambda: Settings(_env_file=None, fortnite_api_key=None)
    )

    result = CliRunner().invoke(app, [])

    assert result.exit_code == 1
    assert "FORTNITE_API_KEY environment variable is required" in result.output


def test_probe_endpoint_keeps_url_query_and_lets_params_override(
    capsys: pytest.CaptureFixture[str],
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": 200})

    ok = probe_endpoint(
        SETTINGS,
        Endpoint("https://fortnite-api.com/v2/stats/br/v2?name=Ninja&accountType=epic", {"accountType": "psn"}),
        transport=httpx.MockTransport(handler),
    )

    assert ok is True
    assert len(seen) == 1
    assert seen[0].url.path == "/v2/stats/br/v2"
    assert dict(seen[0].url.params) == {"name": "Ninja", "accountType": "psn"}
    assert '"accountType": "psn"' in capsys.readouterr().out


def test_probe_endpoint_prints_actual_success_status(capsys: pytest.CaptureFixture[str]) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(201, json={"created": True}))

    ok = probe_endpoint(SETTINGS, Endpoint("https://fortnite-api.com/v1/stats/br"), transport=transport)

    out = capsys.readouterr().out
    assert ok is True
    assert "Status: 201" in out
    assert "Status: 200" not in out
