from __future__ import annotations

import httpx
import pytest

from fortnite_stats.providers.base.client import BaseHttpClient
from fortnite_stats.providers.base.errors import (
    TransportError,
    UpstreamDataError,
    UpstreamHttpError,
)


def _client(handler) -> BaseHttpClient:
    return BaseHttpClient(
        base_url="https://fortnite-api.com/v2",
        api_key="k",
        transport=httpx.MockTransport(handler),
    )


def test_non_2xx_carries_status_upstream_error_and_body() -> None:
    body = {"status": 404, "error": "the requested account does not exist"}

    with _client(lambda request: httpx.Response(404, json=body)) as http:
        with pytest.raises(UpstreamHttpError) as excinfo:
            http.get_json("/stats/br/v2", params={"name": "nobody"})

    err = excinfo.value
    assert err.status_code == 404
    assert err.reason == "the requested account does not exist"
    assert err.body == body
    assert str(err) == "404 - the requested account does not exist"


def test_non_2xx_without_error_field_uses_reason_phrase() -> None:
    with _client(lambda request: httpx.Response(503, text="down")) as http:
        with pytest.raises(UpstreamHttpError) as excinfo:
            http.get_json("/stats/br/v2")

    assert excinfo.value.reason == "Service Unavailable"
    assert excinfo.value.body == "down"


def test_network_failure_becomes_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    with _client(handler) as http:
        with pytest.raises(TransportError, match="Name or service not known"):
            http.get_json("/stats/br/v2")


def test_non_object_json_is_a_data_error() -> None:
    with _client(lambda request: httpx.Response(200, json=[1, 2])) as http:
        with pytest.raises(UpstreamDataError):
            http.get_json("/stats/br/v2")
