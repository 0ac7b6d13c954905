from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from .errors import TransportError, UpstreamDataError, UpstreamHttpError

logger = logging.getLogger(__name__)

Json = dict[str, Any]


def _decode_body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


def _error_message(resp: httpx.Response, body: Any) -> str:
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, str) and err:
            return err
    return resp.reason_phrase or "Could not fetch stats"


@dataclass
class BaseHttpClient:
    """
    Provider-agnostic HTTP client wrapper.

    - Uses a single underlying httpx.Client for the whole invocation.
    - Sends the provider credential as the `Authorization` header on every request.
    - Maps transport failures and non-2xx answers onto the stats error taxonomy.
    """

    base_url: str
    api_key: str | None = field(default=None, repr=False)
    timeout_s: float = 30.0
    connect_timeout_s: float = 10.0
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.BaseTransport | None = None

    def __post_init__(self) -> None:
        headers = dict(self.headers)
        if self.api_key:
            headers["Authorization"] = self.api_key
        self._client = httpx.Client(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers=headers,
            transport=self.transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BaseHttpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def request_json_with_status(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> tuple[Json, int]:
        """
        Perform an HTTP request and return parsed JSON (dict) plus the status code.
        Raises TransportError on network issues, UpstreamHttpError on non-2xx and
        UpstreamDataError when the body is not a JSON object.
        """
        logger.debug("%s %s params=%s", method, path, dict(params or {}))
        try:
            resp = self._client.request(
                method=method,
                url=path.lstrip("/"),
                params=params,
                headers=headers,
            )
        except httpx.TransportError as e:
            raise TransportError(str(e) or type(e).__name__) from e

        if resp.is_error:
            body = _decode_body(resp)
            raise UpstreamHttpError(resp.status_code, _error_message(resp, body), body=body)

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamDataError("Response was not valid JSON.") from e

        if not isinstance(data, dict):
            raise UpstreamDataError(f"Expected JSON object, got {type(data).__name__}")

        return data, resp.status_code

    def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        data, _ = self.request_json_with_status(method, path, params=params, headers=headers)
        return data

    def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        return self.request_json("GET", path, params=params, headers=headers)

    def get_json_with_status(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> tuple[Json, int]:
        return self.request_json_with_status("GET", path, params=params, headers=headers)
