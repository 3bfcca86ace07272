"""Adapter: httpx-based Transport implementing the transport port."""

from __future__ import annotations

import time
from typing import Any

import httpx

from ..config.runtime import ClientSettings
from ..domain.query_values import QueryValues
from ..errors import CloudFoundryError, TransportError
from ..observability import log_request
from ..ports.transport import TransportResponse


class HttpxTransport:
    """Concrete Transport backed by a lazily created ``httpx.Client``."""

    def __init__(
        self,
        settings: ClientSettings,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._http_transport = http_transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            headers = {
                "Accept": "application/json",
                "User-Agent": self._settings.user_agent,
            }
            if self._settings.access_token:
                headers["Authorization"] = f"Bearer {self._settings.access_token}"
            self._client = httpx.Client(
                base_url=self._settings.api_url,
                headers=headers,
                timeout=self._settings.request_timeout_seconds,
                verify=not self._settings.skip_tls_verification,
                transport=self._http_transport,
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def request(
        self,
        method: str,
        path: str,
        *,
        params: QueryValues | None = None,
        json: dict[str, Any] | None = None,
    ) -> TransportResponse:
        client = self._get_client()
        fields = {"query": params.encode()} if params else None
        started = time.perf_counter()
        try:
            response = client.request(
                method,
                path,
                params=params.to_params() if params is not None else None,
                json=json,
            )
        except httpx.HTTPError as e:
            log_request(method, path, None, (time.perf_counter() - started) * 1000, error=str(e), extra=fields)
            raise TransportError(f"{method} {path} failed: {e}") from e

        latency_ms = (time.perf_counter() - started) * 1000
        if response.is_error:
            err = CloudFoundryError.from_body(response.status_code, _decode(response))
            log_request(method, path, response.status_code, latency_ms, error=str(err), extra=fields)
            raise err

        log_request(method, path, response.status_code, latency_ms, extra=fields)
        body = _decode(response)
        return TransportResponse(
            status_code=response.status_code,
            body=body if isinstance(body, dict) else {},
            location=response.headers.get("Location"),
        )


def _decode(response: httpx.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return {}
