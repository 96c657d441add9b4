from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import ApiError

log = logging.getLogger(__name__)

USER_AGENT = "roomping-client/0.1.0"
API_KEY_HEADER = "X-Roomping-API-Key"


@dataclass(frozen=True)
class RequestSpec:
    method: str
    endpoint: str
    params: Mapping[str, Any] = field(default_factory=dict)
    body: Any = None
    # Replaced by the transport's own headers, never merged.
    headers: Mapping[str, str] | None = None


def is_response_successful(status_code: int) -> bool:
    return 200 <= status_code < 300


class AsyncTransport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            API_KEY_HEADER: self._cfg.api_key,
        }

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._cfg.timeout_s,
                headers={"User-Agent": USER_AGENT},
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
            self,
            method: str,
            url: str,
            *,
            params: Mapping[str, Any] | None = None,
            json_body: Any | None = None,
    ) -> Any:
        client = self._get_client()
        if self._cfg.debug:
            log.debug("%s %s params=%s", method, url, dict(params or {}))

        # httpx.TransportError propagates as-is.
        r = await client.request(
            method,
            url,
            params=dict(params or {}),
            json=json_body,
            headers=self.headers(),
        )

        data = _parse_body(r)
        if self._cfg.debug:
            log.debug("%s %s -> %s", method, url, r.status_code)

        if not is_response_successful(r.status_code):
            raise ApiError(r.status_code, url, data)
        return data


def _parse_body(r: httpx.Response) -> Any:
    if not r.content:
        return None
    try:
        return r.json()
    except ValueError:
        return r.text
