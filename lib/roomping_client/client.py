from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

import httpx

from .config_types import ClientConfig, check_environment
from .environments import compose_url, resolve_host
from .transport import AsyncTransport, RequestSpec


class RoompingClient:
    def __init__(
            self,
            environment: str | None = None,
            cfg: ClientConfig | Mapping[str, Any] | None = None,
            *,
            transport: httpx.AsyncBaseTransport | None = None,
    ):
        check_environment(environment)
        if not isinstance(cfg, ClientConfig):
            cfg = ClientConfig.from_options(environment, cfg)
        elif environment:
            cfg = replace(cfg, environment=environment)
        self._cfg = cfg
        self._t = AsyncTransport(cfg, transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> RoompingClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def build_api_url(self, endpoint: str) -> str:
        host = self._cfg.host or resolve_host(self._cfg.environment)
        return compose_url(self._cfg.protocol, host, self._cfg.api_version, endpoint)

    async def http_request(self, spec: RequestSpec) -> Any:
        """Send a request and return the parsed body of a 2xx response.

        Raises ApiError for any other status; transport failures from httpx
        reach the caller unchanged.
        """
        return await self._t.request(
            spec.method,
            self.build_api_url(spec.endpoint),
            params=spec.params,
            json_body=spec.body,
        )

    # --- HTTP verbs ---
    async def get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.http_request(RequestSpec("GET", endpoint, params or {}))

    async def post(self, endpoint: str, params: Mapping[str, Any] | None = None, body: Any = None) -> Any:
        return await self.http_request(RequestSpec("POST", endpoint, params or {}, body))

    async def put(self, endpoint: str, params: Mapping[str, Any] | None = None, body: Any = None) -> Any:
        return await self.http_request(RequestSpec("PUT", endpoint, params or {}, body))

    async def delete(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.http_request(RequestSpec("DELETE", endpoint, params or {}))

    # --- API methods ---
    async def find_user(self, user_id: int | str) -> Any:
        return await self.get(f"/users/{user_id}")

    async def find_users(self, where: Mapping[str, Any] | None = None) -> Any:
        return await self.get("/users", where)
