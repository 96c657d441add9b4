from __future__ import annotations

from typing import Any

import httpx

# Raised by httpx when no response was received; passed through untouched.
TransportError = httpx.TransportError


class RoompingClientError(Exception):
    """Base client error."""


class ApiError(RoompingClientError):
    def __init__(self, status_code: int, url: str, body: Any = None):
        super().__init__(f"{status_code} - {url} failed")
        self.status_code = status_code
        self.url = url
        self.body = body

    @property
    def code(self) -> int:
        return self.status_code

    @property
    def meta(self) -> Any:
        return self.body
