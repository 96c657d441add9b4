from __future__ import annotations

PRODUCTION = "production"
STAGING = "staging"
TESTING = "testing"
DEVELOPMENT = "development"

DEFAULT_HOST = "api-dev.roomping.com"

_HOSTS = {
    PRODUCTION: "api.roomping.com",
    STAGING: "api-test.roomping.com",
    TESTING: "api-test.roomping.com",
    DEVELOPMENT: DEFAULT_HOST,
}


def resolve_host(environment: str | None) -> str:
    """Default API host for an environment; unknown names get the dev host."""
    return _HOSTS.get(environment or DEVELOPMENT, DEFAULT_HOST)


def normalize_endpoint(endpoint: str) -> str:
    endpoint = str(endpoint)
    if not endpoint.startswith("/"):
        endpoint = "/" + endpoint
    return endpoint


def compose_url(protocol: str, host: str, api_version: int | str, endpoint: str) -> str:
    return f"{protocol}://{host}/v{api_version}{normalize_endpoint(endpoint)}"
