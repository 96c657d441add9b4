from .client import RoompingClient
from .config_types import ClientConfig
from .environments import resolve_host
from .errors import ApiError, RoompingClientError, TransportError
from .transport import RequestSpec

__all__ = [
    "RoompingClient",
    "ClientConfig",
    "RequestSpec",
    "ApiError",
    "RoompingClientError",
    "TransportError",
    "resolve_host",
]
