from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .environments import DEVELOPMENT

_ALIASES: dict[str, tuple[str, ...]] = {
    "api_key": ("api_key", "apiKey"),
    "api_version": ("api_version", "apiVersion", "version"),
    "host": ("host",),
    "protocol": ("protocol",),
    "debug": ("debug",),
    "timeout_s": ("timeout_s",),
}


def check_environment(environment: Any) -> None:
    if environment is not None and not isinstance(environment, str):
        raise TypeError(f"environment must be a string, got {type(environment).__name__}")


@dataclass(frozen=True)
class ClientConfig:
    environment: str = DEVELOPMENT
    api_key: str = ""
    api_version: int | str = 1
    host: str = ""
    protocol: str = "https"
    debug: bool = False
    timeout_s: float = 15.0

    @classmethod
    def from_options(
            cls,
            environment: str | None = None,
            options: Mapping[str, Any] | None = None,
    ) -> ClientConfig:
        """Build a config from a loose options mapping.

        Accepts camelCase keys and the legacy ``version`` name for
        ``api_version``. Missing or falsy values keep their defaults.
        """
        check_environment(environment)
        if options is None:
            options = {}
        if not isinstance(options, Mapping):
            raise TypeError(f"options must be a mapping, got {type(options).__name__}")

        values: dict[str, Any] = {}
        for field_name, keys in _ALIASES.items():
            value = next((options[k] for k in keys if options.get(k)), None)
            if value:
                values[field_name] = value
        return cls(environment=environment or DEVELOPMENT, **values)
