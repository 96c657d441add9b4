from __future__ import annotations

import dataclasses

import pytest

from roomping_client import ClientConfig, RoompingClient


def test_defaults() -> None:
    cfg = ClientConfig.from_options()
    assert cfg == ClientConfig()
    assert cfg.environment == "development"
    assert cfg.api_key == ""
    assert cfg.api_version == 1
    assert cfg.host == ""
    assert cfg.protocol == "https"
    assert cfg.debug is False


def test_camel_case_options() -> None:
    cfg = ClientConfig.from_options("production", {"apiKey": "k-1", "apiVersion": 3})
    assert cfg.environment == "production"
    assert cfg.api_key == "k-1"
    assert cfg.api_version == 3


def test_legacy_version_alias() -> None:
    cfg = ClientConfig.from_options("production", {"version": 2})
    assert cfg.api_version == 2


def test_api_version_wins_over_legacy_alias() -> None:
    cfg = ClientConfig.from_options(None, {"api_version": 4, "version": 2})
    assert cfg.api_version == 4


def test_falsy_values_keep_defaults() -> None:
    cfg = ClientConfig.from_options("", {"protocol": "", "api_version": 0, "host": None})
    assert cfg.environment == "development"
    assert cfg.protocol == "https"
    assert cfg.api_version == 1
    assert cfg.host == ""


def test_unknown_options_are_ignored() -> None:
    cfg = ClientConfig.from_options("testing", {"retries": 5})
    assert cfg == ClientConfig(environment="testing")


def test_rejects_non_mapping_options() -> None:
    with pytest.raises(TypeError):
        ClientConfig.from_options("production", ["apiKey", "k"])


def test_rejects_non_string_environment() -> None:
    with pytest.raises(TypeError):
        ClientConfig.from_options(42, {})


def test_config_is_frozen() -> None:
    client = RoompingClient("production", {"api_key": "k"})
    with pytest.raises(dataclasses.FrozenInstanceError):
        client.config.api_key = "other"


def test_environment_argument_overrides_config_object() -> None:
    client = RoompingClient("production", ClientConfig(environment="staging", api_key="k"))
    assert client.config.environment == "production"
    assert client.config.api_key == "k"


def test_config_object_environment_used_when_argument_missing() -> None:
    client = RoompingClient(cfg=ClientConfig(environment="staging"))
    assert client.build_api_url("/x") == "https://api-test.roomping.com/v1/x"


def test_rejects_non_string_environment_with_config_object() -> None:
    with pytest.raises(TypeError):
        RoompingClient(42, ClientConfig())


def test_timeout_defaults_to_fifteen_seconds() -> None:
    assert ClientConfig().timeout_s == 15.0
    assert ClientConfig.from_options("production", {"timeout_s": 60}).timeout_s == 60
