"""Test the Jellyfin server configuration."""

from typing import Any
from unittest.mock import Mock

import aiohttp
import pytest
from music_assistant_models.errors import InvalidDataError

from playback_resolver.constants import DEFAULT_CLIENT_NAME, DEFAULT_DEVICE_NAME
from playback_resolver.helpers.identifiers import canonical_source_id, strip_separators
from playback_resolver.jellyfin import ServerConfig, create_resolver, get_config_entries
from playback_resolver.jellyfin.const import (
    CONF_API_TOKEN,
    CONF_REQUEST_TIMEOUT,
    CONF_STRIP_SOURCE_ID_SEPARATORS,
    CONF_URL,
    CONF_USER_ID,
)

BASE_VALUES: dict[str, Any] = {
    CONF_URL: "https://media.example.org/jellyfin/",
    CONF_API_TOKEN: "token",
    CONF_USER_ID: "user-1",
}


def test_config_entries() -> None:
    """Test the required entries are marked as such."""
    entries = {entry.key: entry for entry in get_config_entries()}

    assert {key for key, entry in entries.items() if entry.required} == {
        CONF_URL,
        CONF_API_TOKEN,
        CONF_USER_ID,
    }
    assert entries[CONF_STRIP_SOURCE_ID_SEPARATORS].default_value is True
    assert entries[CONF_REQUEST_TIMEOUT].category == "advanced"


def test_from_values_defaults() -> None:
    """Test defaults are applied for values that are not given."""
    config = ServerConfig.from_values(BASE_VALUES)

    assert config.url == "https://media.example.org/jellyfin"
    assert config.device_name == DEFAULT_DEVICE_NAME
    assert config.client_name == DEFAULT_CLIENT_NAME
    assert config.verify_ssl is True
    assert config.request_timeout == 30
    assert config.strip_source_id_separators is True
    assert len(config.device_id) == 32


def test_from_values_overrides() -> None:
    """Test given values take precedence over the defaults."""
    config = ServerConfig.from_values(
        {
            **BASE_VALUES,
            "device_id": "living-room",
            "verify_ssl": False,
            CONF_REQUEST_TIMEOUT: 5,
            CONF_STRIP_SOURCE_ID_SEPARATORS: False,
        }
    )

    assert config.device_id == "living-room"
    assert config.verify_ssl is False
    assert config.request_timeout == 5
    assert config.strip_source_id_separators is False


@pytest.mark.parametrize("missing", [CONF_URL, CONF_API_TOKEN, CONF_USER_ID])
def test_from_values_missing_required(missing: str) -> None:
    """Test a missing required value is rejected."""
    values = {**BASE_VALUES, missing: ""}

    with pytest.raises(InvalidDataError, match=missing):
        ServerConfig.from_values(values)


@pytest.mark.parametrize("timeout", [0, -5, "30"])
def test_from_values_invalid_timeout(timeout: Any) -> None:
    """Test an unusable request timeout is rejected."""
    with pytest.raises(InvalidDataError):
        ServerConfig.from_values({**BASE_VALUES, CONF_REQUEST_TIMEOUT: timeout})


@pytest.mark.parametrize(
    ("strip", "formatter"),
    [
        (True, strip_separators),
        (False, canonical_source_id),
    ],
)
def test_create_resolver_source_id_format(strip: bool, formatter: object) -> None:
    """Test the configured source id format is used by the resolver."""
    resolver = create_resolver(Mock(), {**BASE_VALUES, CONF_STRIP_SOURCE_ID_SEPARATORS: strip})

    assert resolver.requester.source_id_formatter is formatter
    assert resolver.requester.user_id == "user-1"


async def test_create_resolver_own_session() -> None:
    """Test a client session is created when none is given."""
    resolver = create_resolver(None, {**BASE_VALUES, "verify_ssl": False})
    http_session = resolver.requester.transport.http_session
    try:
        assert isinstance(http_session, aiohttp.ClientSession)
        assert resolver.requester.transport.config.verify_ssl is False
    finally:
        await http_session.close()
