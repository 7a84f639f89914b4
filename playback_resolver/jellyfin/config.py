"""Configuration for connecting to a Jellyfin server."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from uuid import uuid4

from mashumaro import DataClassDictMixin
from music_assistant_models.config_entries import ConfigEntry, ConfigValueType
from music_assistant_models.enums import ConfigEntryType
from music_assistant_models.errors import InvalidDataError

from playback_resolver.constants import (
    DEFAULT_CLIENT_NAME,
    DEFAULT_DEVICE_NAME,
    DEFAULT_REQUEST_TIMEOUT,
)

from .const import (
    CONF_API_TOKEN,
    CONF_CLIENT_NAME,
    CONF_DEVICE_ID,
    CONF_DEVICE_NAME,
    CONF_REQUEST_TIMEOUT,
    CONF_STRIP_SOURCE_ID_SEPARATORS,
    CONF_URL,
    CONF_USER_ID,
    CONF_VERIFY_SSL,
)

CONFIG_ENTRIES: tuple[ConfigEntry, ...] = (
    ConfigEntry(
        key=CONF_URL,
        type=ConfigEntryType.STRING,
        label="Server",
        required=True,
        description="The url of the Jellyfin server to connect to, e.g. http://jellyfin.local:8096",
    ),
    ConfigEntry(
        key=CONF_API_TOKEN,
        type=ConfigEntryType.SECURE_STRING,
        label="Access token",
        required=True,
        description="API key or user access token used to authenticate requests.",
    ),
    ConfigEntry(
        key=CONF_USER_ID,
        type=ConfigEntryType.STRING,
        label="User id",
        required=True,
        description="Id of the user on whose behalf items are resolved.",
    ),
    ConfigEntry(
        key=CONF_DEVICE_ID,
        type=ConfigEntryType.STRING,
        label="Device id",
        required=False,
        description="Stable id identifying this device to the server. "
        "A random id is generated when omitted.",
    ),
    ConfigEntry(
        key=CONF_DEVICE_NAME,
        type=ConfigEntryType.STRING,
        label="Device name",
        required=False,
        default_value=DEFAULT_DEVICE_NAME,
    ),
    ConfigEntry(
        key=CONF_CLIENT_NAME,
        type=ConfigEntryType.STRING,
        label="Client name",
        required=False,
        default_value=DEFAULT_CLIENT_NAME,
        category="advanced",
    ),
    ConfigEntry(
        key=CONF_VERIFY_SSL,
        type=ConfigEntryType.BOOLEAN,
        label="Verify SSL",
        required=False,
        default_value=True,
        description="Whether or not to verify the certificate of SSL/TLS connections.",
        category="advanced",
    ),
    ConfigEntry(
        key=CONF_REQUEST_TIMEOUT,
        type=ConfigEntryType.INTEGER,
        label="Request timeout (seconds)",
        required=False,
        default_value=DEFAULT_REQUEST_TIMEOUT,
        category="advanced",
    ),
    ConfigEntry(
        key=CONF_STRIP_SOURCE_ID_SEPARATORS,
        type=ConfigEntryType.BOOLEAN,
        label="Send media source id without dashes",
        required=False,
        default_value=True,
        description="Jellyfin only honours the requested audio and subtitle streams when the "
        "media source id is sent without dashes. Disable for servers that match on the "
        "canonical id form.",
        category="advanced",
    ),
)


def get_config_entries() -> tuple[ConfigEntry, ...]:
    """Return the config entries needed to connect to a server."""
    return CONFIG_ENTRIES


@dataclass(frozen=True)
class ServerConfig(DataClassDictMixin):
    """Resolved connection settings for a Jellyfin server."""

    url: str
    api_token: str
    user_id: str
    device_id: str
    device_name: str = DEFAULT_DEVICE_NAME
    client_name: str = DEFAULT_CLIENT_NAME
    verify_ssl: bool = True
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT
    strip_source_id_separators: bool = True

    @classmethod
    def from_values(cls, values: Mapping[str, ConfigValueType]) -> ServerConfig:
        """Create the config from raw config values, applying defaults of the entries."""
        resolved: dict[str, ConfigValueType] = {}
        for entry in CONFIG_ENTRIES:
            value = values.get(entry.key)
            if value in (None, ""):
                value = entry.default_value
            if entry.required and value in (None, ""):
                raise InvalidDataError(f"Missing required config value: {entry.key}")
            if value is not None:
                resolved[entry.key] = value
        if not resolved.get(CONF_DEVICE_ID):
            resolved[CONF_DEVICE_ID] = uuid4().hex
        timeout = resolved.get(CONF_REQUEST_TIMEOUT)
        if not isinstance(timeout, int) or timeout <= 0:
            raise InvalidDataError(f"Invalid request timeout: {timeout}")
        return cls(
            url=str(resolved[CONF_URL]).rstrip("/"),
            api_token=str(resolved[CONF_API_TOKEN]),
            user_id=str(resolved[CONF_USER_ID]),
            device_id=str(resolved[CONF_DEVICE_ID]),
            device_name=str(resolved[CONF_DEVICE_NAME]),
            client_name=str(resolved[CONF_CLIENT_NAME]),
            verify_ssl=bool(resolved[CONF_VERIFY_SSL]),
            request_timeout=timeout,
            strip_source_id_separators=bool(resolved[CONF_STRIP_SOURCE_ID_SEPARATORS]),
        )
