"""Jellyfin server support for the playback resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING

from playback_resolver.helpers.aiohttp_client import create_clientsession
from playback_resolver.helpers.identifiers import get_source_id_formatter
from playback_resolver.resolver import MediaSourceResolver

from .api_client import JellyfinAPIClient
from .config import ServerConfig, get_config_entries

if TYPE_CHECKING:
    from collections.abc import Mapping

    from aiohttp import ClientSession
    from music_assistant_models.config_entries import ConfigValueType

__all__ = [
    "JellyfinAPIClient",
    "ServerConfig",
    "create_resolver",
    "get_config_entries",
]


def create_resolver(
    http_session: ClientSession | None, values: Mapping[str, ConfigValueType] | ServerConfig
) -> MediaSourceResolver:
    """
    Create a MediaSourceResolver talking to the configured Jellyfin server.

    Without a http_session a new one is created, honouring the verify_ssl setting.
    This must then be run in the event loop and the caller owns the session
    (available as resolver.requester.transport.http_session).
    """
    config = values if isinstance(values, ServerConfig) else ServerConfig.from_values(values)
    if http_session is None:
        http_session = create_clientsession(verify_ssl=config.verify_ssl)
    api = JellyfinAPIClient(http_session, config)
    return MediaSourceResolver(
        api,
        source_id_formatter=get_source_id_formatter(config.strip_source_id_separators),
        user_id=config.user_id,
    )
