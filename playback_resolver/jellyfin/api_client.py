"""API Client for Jellyfin."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import aiohttp
from music_assistant_models.errors import (
    InvalidDataError,
    LoginFailed,
    MediaNotFoundError,
    ProviderUnavailableError,
    ResourceTemporarilyUnavailable,
)

from playback_resolver.constants import LOGGER_NAME
from playback_resolver.helpers.aiohttp_client import get_package_version
from playback_resolver.helpers.util import log_verbose

from .const import ENDPOINT_PLAYBACK_INFO, ENDPOINT_USER_ITEM, HEADER_AUTHORIZATION
from .parsers import parse_item_metadata, parse_playback_info

if TYPE_CHECKING:
    from uuid import UUID

    from aiohttp import ClientResponse, ClientSession

    from playback_resolver.models import ItemMetadata, PlaybackInfoResponse

    from .config import ServerConfig

LOGGER = logging.getLogger(f"{LOGGER_NAME}.jellyfin")


class JellyfinAPIClient:
    """Client for the parts of the Jellyfin API needed to resolve media sources."""

    def __init__(
        self,
        http_session: ClientSession,
        config: ServerConfig,
        logger: logging.Logger = LOGGER,
    ) -> None:
        """Initialize API client."""
        self.http_session = http_session
        self.config = config
        self.logger = logger

    @property
    def authorization(self) -> str:
        """Return the MediaBrowser authorization header value."""
        return (
            f'MediaBrowser Client="{self.config.client_name}", '
            f'Device="{self.config.device_name}", '
            f'DeviceId="{self.config.device_id}", '
            f'Version="{get_package_version()}", '
            f'Token="{self.config.api_token}"'
        )

    async def post_playback_info(
        self, item_id: UUID, body: dict[str, Any]
    ) -> PlaybackInfoResponse:
        """Request the playable media sources of an item."""
        data = await self._request(
            "POST",
            ENDPOINT_PLAYBACK_INFO.format(item_id=item_id.hex),
            params={"userId": self.config.user_id},
            json=body,
        )
        return parse_playback_info(data)

    async def get_item_metadata(self, item_id: UUID) -> ItemMetadata | None:
        """Return the library metadata of an item, None if the item does not exist."""
        try:
            data = await self._request(
                "GET",
                ENDPOINT_USER_ITEM.format(user_id=self.config.user_id, item_id=item_id.hex),
            )
        except MediaNotFoundError:
            return None
        return parse_item_metadata(data)

    async def _request(self, method: str, endpoint: str, **kwargs: Any) -> dict[str, Any]:
        """Handle API requests internally."""
        url = f"{self.config.url}/{endpoint}"
        headers = kwargs.pop("headers", {})
        headers[HEADER_AUTHORIZATION] = self.authorization

        log_verbose(self.logger, "Making %s request to Jellyfin API: %s", method, endpoint)
        try:
            async with self.http_session.request(
                method,
                url,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.config.request_timeout),
                **kwargs,
            ) as response:
                return await self._handle_response(response)
        except TimeoutError as err:
            raise ProviderUnavailableError(f"Jellyfin API timeout: {endpoint}") from err
        except aiohttp.ClientError as err:
            raise ProviderUnavailableError(f"Failed to connect to Jellyfin API: {err}") from err

    async def _handle_response(self, response: ClientResponse) -> dict[str, Any]:
        """Handle API response and common error conditions."""
        if response.status in (401, 403):
            raise LoginFailed(f"Authentication failed ({response.status})")
        if response.status == 404:
            raise MediaNotFoundError(f"Item not found: {response.url}")
        if response.status == 429:
            raise ResourceTemporarilyUnavailable("Jellyfin rate limit reached")
        if response.status >= 400:
            text = await response.text()
            self.logger.error("API error: %s - %s", response.status, text)
            raise ResourceTemporarilyUnavailable(f"API error ({response.status})")

        try:
            data = await response.json()
        except (aiohttp.ContentTypeError, ValueError) as err:
            raise InvalidDataError("Invalid JSON response from API") from err
        if not isinstance(data, dict):
            raise InvalidDataError("Unexpected response from API")
        return data
