"""Contract for the server connection used by the resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from uuid import UUID

    from playback_resolver.models import ItemMetadata, PlaybackInfoResponse


@runtime_checkable
class PlaybackTransport(Protocol):
    """Sends requests to the media server.

    Implementations raise MusicAssistantError subclasses, aiohttp.ClientError or
    TimeoutError when a request cannot be completed. They do not retry.
    """

    async def post_playback_info(
        self, item_id: UUID, body: dict[str, Any]
    ) -> PlaybackInfoResponse:
        """Report the playback constraints and return the playable media sources."""
        ...

    async def get_item_metadata(self, item_id: UUID) -> ItemMetadata | None:
        """Return descriptive metadata of the item, None when not available."""
        ...
