"""Best-effort lookup of the library metadata of an item."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from playback_resolver.constants import LOGGER_NAME

if TYPE_CHECKING:
    from uuid import UUID

    from playback_resolver.models import ItemMetadata

    from .transport import PlaybackTransport

LOGGER = logging.getLogger(f"{LOGGER_NAME}.enricher")


class MetadataEnricher:
    """Fetches item metadata, playback does not depend on it."""

    def __init__(self, transport: PlaybackTransport, logger: logging.Logger = LOGGER) -> None:
        """Initialize the enricher."""
        self.transport = transport
        self.logger = logger

    async def fetch(self, item_id: UUID) -> ItemMetadata | None:
        """Return the metadata of the item, None on any failure."""
        try:
            return await self.transport.get_item_metadata(item_id)
        except Exception as err:  # noqa: BLE001
            self.logger.warning("Failed to load item for media source %s: %s", item_id, err)
            self.logger.debug("Metadata lookup error details", exc_info=err)
            return None
